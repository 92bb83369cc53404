"""Grid-based 3D points and vectors with conversions to and from 2D."""

from .constants import PLANE_AXES, TARGET_PRECISION, Plane
from .point_2d import Point2D
from .point_3d import Point3D
from .vector_2d import Vector2D
from .vector_3d import Vector3D

__all__ = [
    "PLANE_AXES",
    "TARGET_PRECISION",
    "Plane",
    "Point2D",
    "Point3D",
    "Vector2D",
    "Vector3D",
]
