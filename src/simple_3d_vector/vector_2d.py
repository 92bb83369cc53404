from pydantic import BaseModel, ConfigDict

from .point_2d import Point2D


class Vector2D(BaseModel):
    """Two-dimensional vector exchanged with Vector3D plane conversions."""

    model_config = ConfigDict(frozen=True)

    origin: Point2D = Point2D()
    target: Point2D = Point2D()  # relative to origin
