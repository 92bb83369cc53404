"""Three-dimensional vector anchored at an absolute origin.

A Vector3D is a pair of points: ``origin`` is an absolute position while
``target`` is the end of the vector *relative to* that origin. Every
operation below (addition, subtraction, shifting, display) keeps that
reading of ``target``.
"""

import logging

from pydantic import BaseModel, ConfigDict

from .constants import TARGET_PRECISION, Plane
from .formatting import format_coordinate, round_to_precision
from .point_3d import Point3D
from .vector_2d import Vector2D

logger = logging.getLogger(__name__)


class Vector3D(BaseModel):
    model_config = ConfigDict(frozen=True)

    origin: Point3D = Point3D()
    target: Point3D = Point3D()  # relative to origin

    @classmethod
    def zero(cls) -> "Vector3D":
        """Vector with both origin and target at (0, 0, 0)."""
        return cls(origin=Point3D.zero(), target=Point3D.zero())

    @classmethod
    def null(cls, origin: Point3D) -> "Vector3D":
        """Zero-length vector anchored at ``origin``."""
        return cls(origin=origin, target=Point3D.zero())

    @classmethod
    def new(cls, origin: Point3D, target: Point3D) -> "Vector3D":
        """Vector from ``origin`` with an already relative ``target``."""
        return cls(origin=origin, target=target)

    @classmethod
    def with_absolute_target(cls, origin: Point3D, target: Point3D) -> "Vector3D":
        """Vector from ``origin`` ending at the absolute point ``target``.

        Example:
            >>> str(Vector3D.with_absolute_target(Point3D.new(1, 0, 2), Point3D.new(2, 1, 0)))
            '(1,0,2)[1,1,-2]'
        """
        return cls(origin=origin, target=target - origin)

    @classmethod
    def from_2d_vector(cls, vector2d: Vector2D, origin_z: float, target_z: float) -> "Vector3D":
        """Lift a Vector2D into 3D, taking x and y as-is and adding the z coordinates.

        The 2D target is copied unchanged; no relative/absolute conversion happens here.
        """
        logger.debug(f"Lifting 2D vector {vector2d!r} with z=({origin_z}, {target_z})")
        return cls(
            origin=Point3D(x=vector2d.origin.x, y=vector2d.origin.y, z=origin_z),
            target=Point3D(x=vector2d.target.x, y=vector2d.target.y, z=target_z),
        )

    def set_origin(self, origin: Point3D) -> "Vector3D":
        """Move the origin; the relative target moves the endpoint along with it."""
        return Vector3D(origin=origin, target=self.target)

    def set_target(self, target: Point3D) -> "Vector3D":
        return Vector3D(origin=self.origin, target=target)

    def set_target_absolute(
        self, target: Point3D, precision: int = TARGET_PRECISION
    ) -> "Vector3D":
        """Set the target from an absolute point.

        The stored relative target is ``target - origin`` with each coordinate
        rounded to ``precision`` decimal digits (ties away from zero) to absorb
        float arithmetic noise.
        """
        offset = target - self.origin
        relative = Point3D(
            x=round_to_precision(offset.x, precision),
            y=round_to_precision(offset.y, precision),
            z=round_to_precision(offset.z, precision),
        )
        if relative != offset:
            logger.debug(f"Rounded relative target {offset} to {relative}")
        return Vector3D(origin=self.origin, target=relative)

    def shift(self, dx: float, dy: float, dz: float) -> "Vector3D":
        """Translate the whole vector.

        Only the origin changes: the target is relative, so both endpoints move.
        """
        return Vector3D(origin=self.origin.shift(dx, dy, dz), target=self.target)

    def get_magnitude(self) -> float:
        # Distance between the stored origin and target fields
        return self.origin.get_distance(self.target)

    @staticmethod
    def vector2d_along_plane(vector3d: "Vector3D", plane: Plane) -> Vector2D:
        """Project ``vector3d`` onto the two axes selected by ``plane``."""
        projected = Vector2D(
            origin=vector3d.origin.to_point2d_along_plane(plane),
            target=vector3d.target.to_point2d_along_plane(plane),
        )
        logger.debug(f"Projected {vector3d} along {Plane(plane).name} to {projected!r}")
        return projected

    def to_vector2d_along_plane(self, plane: Plane) -> Vector2D:
        return Vector3D.vector2d_along_plane(self, plane)

    def __add__(self, other: object) -> "Vector3D":
        # Keeps the left-hand origin
        if not isinstance(other, Vector3D):
            return NotImplemented
        return Vector3D(origin=self.origin, target=self.target + other.target)

    def __sub__(self, other: object) -> "Vector3D":
        if not isinstance(other, Vector3D):
            return NotImplemented
        return Vector3D(origin=self.origin, target=self.target - other.target)

    def __str__(self) -> str:
        """Format as ``(origin.x,origin.y,origin.z)[target.x,target.y,target.z]``."""
        target = self.target
        coordinates = (format_coordinate(value) for value in (target.x, target.y, target.z))
        return f"{self.origin}[{','.join(coordinates)}]"
