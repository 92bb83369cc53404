import math
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .constants import PLANE_AXES, Plane
from .formatting import coerce_coordinate, format_coordinate
from .point_2d import Point2D

if TYPE_CHECKING:
    from .vector_3d import Vector3D


class Point3D(BaseModel):
    """Point in three-dimensional space, on a grid centered around (0, 0, 0).

    Points are immutable: every setter returns a new point and leaves the
    original untouched.
    """

    model_config = ConfigDict(frozen=True)

    x: float = Field(default=0.0, strict=True)
    y: float = Field(default=0.0, strict=True)
    z: float = Field(default=0.0, strict=True)

    @field_validator("x", "y", "z", mode="before")
    @classmethod
    def validate_coordinate(cls, v: Any) -> Any:
        return coerce_coordinate(v)

    @model_validator(mode="before")
    @classmethod
    def coerce_sequence(cls, data: Any) -> Any:
        """Accept an (x, y, z) tuple or list wherever a point is validated."""
        if isinstance(data, (tuple, list)):
            if len(data) != 3:
                raise ValueError(f"Need 3 coordinates, received {len(data)}")
            x, y, z = data
            return {"x": x, "y": y, "z": z}
        return data

    @classmethod
    def zero(cls) -> "Point3D":
        return cls()

    @classmethod
    def new(cls, x: float, y: float, z: float) -> "Point3D":
        return cls(x=x, y=y, z=z)

    @classmethod
    def from_tuple(cls, value: tuple[float, float, float]) -> "Point3D":
        return cls.model_validate(value)

    def set_x(self, x: float) -> "Point3D":
        return Point3D(x=x, y=self.y, z=self.z)

    def set_y(self, y: float) -> "Point3D":
        return Point3D(x=self.x, y=y, z=self.z)

    def set_z(self, z: float) -> "Point3D":
        return Point3D(x=self.x, y=self.y, z=z)

    def shift(self, dx: float, dy: float, dz: float) -> "Point3D":
        """Return the point moved by the given deltas (ints or floats)."""
        return Point3D(x=self.x + dx, y=self.y + dy, z=self.z + dz)

    def get_distance(self, other: "Point3D") -> float:
        """Euclidean distance between this point and ``other``."""
        return math.sqrt(
            (self.x - other.x) ** 2 + (self.y - other.y) ** 2 + (self.z - other.z) ** 2
        )

    def to_vector3d(self, target: "Point3D") -> "Vector3D":
        """Build a Vector3D anchored at this point.

        ``target`` is stored as given, exactly like ``Vector3D.new``. Use
        ``Vector3D.with_absolute_target`` to have it made relative first.
        """
        from .vector_3d import Vector3D

        return Vector3D(origin=self, target=target)

    def to_point2d_along_plane(self, plane: Plane) -> Point2D:
        first, second = PLANE_AXES[Plane(plane)]
        return Point2D(x=getattr(self, first), y=getattr(self, second))

    def __add__(self, other: object) -> "Point3D":
        if not isinstance(other, Point3D):
            return NotImplemented
        return Point3D(x=self.x + other.x, y=self.y + other.y, z=self.z + other.z)

    def __sub__(self, other: object) -> "Point3D":
        if not isinstance(other, Point3D):
            return NotImplemented
        return Point3D(x=self.x - other.x, y=self.y - other.y, z=self.z - other.z)

    def __str__(self) -> str:
        coordinates = (format_coordinate(value) for value in (self.x, self.y, self.z))
        return f"({','.join(coordinates)})"
