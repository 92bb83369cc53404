from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .formatting import coerce_coordinate


class Point2D(BaseModel):
    """Point on a two-dimensional grid, the planar counterpart of Point3D."""

    model_config = ConfigDict(frozen=True)

    x: float = Field(default=0.0, strict=True)
    y: float = Field(default=0.0, strict=True)

    @field_validator("x", "y", mode="before")
    @classmethod
    def validate_coordinate(cls, v: Any) -> Any:
        return coerce_coordinate(v)

    @classmethod
    def new(cls, x: float, y: float) -> "Point2D":
        return cls(x=x, y=y)
