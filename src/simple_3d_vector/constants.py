"""Shared constants for Point3D and Vector3D data models."""

from enum import StrEnum

# Decimal digits kept by Vector3D.set_target_absolute
TARGET_PRECISION = 6


class Plane(StrEnum):
    """Coordinate plane used to project 3D values onto the 2D types."""

    XY = "xy"
    YZ = "yz"
    ZX = "zx"


# (first 2D axis, second 2D axis) taken from the 3D coordinates
PLANE_AXES: dict[Plane, tuple[str, str]] = {
    Plane.XY: ("x", "y"),
    Plane.YZ: ("z", "y"),
    Plane.ZX: ("z", "x"),
}
