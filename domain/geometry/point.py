from typing import Literal, Optional, Sequence, Tuple
from pydantic import Field, field_validator
import math
from domain.geometry.constants import POINT_TOLERANCE
from utils.base_model import ImmutableModel


def float_equals(a: float, b: float, tolerance: Optional[float] = None) -> bool:
    """
    Compare two coordinates with a hybrid absolute/relative tolerance.

    The difference is measured against max(1, |a|, |b|), so values that sum
    to zero (e.g. 1 and -1) compare safely.
    """
    if tolerance is None:
        tolerance = POINT_TOLERANCE
    if a == b:
        return True
    return abs(a - b) < tolerance * max(1.0, abs(a), abs(b))


class Point(ImmutableModel):
    """
    Represents a 2D point in Cartesian coordinates.

    Points are both a geometry variant in their own right and the vertices
    of every other geometry.
    """
    kind: Literal["Point"] = "Point"
    x: float = Field(description="X coordinate")
    y: float = Field(description="Y coordinate")

    @field_validator("x", "y")
    @classmethod
    def validate_coordinates(cls, value: float) -> float:
        """Validate that coordinates are finite numbers."""
        if not math.isfinite(value):
            raise ValueError(f"Coordinate must be a finite number, got {value}")
        return value

    @classmethod
    def from_coords(cls, coords: Sequence[float]) -> "Point":
        """Create a point from an (x, y) pair."""
        x, y = coords
        return cls(x=x, y=y)

    def coords(self) -> Tuple[float, float]:
        return self.x, self.y

    def distance_to(self, other: "Point") -> float:
        """Calculate the Euclidean distance to another point."""
        return math.sqrt((self.x - other.x) ** 2 + (self.y - other.y) ** 2)

    def equals(self, other: "Point", tolerance: float = None) -> bool:
        """
        Check if both points describe the same location within the clipping tolerance.

        Points are equal if identical, or if on each axis the difference is
        below the tolerance scaled by the larger magnitude (at least 1).
        """
        return float_equals(self.x, other.x, tolerance) and float_equals(self.y, other.y, tolerance)

    def __sub__(self, other: "Point") -> "Point":
        """Vector subtraction of two points."""
        return Point(x=self.x - other.x, y=self.y - other.y)

    def dot(self, other: "Point") -> float:
        return self.x * other.x + self.y * other.y

    def format_as_tuple(self) -> str:
        """Format the point as a tuple string."""
        return f"({self.x}, {self.y})"

    def __str__(self) -> str:
        """String representation of the point."""
        return self.format_as_tuple()


def signed_area(p0: Point, p1: Point, p2: Point) -> float:
    """
    Twice the signed area of the triangle (p0, p1, p2).

    Positive when the points turn counter-clockwise.
    """
    return (p0.x - p2.x) * (p1.y - p2.y) - (p1.x - p2.x) * (p0.y - p2.y)
