from typing import Iterator, List, Sequence, Tuple
from pydantic import Field
from domain.geometry.point import Point
from domain.geometry.segment import Segment
from utils.base_model import ImmutableModel


class Contour(ImmutableModel):
    """
    An ordered, implicitly closed sequence of vertices.

    The last point connects back to the first, so a contour with n points has
    n segments. No minimum length is enforced here: degenerate rings are
    tolerated and dealt with when geometries are normalized for clipping.
    """
    points: List[Point] = Field(default_factory=list, description="Vertices of the ring")

    @classmethod
    def from_coords(cls, coords: Sequence[Sequence[float]]) -> "Contour":
        return cls(points=[Point.from_coords(c) for c in coords])

    def coords(self) -> List[Tuple[float, float]]:
        return [p.coords() for p in self.points]

    def __len__(self) -> int:
        return len(self.points)

    def segment(self, index: int) -> Segment:
        """Get the segment starting at vertex `index`, wrapping around at the end."""
        if index == len(self.points) - 1:
            return Segment(start=self.points[-1], end=self.points[0])
        return Segment(start=self.points[index], end=self.points[index + 1])

    def segments(self) -> Iterator[Segment]:
        for index in range(len(self.points)):
            yield self.segment(index)

    def clone(self) -> "Contour":
        """Return a contour holding a fresh copy of the vertex list."""
        return Contour(points=list(self.points))

    @property
    def area(self) -> float:
        """Calculate the signed area of the ring using the shoelace formula."""
        area = 0.0
        for i in range(len(self.points)):
            current = self.points[i]
            next_vertex = self.points[(i + 1) % len(self.points)]
            area += current.x * next_vertex.y - next_vertex.x * current.y
        return area / 2.0

    @property
    def bounding_box(self) -> Tuple[Point, Point]:
        """Get the bounding box as (min_point, max_point)."""
        if not self.points:
            raise ValueError("Empty contour has no bounding box")
        min_x = min(v.x for v in self.points)
        max_x = max(v.x for v in self.points)
        min_y = min(v.y for v in self.points)
        max_y = max(v.y for v in self.points)

        return Point(x=min_x, y=min_y), Point(x=max_x, y=max_y)

    def is_clockwise(self) -> bool:
        """Determine if the ring is oriented clockwise."""
        return self.area < 0

    def __str__(self) -> str:
        """String representation of the contour."""
        vertices_str = ", ".join(str(v) for v in self.points)
        return f"Contour([{vertices_str}])"
