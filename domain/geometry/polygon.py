from typing import List, Literal, Sequence, Tuple
from pydantic import Field
from domain.geometry.point import Point
from domain.geometry.contour import Contour
from utils.base_model import ImmutableModel


class Polygon(ImmutableModel):
    """
    Represents a polygonal region as an ordered list of rings.

    No orientation is assumed: which rings are outer boundaries and which
    are holes is worked out by coverage counting when the polygon is
    clipped. Polygons produced by a Boolean operation have counter-clockwise
    outer rings and clockwise holes, so their signed `area` is the covered
    area.
    """
    kind: Literal["Polygon"] = "Polygon"
    rings: List[Contour] = Field(default_factory=list, description="Rings bounding the region")

    @classmethod
    def from_coords(cls, rings: Sequence[Sequence[Sequence[float]]]) -> "Polygon":
        """Create a polygon from nested (x, y) coordinate lists, one list per ring."""
        return cls(rings=[Contour.from_coords(ring) for ring in rings])

    def coords(self) -> List[List[Tuple[float, float]]]:
        return [ring.coords() for ring in self.rings]

    @property
    def num_vertices(self) -> int:
        """Total number of vertices of all rings."""
        return sum(len(ring) for ring in self.rings)

    @property
    def area(self) -> float:
        """Sum of the signed ring areas."""
        return sum(ring.area for ring in self.rings)

    @property
    def bounding_box(self) -> Tuple[Point, Point]:
        """Get the bounding box of all non-empty rings as (min_point, max_point)."""
        boxes = [ring.bounding_box for ring in self.rings if len(ring) > 0]
        if not boxes:
            raise ValueError("Empty polygon has no bounding box")
        return (
            Point(x=min(b[0].x for b in boxes), y=min(b[0].y for b in boxes)),
            Point(x=max(b[1].x for b in boxes), y=max(b[1].y for b in boxes)),
        )

    def is_empty(self) -> bool:
        return all(len(ring) == 0 for ring in self.rings)

    def __str__(self) -> str:
        """String representation of the polygon."""
        rings_str = ", ".join(str(ring) for ring in self.rings)
        return f"Polygon([{rings_str}])"
