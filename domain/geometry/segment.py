from typing import List, Optional
from pydantic import Field
import math
from domain.geometry.point import Point
from domain.geometry.constants import POINT_TOLERANCE
from utils.base_model import ImmutableModel


class Segment(ImmutableModel):
    """
    Represents a directed edge between two points.

    Direction matters to the sweep (which end is processed first) but not
    to the topology of the final result.
    """
    start: Point = Field(description="Starting point of the segment")
    end: Point = Field(description="Ending point of the segment")

    @property
    def direction_vector(self) -> Point:
        """Get the direction vector from start to end."""
        return self.end - self.start

    def is_degenerate(self, tolerance: Optional[float] = None) -> bool:
        """Check whether both endpoints coincide within the clipping tolerance."""
        return self.start.equals(self.end, tolerance)

    def project_point(self, point: Point) -> float:
        """
        Project a point onto the segment's line and return the parameter t.

        t = 0 at the start point and t = 1 at the end point.
        """
        direction = self.direction_vector
        length_squared = direction.dot(direction)
        if length_squared == 0.0:
            return 0.0
        return (point - self.start).dot(direction) / length_squared

    def passes_through(self, point: Point, tolerance: Optional[float] = None) -> bool:
        """
        Check whether the interior of the segment runs through a point.

        Endpoints do not count. The point only has to lie within tolerance of
        the segment, so rounded split points are still recognised.
        """
        if self.start.equals(point, tolerance) or self.end.equals(point, tolerance):
            return False
        t = self.project_point(point)
        if t <= 0.0 or t >= 1.0:
            return False
        return self.point_at(t).equals(point, tolerance)

    def intersect(self, other: "Segment", tolerance: Optional[float] = None) -> List[Point]:
        """
        Find the intersection of this segment with another one.

        Args:
            other: The other segment
            tolerance: Tolerance used to detect parallel segments and to snap
                intersections onto existing endpoints

        Returns:
            An empty list if the segments are disjoint, one point if they cross
            or touch, or the two ends of the shared stretch if they overlap.
            A result within tolerance of an endpoint of either segment is
            replaced by that endpoint.
        """
        if tolerance is None:
            tolerance = POINT_TOLERANCE

        a1, a2 = self.start, self.end
        b1, b2 = other.start, other.end

        # Segment a: a1 + s * va, segment b: b1 + t * vb
        vax, vay = a2.x - a1.x, a2.y - a1.y
        vbx, vby = b2.x - b1.x, b2.y - b1.y
        ex, ey = b1.x - a1.x, b1.y - a1.y

        kross = vax * vby - vay * vbx
        sqr_len_a = vax * vax + vay * vay
        sqr_len_b = vbx * vbx + vby * vby

        if abs(kross) > tolerance * math.sqrt(sqr_len_a * sqr_len_b):
            s = (ex * vby - ey * vbx) / kross
            if s < 0.0 or s > 1.0:
                return []
            t = (ex * vay - ey * vax) / kross
            if t < 0.0 or t > 1.0:
                return []
            if s == 0.0:
                return [a1]
            if s == 1.0:
                return [a2]
            if t == 0.0:
                return [b1]
            if t == 1.0:
                return [b2]
            return [self._snap(self.point_at(s), other, tolerance)]

        # Parallel: only collinear segments can still share points
        sqr_len_e = ex * ex + ey * ey
        if abs(ex * vay - ey * vax) > tolerance * math.sqrt(sqr_len_a * sqr_len_e):
            return []
        if sqr_len_a == 0.0:
            return []

        sa = (vax * ex + vay * ey) / sqr_len_a
        sb = sa + (vax * vbx + vay * vby) / sqr_len_a
        smin = min(sa, sb)
        smax = max(sa, sb)

        if smin <= 1.0 and smax >= 0.0:
            if smin == 1.0:
                return [a2]
            if smax == 0.0:
                return [a1]
            first = self._snap(self.point_at(max(smin, 0.0)), other, tolerance)
            second = self._snap(self.point_at(min(smax, 1.0)), other, tolerance)
            if first.equals(second, tolerance):
                return [first]
            return [first, second]

        return []

    def point_at(self, s: float) -> Point:
        if s <= 0.0:
            return self.start
        if s >= 1.0:
            return self.end
        return Point(
            x=self.start.x + s * (self.end.x - self.start.x),
            y=self.start.y + s * (self.end.y - self.start.y)
        )

    def _snap(self, point: Point, other: "Segment", tolerance: float) -> Point:
        """Replace a computed point by an existing endpoint it coincides with."""
        for endpoint in (self.start, self.end, other.start, other.end):
            if point.equals(endpoint, tolerance):
                return endpoint
        return point

    def __str__(self) -> str:
        """String representation of the segment."""
        return f"Segment({self.start} -> {self.end})"
