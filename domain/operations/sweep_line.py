"""
Status structure of the sweep: the edges crossing the sweep line, bottom to top.
"""
from typing import List, Optional

from domain.geometry.constants import POINT_TOLERANCE
from domain.geometry.point import Point, signed_area
from domain.operations.sweep_event import SweepEvent, compare_events, same_point


def _on_line(le: SweepEvent, point: Point, tolerance: float) -> bool:
    """Check whether `point` lies on the line carrying the edge of `le`."""
    area = signed_area(le.point, le.other_event.point, point)
    if area == 0:
        return True
    length = le.point.distance_to(le.other_event.point)
    return abs(area) <= tolerance * length * max(1.0, abs(point.x), abs(point.y))


def compare_segments(le1: SweepEvent, le2: SweepEvent, tolerance: float = POINT_TOLERANCE) -> int:
    """
    Order two active edges (given by their left events) along the sweep line.

    Returns -1 if le1 lies below le2 and 1 if above. An edge starting on
    the other one is placed by its right endpoint.
    """
    if le1 is le2:
        return 0

    # Segments are not collinear
    if (signed_area(le1.point, le1.other_event.point, le2.point) != 0
            or signed_area(le1.point, le1.other_event.point, le2.other_event.point) != 0):
        # Shared left endpoint: the right endpoint decides
        if same_point(le1.point, le2.point):
            return -1 if le1.is_below(le2.other_event.point) else 1

        # Same x for the left endpoints: the lower one is below
        if le1.point.x == le2.point.x:
            return -1 if le1.point.y < le2.point.y else 1

        # le1 was inserted after le2: where does le1 start relative to le2?
        if compare_events(le1, le2) == 1:
            if _on_line(le2, le1.point, tolerance):
                return -1 if le2.is_above(le1.other_event.point) else 1
            return -1 if le2.is_above(le1.point) else 1

        # le2 was inserted after le1
        if _on_line(le1, le2.point, tolerance):
            return -1 if le1.is_below(le2.other_event.point) else 1
        return -1 if le1.is_below(le2.point) else 1

    # Collinear
    if le1.is_subject == le2.is_subject:
        if same_point(le1.point, le2.point):
            if le1.contour_id != le2.contour_id:
                return 1 if le1.contour_id > le2.contour_id else -1
            return 1 if le1.sequence > le2.sequence else -1
    else:
        # Collinear edges of different operands: subject goes below
        return -1 if le1.is_subject else 1

    return 1 if compare_events(le1, le2) == 1 else -1


class SweepLine:
    """Edges currently cut by the sweep line, kept sorted by compare_segments."""

    def __init__(self, tolerance: float = POINT_TOLERANCE) -> None:
        self.tolerance = tolerance
        self._events: List[SweepEvent] = []

    def __len__(self) -> int:
        return len(self._events)

    def __getitem__(self, index: int) -> SweepEvent:
        return self._events[index]

    def insert(self, event: SweepEvent) -> int:
        """Insert a left event and return its position."""
        lo, hi = 0, len(self._events)
        while lo < hi:
            mid = (lo + hi) // 2
            if compare_segments(event, self._events[mid], self.tolerance) < 0:
                hi = mid
            else:
                lo = mid + 1
        self._events.insert(lo, event)
        return lo

    def index(self, event: SweepEvent) -> int:
        """Position of a left event, or -1 if it is not active."""
        lo, hi = 0, len(self._events)
        while lo < hi:
            mid = (lo + hi) // 2
            if compare_segments(self._events[mid], event, self.tolerance) < 0:
                lo = mid + 1
            else:
                hi = mid
        if lo < len(self._events) and self._events[lo] is event:
            return lo
        # Rounding can leave the order slightly inconsistent; fall back to a scan
        for position, active in enumerate(self._events):
            if active is event:
                return position
        return -1

    def remove_at(self, index: int) -> SweepEvent:
        return self._events.pop(index)

    def below(self, index: int) -> Optional[SweepEvent]:
        return self._events[index - 1] if index > 0 else None

    def above(self, index: int) -> Optional[SweepEvent]:
        return self._events[index + 1] if index + 1 < len(self._events) else None
