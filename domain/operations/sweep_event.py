"""
Sweep-line events and their processing order.
"""
from dataclasses import dataclass
from typing import Optional

from domain.geometry.point import Point, signed_area
from domain.geometry.segment import Segment
from domain.operations.operation import EdgeType


@dataclass(eq=False)
class SweepEvent:
    """
    One endpoint of an edge, as seen by the sweep line.

    Every edge has a left event (processed first) and a right event, each
    pointing at the other through `other_event`. The classification flags
    live on the left event.
    """
    point: Point
    left: bool
    other_event: Optional["SweepEvent"] = None
    is_subject: bool = True
    linear: bool = False         # belongs to an operand taken as lines
    contour_id: int = 0
    edge_index: int = 0          # index of the source edge in its contour
    forward: bool = True         # left endpoint lies towards the source edge's start
    edge_type: EdgeType = EdgeType.NORMAL
    in_out: bool = False         # region above is outside the own polygon
    other_in_out: bool = False   # edge lies outside the other polygon
    on_boundary: bool = False    # linear edge lying on the areal boundary
    sequence: int = 0

    def is_below(self, point: Point) -> bool:
        """Check whether this event's segment passes below `point`."""
        if self.left:
            return signed_area(self.point, self.other_event.point, point) > 0
        return signed_area(self.other_event.point, self.point, point) > 0

    def is_above(self, point: Point) -> bool:
        return not self.is_below(point)

    @property
    def is_vertical(self) -> bool:
        return self.point.x == self.other_event.point.x

    def segment(self) -> Segment:
        return Segment(start=self.point, end=self.other_event.point)

    def __lt__(self, other: "SweepEvent") -> bool:
        return compare_events(self, other) < 0

    def __repr__(self) -> str:
        side = "L" if self.left else "R"
        owner = "S" if self.is_subject else "C"
        return f"SweepEvent({side}{owner} {self.point} -> {self.other_event.point}, {self.edge_type.name})"


def same_point(p1: Point, p2: Point) -> bool:
    """Exact coordinate comparison, used where the ordering must stay strict."""
    return p1.x == p2.x and p1.y == p2.y


def compare_events(e1: SweepEvent, e2: SweepEvent) -> int:
    """
    Total order of the event queue.

    Events go left to right, then bottom to top. At the same point right
    events come before left events, and of two events of the same kind the
    one whose segment lies lower goes first. Collinear ties put the subject
    first; the creation sequence breaks anything left.
    """
    p1, p2 = e1.point, e2.point
    if p1.x != p2.x:
        return 1 if p1.x > p2.x else -1
    if p1.y != p2.y:
        return 1 if p1.y > p2.y else -1

    if e1.left != e2.left:
        return 1 if e1.left else -1

    if signed_area(p1, e1.other_event.point, e2.other_event.point) != 0:
        return -1 if e1.is_below(e2.other_event.point) else 1

    if e1.is_subject != e2.is_subject:
        return -1 if e1.is_subject else 1

    if e1.sequence != e2.sequence:
        return -1 if e1.sequence < e2.sequence else 1
    return 0
