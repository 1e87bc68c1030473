"""
Handling of intersecting edges during the sweep: splitting and overlap marking.
"""
from typing import Callable, Optional

from domain.geometry.point import Point
from domain.operations.operation import EdgeType
from domain.operations.sweep_event import SweepEvent, compare_events

NO_INTERSECTION = 0
CROSSING = 1
SHARED_LEFT_END = 2
OVERLAP = 3


def divide_segment(event: SweepEvent, point: Point, push: Callable[[SweepEvent], None]) -> None:
    """
    Split the edge of a left event at `point`.

    The edge is shortened to end at `point` and a new left/right pair is
    queued for the remainder. The original right event now closes the
    remainder.
    """
    right = SweepEvent(
        point=point, left=False, other_event=event, is_subject=event.is_subject,
        linear=event.linear, contour_id=event.contour_id, edge_index=event.edge_index,
        forward=event.forward
    )
    left = SweepEvent(
        point=point, left=True, other_event=event.other_event, is_subject=event.is_subject,
        linear=event.linear, contour_id=event.contour_id, edge_index=event.edge_index,
        forward=event.forward
    )

    # Rounding can push the split point past the old right end
    if compare_events(left, event.other_event) > 0:
        event.other_event.left = True
        left.left = False

    event.other_event.other_event = left
    event.other_event = right
    push(left)
    push(right)


def possible_intersection(
        se1: SweepEvent,
        se2: SweepEvent,
        push: Callable[[SweepEvent], None],
        tolerance: float,
        record: Optional[Callable[[Point], None]] = None) -> int:
    """
    Check two neighbouring edges for intersection and split them as needed.

    Args:
        se1: Left event of the lower edge
        se2: Left event of the upper edge
        push: Queue callback for the events created by splitting
        tolerance: Point equality tolerance
        record: Optional callback receiving the points shared by edges of
            different operands

    Returns:
        NO_INTERSECTION, CROSSING, SHARED_LEFT_END (the edges now coincide
        and both need reclassifying) or OVERLAP.
    """
    points = se1.segment().intersect(se2.segment(), tolerance)
    if not points:
        return NO_INTERSECTION

    if record is not None and se1.is_subject != se2.is_subject:
        for point in points:
            record(point)

    if len(points) == 1 and (se1.point.equals(se2.point, tolerance)
                             or se1.other_event.point.equals(se2.other_event.point, tolerance)):
        # Touching at an endpoint of both edges
        return NO_INTERSECTION

    if len(points) == 2 and se1.is_subject == se2.is_subject:
        # Overlap within one operand is left alone
        return NO_INTERSECTION

    if len(points) == 1:
        point = points[0]
        if not point.equals(se1.point, tolerance) and not point.equals(se1.other_event.point, tolerance):
            divide_segment(se1, point, push)
        if not point.equals(se2.point, tolerance) and not point.equals(se2.other_event.point, tolerance):
            divide_segment(se2, point, push)
        return CROSSING

    # The edges overlap
    events = []
    left_coincide = se1.point.equals(se2.point, tolerance)
    right_coincide = se1.other_event.point.equals(se2.other_event.point, tolerance)

    if not left_coincide:
        if compare_events(se1, se2) == 1:
            events.extend([se2, se1])
        else:
            events.extend([se1, se2])
    if not right_coincide:
        if compare_events(se1.other_event, se2.other_event) == 1:
            events.extend([se2.other_event, se1.other_event])
        else:
            events.extend([se1.other_event, se2.other_event])

    if left_coincide:
        _mark_coincident(se1, se2)
        if not right_coincide:
            # Cut the longer edge where the shorter one ends
            divide_segment(events[1].other_event, events[0].point, push)
        return SHARED_LEFT_END

    if right_coincide:
        divide_segment(events[0], events[1].point, push)
        return OVERLAP

    if events[0] is not events[3].other_event:
        # Neither edge contains the other
        divide_segment(events[0], events[1].point, push)
        divide_segment(events[1], events[2].point, push)
        return OVERLAP

    # One edge contains the other
    divide_segment(events[0], events[1].point, push)
    divide_segment(events[3].other_event, events[2].point, push)
    return OVERLAP


def _mark_coincident(se1: SweepEvent, se2: SweepEvent) -> None:
    """Record that two edges of different operands now run along each other."""
    if se1.linear != se2.linear:
        linear = se1 if se1.linear else se2
        linear.on_boundary = True
    elif not se1.linear:
        se2.edge_type = EdgeType.NON_CONTRIBUTING
        if se1.in_out == se2.in_out:
            se1.edge_type = EdgeType.SAME_TRANSITION
        else:
            se1.edge_type = EdgeType.DIFFERENT_TRANSITION
