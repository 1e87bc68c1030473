"""
Sweep-line Boolean operation engine.

Implements the algorithm of F. Martínez, A. J. Rueda and F. R. Feito,
"A new algorithm for computing Boolean operations on polygons" (2009),
which runs in O((n + k) log n) for n edges and k edge intersections.
"""
from dataclasses import dataclass, field
from heapq import heappop, heappush
from typing import Dict, List, Optional, Tuple
import logging

from domain.geometry.point import Point
from domain.geometry.polygon import Polygon
from domain.operations.connector import build_rings, chain_pieces, unique_points
from domain.operations.intersection import divide_segment, possible_intersection, SHARED_LEFT_END
from domain.operations.operation import EdgeType, Operation, OutputKind
from domain.operations.settings import ClipperSettings, DEFAULT_SETTINGS
from domain.operations.sweep_event import SweepEvent, compare_events
from domain.operations.sweep_line import SweepLine

logger = logging.getLogger(__name__)

# Survival of NORMAL edges: (operation, edge is from the subject, edge is outside the other polygon)
NORMAL_EDGE_FILTER: Dict[Tuple[Operation, bool, bool], bool] = {
    (Operation.UNION, True, True): True,
    (Operation.UNION, True, False): False,
    (Operation.UNION, False, True): True,
    (Operation.UNION, False, False): False,
    (Operation.INTERSECTION, True, True): False,
    (Operation.INTERSECTION, True, False): True,
    (Operation.INTERSECTION, False, True): False,
    (Operation.INTERSECTION, False, False): True,
    (Operation.DIFFERENCE, True, True): True,
    (Operation.DIFFERENCE, True, False): False,
    (Operation.DIFFERENCE, False, True): False,
    (Operation.DIFFERENCE, False, False): True,
    (Operation.XOR, True, True): True,
    (Operation.XOR, True, False): True,
    (Operation.XOR, False, True): True,
    (Operation.XOR, False, False): True,
}


def in_result(event: SweepEvent, operation: Operation) -> bool:
    """Decide whether an areal edge is part of the result boundary."""
    if event.edge_type is EdgeType.NORMAL:
        return NORMAL_EDGE_FILTER[(operation, event.is_subject, event.other_in_out)]
    if event.edge_type is EdgeType.SAME_TRANSITION:
        return operation in (Operation.UNION, Operation.INTERSECTION)
    if event.edge_type is EdgeType.DIFFERENT_TRANSITION:
        return operation is Operation.DIFFERENCE
    return False


def result_above(event: SweepEvent, operation: Operation) -> bool:
    """
    For an edge in the result, tell whether the result lies above it.

    "Above" is the left-hand side when walking from the left to the right
    endpoint, vertical edges included.
    """
    own_above = not event.in_out
    flip = ((operation is Operation.XOR and event.edge_type is EdgeType.NORMAL and not event.other_in_out)
            or (operation is Operation.DIFFERENCE and not event.is_subject))
    return own_above != flip


def line_piece_in_result(event: SweepEvent, operation: Operation) -> bool:
    """Decide whether a piece of a line clipped by a polygon is kept."""
    if operation is Operation.XOR:
        return True
    if event.on_boundary:
        return operation in (Operation.UNION, Operation.INTERSECTION)
    if operation is Operation.INTERSECTION:
        return not event.other_in_out
    return event.other_in_out


@dataclass
class EngineResult:
    """Raw engine output: rings, open chains, or one single-point part per crossing."""
    output_kind: OutputKind
    parts: List[List[Point]] = field(default_factory=list)


class SweepLineEngine:
    """
    Computes one Boolean operation between two normalized polygons.

    In POLYGON mode both operands are regions. In LINE mode the subject is
    a set of open lines and the clipping operand a region. In POINT mode
    both operands are lines and only their crossings are reported.
    """

    def __init__(self, subject: Polygon, clipping: Polygon, operation: Operation,
                 output_kind: OutputKind, settings: Optional[ClipperSettings] = None) -> None:
        self.subject = subject
        self.clipping = clipping
        self.operation = Operation(operation)
        self.output_kind = output_kind
        self.settings = settings if settings is not None else DEFAULT_SETTINGS

        self._queue: List[SweepEvent] = []
        self._status = SweepLine(self.settings.tolerance)
        self._processed: List[SweepEvent] = []
        self._crossings: List[Point] = []
        self._sequence = 0

    def compute(self) -> EngineResult:
        """Run the sweep and return the surviving geometry."""
        subject_box = _bounding_box(self.subject)
        clipping_box = _bounding_box(self.clipping)

        if self._result_is_trivially_empty(subject_box, clipping_box):
            logger.debug(f"{self.operation.name}: operands cannot interact, empty result")
            return EngineResult(self.output_kind)

        self._fill_queue()
        event_count = len(self._queue)
        stop_x = self._stop_x(subject_box, clipping_box)

        while self._queue:
            event = heappop(self._queue)
            if stop_x is not None and event.point.x > stop_x:
                break
            if event.left:
                self._handle_left(event)
            else:
                self._handle_right(event)

        result = self._collect()
        logger.debug(
            f"{self.operation.name} ({self.output_kind.name}): {event_count} initial events, "
            f"{len(self._processed)} edges swept, {len(result.parts)} parts"
        )
        return result

    def _result_is_trivially_empty(self, subject_box, clipping_box) -> bool:
        if self.output_kind is OutputKind.POINT or self.operation is Operation.INTERSECTION:
            return subject_box is None or clipping_box is None or not _boxes_overlap(subject_box, clipping_box)
        if self.operation is Operation.DIFFERENCE:
            return subject_box is None
        return subject_box is None and clipping_box is None

    def _stop_x(self, subject_box, clipping_box) -> Optional[float]:
        """x past which no further event can change the result."""
        if self.output_kind is OutputKind.POINT or self.operation is Operation.INTERSECTION:
            return min(subject_box[1].x, clipping_box[1].x)
        if self.operation is Operation.DIFFERENCE:
            return subject_box[1].x
        return None

    def _fill_queue(self) -> None:
        contour_id = 0
        for polygon, is_subject in ((self.subject, True), (self.clipping, False)):
            linear = self.output_kind is OutputKind.POINT or (self.output_kind is OutputKind.LINE and is_subject)
            for ring in polygon.rings:
                count = len(ring.points)
                # Lines stay open: no closing edge back to the first vertex
                edge_count = count - 1 if linear else count
                for index in range(edge_count):
                    segment = ring.segment(index)
                    if segment.is_degenerate(self.settings.tolerance):
                        continue
                    self._add_edge(segment.start, segment.end, is_subject, linear, contour_id, index)
                contour_id += 1

    def _add_edge(self, start: Point, end: Point, is_subject: bool, linear: bool,
                  contour_id: int, edge_index: int) -> None:
        e1 = SweepEvent(point=start, left=False, is_subject=is_subject, linear=linear,
                        contour_id=contour_id, edge_index=edge_index)
        e2 = SweepEvent(point=end, left=False, other_event=e1, is_subject=is_subject, linear=linear,
                        contour_id=contour_id, edge_index=edge_index)
        e1.other_event = e2

        if compare_events(e1, e2) > 0:
            e2.left = True
            e1.forward = e2.forward = False
        else:
            e1.left = True

        self._push(e1)
        self._push(e2)

    def _push(self, event: SweepEvent) -> None:
        event.sequence = self._sequence
        self._sequence += 1
        heappush(self._queue, event)

    def _handle_left(self, event: SweepEvent) -> None:
        position = self._status.insert(event)
        below = self._status.below(position)
        above = self._status.above(position)

        if self._split_through(event, position, below) or self._split_through(event, position, above):
            return

        self._processed.append(event)
        self._compute_fields(event, position)

        if above is not None and self._possible_intersection(event, above) == SHARED_LEFT_END:
            self._compute_fields(event, position)
            self._compute_fields(above, position + 1)

        if below is not None and self._possible_intersection(below, event) == SHARED_LEFT_END:
            self._compute_fields(below, position - 1)
            self._compute_fields(event, position)

    def _split_through(self, event: SweepEvent, position: int, neighbour: Optional[SweepEvent]) -> bool:
        """
        Handle an edge starting on the interior of its neighbour.

        The neighbour is cut at the start point and the event goes back to
        the queue. The first half of the neighbour then leaves the sweep line
        before the event is placed again, so the event is classified against
        edges that start where it starts.
        """
        if neighbour is None or not neighbour.segment().passes_through(event.point, self.settings.tolerance):
            return False
        self._status.remove_at(position)
        divide_segment(neighbour, event.point, self._push)
        if self.output_kind is OutputKind.POINT and neighbour.is_subject != event.is_subject:
            self._crossings.append(event.point)
        self._push(event)
        return True

    def _handle_right(self, event: SweepEvent) -> None:
        left = event.other_event
        position = self._status.index(left)
        if position < 0:
            return
        below = self._status.below(position)
        above = self._status.above(position)
        self._status.remove_at(position)
        if below is not None and above is not None:
            self._possible_intersection(below, above)

    def _possible_intersection(self, se1: SweepEvent, se2: SweepEvent) -> int:
        record = self._crossings.append if self.output_kind is OutputKind.POINT else None
        return possible_intersection(se1, se2, self._push, self.settings.tolerance, record)

    def _compute_fields(self, event: SweepEvent, position: int) -> None:
        """
        Classify an edge from the edge just below it on the sweep line.

        In LINE mode only areal edges count, so the lines never change the
        coverage seen by the edges above them.
        """
        if self.output_kind is OutputKind.POINT:
            return

        prev = self._classifying_neighbour(position)
        if prev is None:
            event.in_out = False
            event.other_in_out = True
        elif event.is_subject == prev.is_subject:
            event.in_out = not prev.in_out
            event.other_in_out = prev.other_in_out
        else:
            event.in_out = not prev.other_in_out
            event.other_in_out = not prev.in_out if prev.is_vertical else prev.in_out

    def _classifying_neighbour(self, position: int) -> Optional[SweepEvent]:
        index = position - 1
        if self.output_kind is OutputKind.LINE:
            while index >= 0 and self._status[index].linear:
                index -= 1
        return self._status[index] if index >= 0 else None

    def _collect(self) -> EngineResult:
        if self.output_kind is OutputKind.POINT:
            points = unique_points(self._crossings, self.settings.tolerance)
            return EngineResult(self.output_kind, [[p] for p in points])

        if self.output_kind is OutputKind.LINE:
            pieces = []
            for event in self._processed:
                if event.linear and line_piece_in_result(event, self.operation):
                    pieces.append(event)
            return EngineResult(self.output_kind, chain_pieces(pieces, self.settings.tolerance))

        edges = []
        for event in self._processed:
            if not in_result(event, self.operation):
                continue
            if result_above(event, self.operation):
                edges.append((event.point, event.other_event.point))
            else:
                edges.append((event.other_event.point, event.point))
        return EngineResult(self.output_kind, build_rings(edges, self.settings.tolerance))


def _bounding_box(polygon: Polygon) -> Optional[Tuple[Point, Point]]:
    if polygon.is_empty():
        return None
    return polygon.bounding_box


def _boxes_overlap(a: Tuple[Point, Point], b: Tuple[Point, Point]) -> bool:
    return not (a[1].x < b[0].x or b[1].x < a[0].x or a[1].y < b[0].y or b[1].y < a[0].y)
