"""
Chaining of surviving edges into rings, open lines, or point sets.
"""
from bisect import bisect_left, bisect_right
from typing import Dict, List, Optional, Sequence, Tuple
import logging
import math

from domain.geometry.point import Point
from domain.operations.sweep_event import SweepEvent

logger = logging.getLogger(__name__)

TWO_PI = 2.0 * math.pi


class VertexIndex:
    """
    Assigns one id to all points that are equal within the tolerance.

    Exact matches are found by dictionary lookup; near matches by a binary
    search over the x coordinates of the known vertices.
    """

    def __init__(self, tolerance: float) -> None:
        self.tolerance = tolerance
        self.points: List[Point] = []
        self._exact: Dict[Tuple[float, float], int] = {}
        self._xs: List[float] = []
        self._ids_by_x: List[int] = []

    def lookup(self, point: Point) -> int:
        key = (point.x, point.y)
        vertex_id = self._exact.get(key)
        if vertex_id is not None:
            return vertex_id

        window = 2.0 * self.tolerance * max(1.0, abs(point.x))
        lo = bisect_left(self._xs, point.x - window)
        hi = bisect_right(self._xs, point.x + window)
        for candidate in self._ids_by_x[lo:hi]:
            if self.points[candidate].equals(point, self.tolerance):
                self._exact[key] = candidate
                return candidate

        vertex_id = len(self.points)
        self.points.append(point)
        self._exact[key] = vertex_id
        position = bisect_right(self._xs, point.x)
        self._xs.insert(position, point.x)
        self._ids_by_x.insert(position, vertex_id)
        return vertex_id


def build_rings(edges: Sequence[Tuple[Point, Point]], tolerance: float) -> List[List[Point]]:
    """
    Trace closed rings through directed edges that have the region on their left.

    At a vertex where several rings meet, the walk takes the sharpest left
    turn, which keeps rings that only touch at a point apart. A ring closes
    when the walk returns to its first vertex; revisiting any other vertex
    splits the loop off as a ring of its own.
    """
    index = VertexIndex(tolerance)
    starts: List[int] = []
    ends: List[int] = []
    outgoing: Dict[int, List[int]] = {}
    for start, end in edges:
        start_id = index.lookup(start)
        end_id = index.lookup(end)
        if start_id == end_id:
            continue
        outgoing.setdefault(start_id, []).append(len(starts))
        starts.append(start_id)
        ends.append(end_id)

    used = [False] * len(starts)
    rings: List[List[int]] = []

    for first in range(len(starts)):
        if used[first]:
            continue
        used[first] = True
        path = [starts[first]]
        on_path = {starts[first]: 0}
        current = first
        while True:
            vertex = ends[current]
            if vertex in on_path:
                loop_start = on_path[vertex]
                loop = path[loop_start:]
                for dropped in loop[1:]:
                    del on_path[dropped]
                del path[loop_start + 1:]
                rings.append(loop)
                if loop_start == 0:
                    break
            else:
                on_path[vertex] = len(path)
                path.append(vertex)

            following = _next_edge(index.points, starts[current], vertex, outgoing.get(vertex, []), ends, used)
            if following is None:
                if len(path) > 1:
                    logger.warning(f"Dangling chain of {len(path)} vertices could not be closed")
                    rings.append(path)
                break
            used[following] = True
            current = following

    result = []
    for ring in rings:
        if len(ring) < 3:
            logger.debug(f"Dropping collapsed ring with {len(ring)} vertices")
            continue
        result.append([index.points[vertex] for vertex in ring])
    return result


def _next_edge(points: List[Point], came_from: int, vertex: int, candidates: List[int],
               ends: List[int], used: List[bool]) -> Optional[int]:
    """Pick the unused outgoing edge reached first turning clockwise from the way back."""
    here = points[vertex]
    back = points[came_from]
    back_angle = math.atan2(back.y - here.y, back.x - here.x)

    best = None
    best_turn = None
    for edge in candidates:
        if used[edge]:
            continue
        target = points[ends[edge]]
        angle = math.atan2(target.y - here.y, target.x - here.x)
        turn = (back_angle - angle) % TWO_PI
        if turn == 0.0:
            turn = TWO_PI
        if best_turn is None or turn < best_turn:
            best = edge
            best_turn = turn
    return best


def chain_pieces(pieces: Sequence[SweepEvent], tolerance: float) -> List[List[Point]]:
    """
    Join surviving line pieces into open chains.

    Pieces are put back in their source order and direction, then
    consecutive pieces of the same line that share an endpoint are joined.
    """
    oriented = []
    for event in pieces:
        start, end = event.point, event.other_event.point
        if not event.forward:
            start, end = end, start
        along = (start.x, start.y) if event.forward else (-start.x, -start.y)
        oriented.append(((event.contour_id, event.edge_index, along), event.contour_id, start, end))
    oriented.sort(key=lambda item: item[0])

    chains: List[List[Point]] = []
    last_contour = None
    for _, contour_id, start, end in oriented:
        if chains and contour_id == last_contour and chains[-1][-1].equals(start, tolerance):
            chains[-1].append(end)
        else:
            chains.append([start, end])
        last_contour = contour_id
    return chains


def unique_points(points: Sequence[Point], tolerance: float) -> List[Point]:
    """Sort points left to right and drop those equal to an earlier one within tolerance."""
    ordered = sorted(points, key=lambda p: (p.x, p.y))
    index = VertexIndex(tolerance)
    result = []
    for point in ordered:
        if index.lookup(point) == len(result):
            result.append(point)
    return result
