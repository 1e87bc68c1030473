"""
Conversion of the accepted geometry variants into the ring form used by the engine.
"""
from typing import List, Optional, Tuple
import logging

from domain.geometry.contour import Contour
from domain.geometry.point import Point
from domain.geometry.polygon import Polygon
from domain.geometry.shapes import LineString, MultiLineString, MultiPolygon, AREAL_TYPES, LINEAR_TYPES
from domain.operations.errors import UnsupportedGeometryKind
from domain.operations.operation import OutputKind
from domain.operations.settings import ClipperSettings, DEFAULT_SETTINGS

logger = logging.getLogger(__name__)


def canonical_operands(subject, clipping) -> Tuple[object, object, OutputKind]:
    """
    Decide the output kind and put the operands in engine order.

    When a polygon meets lines, the lines always become the subject and the
    polygon the clipping operand, so the engine only handles one ordering.

    Raises:
        UnsupportedGeometryKind: If either operand is not areal or linear.
            The clipping operand is checked first.
    """
    if isinstance(clipping, AREAL_TYPES):
        if isinstance(subject, AREAL_TYPES):
            return subject, clipping, OutputKind.POLYGON
        if isinstance(subject, LINEAR_TYPES):
            return subject, clipping, OutputKind.LINE
        raise UnsupportedGeometryKind(subject)
    if isinstance(clipping, LINEAR_TYPES):
        if isinstance(subject, AREAL_TYPES):
            return clipping, subject, OutputKind.LINE
        if isinstance(subject, LINEAR_TYPES):
            return subject, clipping, OutputKind.POINT
        raise UnsupportedGeometryKind(subject)
    raise UnsupportedGeometryKind(clipping)


def normalize(geometry, settings: Optional[ClipperSettings] = None) -> Polygon:
    """
    Convert a polygon, multi-polygon, line string or multi-line-string to a Polygon.

    The result always holds fresh contours, so the input is never shared
    with, or changed by, the engine. Rings with one point are emptied and
    rings with two points get a third one (see `pad_ring`).

    Raises:
        UnsupportedGeometryKind: For any other variant.
    """
    if settings is None:
        settings = DEFAULT_SETTINGS

    if isinstance(geometry, Polygon):
        rings = [list(ring.points) for ring in geometry.rings]
    elif isinstance(geometry, MultiPolygon):
        rings = [list(ring.points) for polygon in geometry.polygons for ring in polygon.rings]
    elif isinstance(geometry, LineString):
        rings = [list(geometry.points)]
    elif isinstance(geometry, MultiLineString):
        rings = [list(line.points) for line in geometry.lines]
    else:
        raise UnsupportedGeometryKind(geometry)

    return Polygon(rings=[Contour(points=pad_ring(ring, settings.padding_delta)) for ring in rings])


def pad_ring(points: List[Point], delta: float) -> List[Point]:
    """
    Repair rings the sweep cannot handle.

    A single point is dropped (empty ring). Two points get a third vertex a
    small step off the second one, so the ring has three vertices.
    """
    if len(points) == 1:
        logger.debug(f"Dropping single-point ring at {points[0]}")
        return []
    if len(points) == 2:
        first, second = points
        extra = Point(
            x=second.x + (second.x - first.x) * delta,
            y=second.y - (second.y - first.y) * delta
        )
        return [first, second, extra]
    return points
