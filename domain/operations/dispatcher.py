"""
Public entry point of the Boolean operations.
"""
from typing import Optional, Union
import logging

from domain.geometry.shapes import Geometry
from domain.operations.assembler import assemble
from domain.operations.engine import SweepLineEngine
from domain.operations.normalizer import canonical_operands, normalize
from domain.operations.operation import Operation
from domain.operations.settings import ClipperSettings, DEFAULT_SETTINGS

logger = logging.getLogger(__name__)


def construct(subject: Optional[Geometry], clipping: Optional[Geometry], operation: Union[Operation, int],
              settings: Optional[ClipperSettings] = None) -> Optional[Geometry]:
    """
    Compute `subject <operation> clipping`.

    Both operands may be a Polygon, MultiPolygon, LineString or
    MultiLineString:

    - two areal operands give a Polygon;
    - lines and a polygon (in either order) give the lines clipped by the
      polygon, as a LineString or MultiLineString;
    - two sets of lines give the MultiPoint of their crossings.

    A None operand is an empty geometry: INTERSECTION (and DIFFERENCE with
    an empty subject) is then None, the other operations return the
    non-empty operand unchanged. An empty result is None as well.

    Args:
        subject: Left-hand operand
        clipping: Right-hand operand
        operation: An Operation or its integer code
        settings: Tolerances for this call; defaults to DEFAULT_SETTINGS

    Raises:
        UnsupportedGeometryKind: If an operand is of any other type
        ValueError: If the operation code is unknown
    """
    operation = Operation(operation)
    if settings is None:
        settings = DEFAULT_SETTINGS

    if subject is None and clipping is None:
        return None
    if subject is None:
        if operation in (Operation.INTERSECTION, Operation.DIFFERENCE):
            return None
        return clipping
    if clipping is None:
        if operation is Operation.INTERSECTION:
            return None
        return subject

    subject, clipping, output_kind = canonical_operands(subject, clipping)
    logger.debug(
        f"construct {operation.name}: {type(subject).__name__} with "
        f"{type(clipping).__name__} -> {output_kind.name}"
    )

    engine = SweepLineEngine(
        normalize(subject, settings),
        normalize(clipping, settings),
        operation,
        output_kind,
        settings
    )
    return assemble(engine.compute())
