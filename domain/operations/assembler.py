from typing import Optional, Union

from domain.geometry.contour import Contour
from domain.geometry.polygon import Polygon
from domain.geometry.shapes import LineString, MultiLineString, MultiPoint
from domain.operations.engine import EngineResult
from domain.operations.operation import OutputKind


def assemble(result: EngineResult) -> Optional[Union[Polygon, LineString, MultiLineString, MultiPoint]]:
    """
    Wrap raw engine output in the geometry variant for its output kind.

    Multi-part areal results stay in a single Polygon, since the inputs were
    flattened before the sweep. An empty result is None.
    """
    if not result.parts:
        return None

    if result.output_kind is OutputKind.POLYGON:
        return Polygon(rings=[Contour(points=ring) for ring in result.parts])

    if result.output_kind is OutputKind.LINE:
        if len(result.parts) == 1:
            return LineString(points=result.parts[0])
        return MultiLineString(lines=[LineString(points=chain) for chain in result.parts])

    if result.output_kind is OutputKind.POINT:
        return MultiPoint(points=[part[0] for part in result.parts])

    raise ValueError(f"Unknown output kind: {result.output_kind}")
