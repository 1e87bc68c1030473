from domain.geometry.point import Point
from domain.geometry.polygon import Polygon
from domain.geometry.shapes import LineString, MultiLineString, MultiPoint
from domain.operations.assembler import assemble
from domain.operations.engine import EngineResult
from domain.operations.operation import OutputKind


def pts(*coords):
    return [Point(x=x, y=y) for x, y in coords]


class TestAssemble:
    def test_empty_result_is_none(self):
        for kind in OutputKind:
            assert assemble(EngineResult(kind)) is None

    def test_rings_become_one_polygon(self):
        result = EngineResult(OutputKind.POLYGON, [pts((0, 0), (1, 0), (0, 1)), pts((5, 5), (6, 5), (5, 6))])
        polygon = assemble(result)

        assert isinstance(polygon, Polygon)
        assert len(polygon.rings) == 2

    def test_single_chain_is_line_string(self):
        line = assemble(EngineResult(OutputKind.LINE, [pts((0, 0), (1, 1))]))

        assert isinstance(line, LineString)
        assert line.coords() == [(0.0, 0.0), (1.0, 1.0)]

    def test_several_chains(self):
        lines = assemble(EngineResult(OutputKind.LINE, [pts((0, 0), (1, 1)), pts((2, 2), (3, 3))]))

        assert isinstance(lines, MultiLineString)
        assert len(lines.lines) == 2

    def test_points(self):
        points = assemble(EngineResult(OutputKind.POINT, [pts((0.5, 0.5)), pts((1, 2))]))

        assert isinstance(points, MultiPoint)
        assert points.coords() == [(0.5, 0.5), (1.0, 2.0)]
