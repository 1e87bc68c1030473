import pytest
from domain.geometry.point import Point
from domain.geometry.polygon import Polygon
from domain.geometry.shapes import LineString, MultiLineString, MultiPoint, MultiPolygon
from domain.operations.errors import UnsupportedGeometryKind
from domain.operations.normalizer import canonical_operands, normalize, pad_ring
from domain.operations.operation import OutputKind
from domain.operations.settings import ClipperSettings


@pytest.fixture
def square():
    return Polygon.from_coords([[(0, 0), (1, 0), (1, 1), (0, 1)]])


@pytest.fixture
def line():
    return LineString.from_coords([(0, 0), (1, 1), (2, 0)])


class TestCanonicalOperands:
    def test_areal_pair(self, square):
        other = MultiPolygon(polygons=[square])
        subject, clipping, kind = canonical_operands(square, other)
        assert kind is OutputKind.POLYGON
        assert subject is square
        assert clipping is other

    def test_line_and_polygon(self, square, line):
        subject, clipping, kind = canonical_operands(line, square)
        assert kind is OutputKind.LINE
        assert subject is line
        assert clipping is square

    def test_polygon_and_line_are_swapped(self, square, line):
        subject, clipping, kind = canonical_operands(square, line)
        assert kind is OutputKind.LINE
        assert subject is line
        assert clipping is square

    def test_two_line_sets(self, line):
        other = MultiLineString(lines=[line])
        subject, clipping, kind = canonical_operands(line, other)
        assert kind is OutputKind.POINT
        assert subject is line

    def test_unsupported_subject(self, square):
        with pytest.raises(UnsupportedGeometryKind) as exc_info:
            canonical_operands(Point(x=0, y=0), square)
        assert exc_info.value.geometry_type == "Point"
        assert str(exc_info.value) == "Unsupported geometry type: Point"

    def test_clipping_checked_first(self):
        with pytest.raises(UnsupportedGeometryKind) as exc_info:
            canonical_operands(MultiPoint(), Point(x=0, y=0))
        assert exc_info.value.geometry_type == "Point"

    def test_unsupported_is_value_error(self, square):
        with pytest.raises(ValueError):
            canonical_operands(square, "not a geometry")


class TestNormalize:
    def test_polygon_copied(self, square):
        result = normalize(square)
        assert result == square
        assert result.rings[0] is not square.rings[0]
        assert result.rings[0].points is not square.rings[0].points

    def test_multi_polygon_flattened(self, square):
        other = Polygon.from_coords([[(5, 5), (6, 5), (6, 6)], [(5.2, 5.1), (5.8, 5.1), (5.8, 5.6)]])
        result = normalize(MultiPolygon(polygons=[square, other]))
        assert len(result.rings) == 3

    def test_line_string_becomes_single_ring(self, line):
        result = normalize(line)
        assert result.coords() == [[(0.0, 0.0), (1.0, 1.0), (2.0, 0.0)]]

    def test_multi_line_string(self, line):
        result = normalize(MultiLineString(lines=[line, line]))
        assert len(result.rings) == 2

    def test_two_point_line_padded(self):
        result = normalize(LineString.from_coords([(0, 0), (1, 1)]))
        ring = result.rings[0]
        assert len(ring) == 3
        assert ring.points[2].x == pytest.approx(1.00001)
        assert ring.points[2].y == pytest.approx(0.99999)

    def test_single_point_ring_emptied(self):
        result = normalize(Polygon.from_coords([[(3, 3)], [(0, 0), (1, 0), (0, 1)]]))
        assert len(result.rings[0]) == 0
        assert len(result.rings[1]) == 3

    def test_padding_delta_from_settings(self):
        settings = ClipperSettings(padding_delta=0.5)
        result = normalize(LineString.from_coords([(0, 0), (2, 0)]), settings)
        assert result.rings[0].points[2].coords() == (3.0, 0.0)

    def test_unsupported(self):
        with pytest.raises(UnsupportedGeometryKind):
            normalize(MultiPoint())


class TestPadRing:
    def test_longer_rings_unchanged(self):
        points = [Point(x=0, y=0), Point(x=1, y=0), Point(x=0, y=1)]
        assert pad_ring(points, 1e-5) is points

    def test_empty_ring(self):
        assert pad_ring([], 1e-5) == []

    def test_third_vertex_offsets(self):
        points = pad_ring([Point(x=1, y=2), Point(x=3, y=6)], 0.25)
        assert points[2].coords() == (3.5, 5.0)
