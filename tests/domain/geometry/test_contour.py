import pytest
from domain.geometry.contour import Contour


class TestContour:
    def test_segments_wrap_around(self):
        ring = Contour.from_coords([(0, 0), (1, 0), (1, 1)])
        segments = list(ring.segments())

        assert len(segments) == 3
        assert segments[2].start.coords() == (1.0, 1.0)
        assert segments[2].end.coords() == (0.0, 0.0)

    def test_area_is_signed(self):
        ccw = Contour.from_coords([(0, 0), (2, 0), (2, 2), (0, 2)])
        cw = Contour.from_coords([(0, 0), (0, 2), (2, 2), (2, 0)])

        assert ccw.area == pytest.approx(4.0)
        assert cw.area == pytest.approx(-4.0)
        assert not ccw.is_clockwise()
        assert cw.is_clockwise()

    def test_degenerate_rings_are_accepted(self):
        assert len(Contour()) == 0
        assert Contour.from_coords([(1, 1)]).area == 0.0

    def test_bounding_box(self):
        ring = Contour.from_coords([(1, -1), (3, 2), (-2, 0)])
        low, high = ring.bounding_box

        assert low.coords() == (-2.0, -1.0)
        assert high.coords() == (3.0, 2.0)

    def test_empty_bounding_box(self):
        with pytest.raises(ValueError):
            Contour().bounding_box

    def test_clone_has_fresh_list(self):
        ring = Contour.from_coords([(0, 0), (1, 0), (1, 1)])
        copy = ring.clone()

        assert copy == ring
        assert copy.points is not ring.points
