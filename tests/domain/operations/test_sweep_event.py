from domain.geometry.point import Point
from domain.operations.sweep_event import SweepEvent, compare_events
from domain.operations.sweep_line import SweepLine, compare_segments


def make_edge(x1, y1, x2, y2, is_subject=True, sequence=0):
    """Build the linked event pair of an edge and return its left event."""
    e1 = SweepEvent(point=Point(x=x1, y=y1), left=True, is_subject=is_subject, sequence=sequence)
    e2 = SweepEvent(point=Point(x=x2, y=y2), left=False, other_event=e1, is_subject=is_subject,
                    sequence=sequence + 1)
    e1.other_event = e2
    if compare_events(e1, e2) > 0:
        e1.left, e2.left = False, True
        return e2
    return e1


class TestSweepEvent:
    def test_left_event_is_leftmost_endpoint(self):
        left = make_edge(3, 0, 1, 0)
        assert left.point.coords() == (1.0, 0.0)
        assert not left.other_event.left

    def test_is_below(self):
        left = make_edge(0, 0, 2, 0)
        assert left.is_below(Point(x=1.0, y=1.0))
        assert left.is_above(Point(x=1.0, y=-1.0))

    def test_is_vertical(self):
        assert make_edge(1, 0, 1, 5).is_vertical
        assert not make_edge(0, 0, 1, 5).is_vertical

    def test_segment(self):
        segment = make_edge(0, 0, 2, 1).segment()
        assert segment.start.coords() == (0.0, 0.0)
        assert segment.end.coords() == (2.0, 1.0)


class TestCompareEvents:
    def test_x_then_y(self):
        a = make_edge(0, 0, 1, 0)
        b = make_edge(1, -5, 2, 0)
        c = make_edge(0, 1, 1, 1)
        assert compare_events(a, b) == -1
        assert compare_events(b, a) == 1
        assert compare_events(a, c) == -1

    def test_right_event_before_left_event(self):
        ending = make_edge(0, 0, 1, 1)
        starting = make_edge(1, 1, 2, 0)
        assert compare_events(ending.other_event, starting) == -1
        assert compare_events(starting, ending.other_event) == 1

    def test_lower_segment_first(self):
        low = make_edge(0, 0, 1, 0)
        high = make_edge(0, 0, 1, 1)
        assert compare_events(low, high) == -1
        assert compare_events(high, low) == 1

    def test_collinear_subject_first(self):
        subject = make_edge(0, 0, 1, 0, is_subject=True, sequence=10)
        clipping = make_edge(0, 0, 2, 0, is_subject=False, sequence=0)
        assert compare_events(subject, clipping) == -1
        assert compare_events(clipping, subject) == 1

    def test_sequence_breaks_ties(self):
        first = make_edge(0, 0, 1, 0, sequence=0)
        second = make_edge(0, 0, 1, 0, sequence=2)
        assert compare_events(first, second) == -1
        assert first < second


class TestSweepLine:
    def test_insert_orders_bottom_to_top(self):
        status = SweepLine()
        top = make_edge(0, 2, 4, 2)
        bottom = make_edge(0, 0, 4, 0)
        middle = make_edge(1, 1, 4, 1)

        status.insert(top)
        status.insert(bottom)
        position = status.insert(middle)

        assert position == 1
        assert [status[i] for i in range(len(status))] == [bottom, middle, top]
        assert status.below(1) is bottom
        assert status.above(1) is top
        assert status.below(0) is None
        assert status.above(2) is None

    def test_index_and_remove(self):
        status = SweepLine()
        edges = [make_edge(0, y, 4, y) for y in (0, 1, 2)]
        for edge in edges:
            status.insert(edge)

        assert status.index(edges[1]) == 1
        status.remove_at(1)
        assert status.index(edges[1]) == -1
        assert len(status) == 2

    def test_shared_left_endpoint(self):
        low = make_edge(0, 0, 2, 1)
        high = make_edge(0, 0, 2, 3)
        assert compare_segments(low, high) == -1
        assert compare_segments(high, low) == 1

    def test_collinear_different_operands(self):
        subject = make_edge(0, 0, 2, 0, is_subject=True)
        clipping = make_edge(0, 0, 2, 0, is_subject=False, sequence=2)
        assert compare_segments(subject, clipping) == -1
        assert compare_segments(clipping, subject) == 1

    def test_edge_starting_on_another_is_placed_by_right_end(self):
        top = make_edge(0, 2, 4, 2, is_subject=True)
        rising = make_edge(1, 2, 4, 5, is_subject=False, sequence=2)
        falling = make_edge(1, 2, 4, 0, is_subject=False, sequence=4)

        assert compare_segments(rising, top) == 1
        assert compare_segments(top, rising) == -1
        assert compare_segments(falling, top) == -1
        assert compare_segments(top, falling) == 1

    def test_edge_starting_on_rounded_edge(self):
        # The start of the long edge is a rounded crossing of the line x + y = 6
        long_edge = make_edge(13 / 7, 29 / 7, 5, 1)
        upward = make_edge(3, 3, 3, 5, is_subject=False, sequence=2)
        downward = make_edge(3, 3, 4, -1, is_subject=False, sequence=4)

        assert compare_segments(upward, long_edge) == 1
        assert compare_segments(downward, long_edge) == -1
