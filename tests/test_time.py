from gumshoe.util.time import TimeWindow, format_clock, join_minutes, split_minutes


def test_unbounded_window_activity():
    window = TimeWindow(start=60, end=0)
    assert not window.is_active(59)
    assert window.is_active(60)
    assert window.is_active(100000)


def test_bounded_window_activity():
    window = TimeWindow(start=60, end=120)
    assert window.is_active(120)
    assert not window.is_active(121)


def test_overlaps_with_open_end():
    assert TimeWindow(start=100).overlaps(TimeWindow(start=10, end=200))
    assert not TimeWindow(start=300).overlaps(TimeWindow(start=10, end=200))


def test_split_and_join_minutes():
    assert split_minutes(0) == (1, 0, 0)
    assert split_minutes(1441) == (2, 0, 1)
    assert join_minutes(2, 0, 1) == 1441
    assert format_clock(3, 7, 5) == "Day 3 07:05"
