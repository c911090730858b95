import datetime as dt

from log_explorer.filtering import FilterRange, default_range, filter_entries

from conftest import make_entry


def test_example_range_keeps_only_february(entries):
    view = filter_entries(entries, FilterRange(dt.date(2024, 1, 15), dt.date(2024, 2, 15)))
    assert [e.id for e in view] == ["e2"]


def test_bounds_are_inclusive(entries):
    view = filter_entries(entries, FilterRange(dt.date(2024, 1, 1), dt.date(2024, 3, 1)))
    assert [e.id for e in view] == ["e1", "e2", "e3"]


def test_end_bound_is_midnight_of_end_date():
    late = make_entry("late", "2024-03-01T10:30:00Z")
    view = filter_entries([late], FilterRange(dt.date(2024, 2, 1), dt.date(2024, 3, 1)))
    assert view == ()


def test_start_after_end_yields_empty_view(entries):
    date_range = FilterRange(dt.date(2024, 3, 1), dt.date(2024, 1, 1))
    assert date_range.is_empty
    assert filter_entries(entries, date_range) == ()


def test_filter_is_idempotent(entries):
    date_range = FilterRange(dt.date(2024, 1, 1), dt.date(2024, 2, 1))
    once = filter_entries(entries, date_range)
    assert filter_entries(once, date_range) == once


def test_order_is_preserved():
    shuffled = [
        make_entry("c", "2024-01-03T00:00:00Z"),
        make_entry("a", "2024-01-01T00:00:00Z"),
        make_entry("b", "2024-01-02T00:00:00Z"),
    ]
    view = filter_entries(shuffled, FilterRange(dt.date(2024, 1, 1), dt.date(2024, 1, 31)))
    assert [e.id for e in view] == ["c", "a", "b"]


def test_timezone_offsets_are_respected():
    # 2024-01-31T23:30-01:00 is 2024-02-01T00:30Z
    entry = make_entry("tz", "2024-01-31T23:30:00-01:00")
    jan = FilterRange(dt.date(2024, 1, 1), dt.date(2024, 2, 1))
    assert filter_entries([entry], jan) == ()


def test_replace_bound_accepts_picker_names():
    r = FilterRange(dt.date(2024, 1, 1), dt.date(2024, 2, 1))
    assert r.replace_bound("startDate", "2024-01-10").start == dt.date(2024, 1, 10)
    assert r.replace_bound("end_date", "2024-03-01").end == dt.date(2024, 3, 1)


def test_default_range_is_one_month_back():
    r = default_range(dt.date(2024, 3, 31))
    assert r == FilterRange(dt.date(2024, 2, 29), dt.date(2024, 3, 31))
