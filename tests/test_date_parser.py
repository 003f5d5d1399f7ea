from resume_signal_ai.utils.date_parser import find_year_ranges, find_years, has_year, sum_range_years


def test_ranges_and_present_resolution():
    ranges = find_year_ranges("2015-2018 at Initech, 2019 – Present at Globex", today_year=2024)
    assert [(r.start, r.end) for r in ranges] == [(2015, 2018), (2019, 2024)]
    assert sum_range_years(ranges) == 8


def test_overlapping_ranges_are_counted_twice():
    ranges = find_year_ranges("2018-2020 and 2019-2021")
    assert sum_range_years(ranges) == 4


def test_reversed_range_counts_zero():
    assert sum_range_years(find_year_ranges("2022-2019")) == 0


def test_years():
    assert find_years("Graduated 2014, started 2015") == ["2014", "2015"]
    assert has_year("since 1999")
    assert not has_year("call 555-0100")
    assert not has_year("")
