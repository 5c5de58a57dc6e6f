"""测试 hotel_core.domain.date_range 模块"""
import pytest
from datetime import date, datetime

from hotel_core.domain.date_range import dates_overlap, parse_iso_date, shift_range, to_date
from hotel_core.exceptions import InvalidArgument


def interval_intersects(s1, e1, s2, e2):
    return s1 <= e2 and s2 <= e1


class TestDatesOverlap:
    """闭区间重叠判断"""

    def test_shared_endpoint_overlaps(self):
        assert dates_overlap(date(2024, 1, 5), date(2024, 1, 10), date(2024, 1, 1), date(2024, 1, 5))
        assert dates_overlap(date(2024, 1, 1), date(2024, 1, 5), date(2024, 1, 5), date(2024, 1, 10))

    def test_one_day_gap_does_not_overlap(self):
        assert not dates_overlap(date(2024, 1, 6), date(2024, 1, 10), date(2024, 1, 1), date(2024, 1, 5))
        assert not dates_overlap(date(2024, 1, 1), date(2024, 1, 5), date(2024, 1, 6), date(2024, 1, 10))

    def test_containment_overlaps(self):
        # 请求区间完全包含已有区间：只有已有区间的端点落在请求区间内
        assert dates_overlap(date(2024, 1, 1), date(2024, 1, 31), date(2024, 1, 10), date(2024, 1, 12))
        assert dates_overlap(date(2024, 1, 10), date(2024, 1, 12), date(2024, 1, 1), date(2024, 1, 31))

    def test_single_day_ranges(self):
        day = date(2024, 3, 1)
        assert dates_overlap(day, day, day, day)
        assert not dates_overlap(day, day, date(2024, 3, 2), date(2024, 3, 2))

    def test_time_of_day_is_ignored(self):
        assert dates_overlap(
            datetime(2024, 1, 5, 23, 59), datetime(2024, 1, 6, 8, 0),
            date(2024, 1, 1), date(2024, 1, 5),
        )

    def test_equivalent_to_interval_intersection(self):
        """端点判断与 s1 <= e2 and s2 <= e1 在所有有序区间上等价"""
        days = [date(2024, 1, n) for n in range(1, 8)]
        for s1 in days:
            for e1 in days:
                if s1 > e1:
                    continue
                for s2 in days:
                    for e2 in days:
                        if s2 > e2:
                            continue
                        assert dates_overlap(s1, e1, s2, e2) == interval_intersects(s1, e1, s2, e2)

    def test_none_is_contract_violation(self):
        with pytest.raises(TypeError):
            dates_overlap(None, date(2024, 1, 1), date(2024, 1, 1), date(2024, 1, 2))


class TestHelpers:
    def test_to_date_normalises_datetime(self):
        assert to_date(datetime(2024, 2, 29, 13, 30)) == date(2024, 2, 29)
        assert type(to_date(datetime(2024, 2, 29, 13, 30))) is date

    def test_to_date_rejects_strings(self):
        with pytest.raises(TypeError):
            to_date("2024-01-01")

    def test_shift_range(self):
        assert shift_range(date(2024, 1, 28), date(2024, 2, 2), 7) == (date(2024, 2, 4), date(2024, 2, 9))

    def test_parse_iso_date(self):
        assert parse_iso_date("2024-01-05") == date(2024, 1, 5)
        assert parse_iso_date(" 2024-12-31 ") == date(2024, 12, 31)

    @pytest.mark.parametrize("text", ["2024/01/05", "05-01-2024", "2024-02-30", "tomorrow", ""])
    def test_parse_iso_date_invalid(self, text):
        with pytest.raises(InvalidArgument):
            parse_iso_date(text)
