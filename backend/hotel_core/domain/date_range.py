"""
hotel_core/domain/date_range.py

日期区间工具 - 预订冲突判断的核心算法

所有日期按自然日比较，时刻信息被忽略。区间均为闭区间 [start, end]。
"""
from datetime import date, datetime, timedelta
from typing import Tuple, Union

from hotel_core.exceptions import InvalidArgument, require

DateLike = Union[date, datetime]

ISO_DATE_FORMAT = "%Y-%m-%d"


def to_date(value: DateLike, name: str = "date") -> date:
    """将 date/datetime 统一为 date"""
    require(value, name)
    if isinstance(value, datetime):
        return value.date()
    if not isinstance(value, date):
        raise TypeError(f"{name} must be a date, got {type(value).__name__}")
    return value


def is_within(day: date, lower: date, upper: date) -> bool:
    """day 是否落在闭区间 [lower, upper] 内"""
    return lower <= day <= upper


def dates_overlap(start: DateLike, end: DateLike, lower: DateLike, upper: DateLike) -> bool:
    """
    判断两个闭区间 [start, end] 与 [lower, upper] 是否重叠

    任一区间的端点落在另一区间内即视为重叠，因此共享端点
    （前一预订的离店日 == 新预订的入住日）也算冲突。

    Args:
        start: 请求区间的开始日期
        end: 请求区间的结束日期
        lower: 已有区间的开始日期
        upper: 已有区间的结束日期

    Returns:
        是否重叠
    """
    start, end = to_date(start, "start"), to_date(end, "end")
    lower, upper = to_date(lower, "lower"), to_date(upper, "upper")
    return (
        is_within(start, lower, upper)
        or is_within(end, lower, upper)
        or is_within(lower, start, end)
        or is_within(upper, start, end)
    )


def shift_range(check_in: DateLike, check_out: DateLike, days: int) -> Tuple[date, date]:
    """将区间整体平移 days 天"""
    delta = timedelta(days=days)
    return to_date(check_in, "check_in") + delta, to_date(check_out, "check_out") + delta


def parse_iso_date(text: str) -> date:
    """解析 YYYY-MM-DD 格式的日期"""
    require(text, "text")
    try:
        return datetime.strptime(text.strip(), ISO_DATE_FORMAT).date()
    except ValueError as e:
        raise InvalidArgument(f"日期格式错误，应为 YYYY-MM-DD: '{text}'") from e
