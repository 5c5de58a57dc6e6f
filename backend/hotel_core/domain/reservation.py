"""
hotel_core/domain/reservation.py

Reservation 领域实体 - 某位客户在某个日期区间内占用某间房
"""
from dataclasses import dataclass
from datetime import date

from hotel_core.domain.customer import Customer
from hotel_core.domain.date_range import DateLike, ISO_DATE_FORMAT, dates_overlap, to_date
from hotel_core.domain.room import Room
from hotel_core.exceptions import InvalidArgument, require


@dataclass(frozen=True)
class Reservation:
    """
    预订（构造后不可变）

    相等性按 (customer, room, check_in_date, check_out_date) 整体比较，
    其中 customer 按邮箱、room 按房间号比较。

    Attributes:
        customer: 预订客户
        room: 预订房间
        check_in_date: 入住日期（含）
        check_out_date: 离店日期（含）
    """
    customer: Customer
    room: Room
    check_in_date: date
    check_out_date: date

    def __post_init__(self):
        require(self.customer, "customer")
        require(self.room, "room")
        check_in = to_date(self.check_in_date, "check_in_date")
        check_out = to_date(self.check_out_date, "check_out_date")
        if check_in > check_out:
            raise InvalidArgument("入住日期不能晚于离店日期")
        object.__setattr__(self, "check_in_date", check_in)
        object.__setattr__(self, "check_out_date", check_out)

    def overlaps(self, check_in: DateLike, check_out: DateLike) -> bool:
        """请求区间是否与本预订的区间重叠"""
        return dates_overlap(check_in, check_out, self.check_in_date, self.check_out_date)

    def __str__(self) -> str:
        return (
            f"预订: {self.customer} - {self.room} "
            f"[{self.check_in_date.strftime(ISO_DATE_FORMAT)} 至 "
            f"{self.check_out_date.strftime(ISO_DATE_FORMAT)}]"
        )
