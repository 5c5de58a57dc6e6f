"""
Domain Layer - 领域实体

- Customer: 客户（按邮箱识别）
- Room / FreeRoom / RoomType: 房间（按房间号识别）
- Reservation: 预订
- date_range: 闭区间重叠判断
"""

from hotel_core.domain.customer import Customer
from hotel_core.domain.room import Room, FreeRoom, RoomType
from hotel_core.domain.reservation import Reservation
from hotel_core.domain.date_range import (
    dates_overlap,
    parse_iso_date,
    shift_range,
    to_date,
)

__all__ = [
    "Customer",
    "Room",
    "FreeRoom",
    "RoomType",
    "Reservation",
    "dates_overlap",
    "parse_iso_date",
    "shift_range",
    "to_date",
]
