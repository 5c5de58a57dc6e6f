"""
hotel_core/exceptions.py

领域异常定义

- 校验失败：InvalidArgument（同时是 ValueError，路由层可按 ValueError 处理）
- 领域冲突：CustomerAlreadyExists / RoomAlreadyExists / RoomAlreadyReserved
- 契约违反：必填参数为 None 时抛出 TypeError，调用方不应捕获
"""
from typing import Any


class HotelReservationError(Exception):
    """领域异常基类"""

    pass


class InvalidArgument(HotelReservationError, ValueError):
    """实体构造时的参数校验失败"""

    pass


class CustomerAlreadyExists(HotelReservationError):
    """相同邮箱的客户已存在"""

    def __init__(self, email: str):
        self.email = email
        super().__init__(f"邮箱 {email} 已被其他客户注册")


class CustomerNotFound(HotelReservationError):
    """邮箱对应的客户不存在"""

    def __init__(self, email: str):
        self.email = email
        super().__init__(f"邮箱 {email} 尚未注册")


class RoomAlreadyExists(HotelReservationError):
    """相同房间号的房间已存在"""

    def __init__(self, room_number: str):
        self.room_number = room_number
        super().__init__(f"房间 {room_number} 已存在")


class RoomAlreadyReserved(HotelReservationError):
    """房间在请求的日期范围内已被预订"""

    def __init__(self, room_number: str, check_in_date: Any, check_out_date: Any):
        self.room_number = room_number
        self.check_in_date = check_in_date
        self.check_out_date = check_out_date
        super().__init__(
            f"房间 {room_number} 在 {check_in_date} 至 {check_out_date} 期间已被预订"
        )


def require(value: Any, name: str) -> Any:
    """必填参数检查，None 视为编程错误"""
    if value is None:
        raise TypeError(f"{name} must not be None")
    return value


__all__ = [
    "HotelReservationError",
    "InvalidArgument",
    "CustomerAlreadyExists",
    "CustomerNotFound",
    "RoomAlreadyExists",
    "RoomAlreadyReserved",
    "require",
]
