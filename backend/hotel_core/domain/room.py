"""
hotel_core/domain/room.py

Room 领域实体

房间以房间号作为唯一标识：即使价格或房型不同，房间号相同就是同一间房。
"""
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Union

from hotel_core.exceptions import InvalidArgument, require

PriceLike = Union[Decimal, int, float, str]


class RoomType(str, Enum):
    """房型"""
    SINGLE = "single"
    DOUBLE = "double"

    @property
    def label(self) -> str:
        return _ROOM_TYPE_LABELS[self]

    @classmethod
    def parse(cls, value: Union["RoomType", str]) -> "RoomType":
        """从枚举或文本（不区分大小写）解析房型"""
        require(value, "room_type")
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError as e:
            raise InvalidArgument(f"未知房型: '{value}'，可选 single 或 double") from e


_ROOM_TYPE_LABELS = {
    RoomType.SINGLE: "单人间",
    RoomType.DOUBLE: "双人间",
}


def _to_price(value: PriceLike) -> Decimal:
    require(value, "price")
    if isinstance(value, bool):
        raise InvalidArgument("价格必须是非负数")
    try:
        price = value if isinstance(value, Decimal) else Decimal(str(value).strip())
    except InvalidOperation as e:
        raise InvalidArgument(f"价格必须是非负数: '{value}'") from e
    if not price.is_finite() or price < 0:
        raise InvalidArgument(f"价格必须是非负数: '{value}'")
    return price


@dataclass(frozen=True, eq=False)
class Room:
    """
    房间（构造后不可变）

    Attributes:
        room_number: 房间号，唯一标识
        price: 每晚价格，0 表示免费
        room_type: 房型
    """
    room_number: str
    price: Decimal
    room_type: RoomType

    def __post_init__(self):
        require(self.room_number, "room_number")
        if not isinstance(self.room_number, str):
            raise TypeError(
                f"room_number must be a str, got {type(self.room_number).__name__}"
            )
        object.__setattr__(self, "price", _to_price(self.price))
        object.__setattr__(self, "room_type", RoomType.parse(self.room_type))

    @property
    def is_free(self) -> bool:
        return self.price == 0

    def __eq__(self, other) -> bool:
        if self is other:
            return True
        if not isinstance(other, Room):
            return NotImplemented
        return self.room_number == other.room_number

    def __hash__(self) -> int:
        return hash(self.room_number)

    def __str__(self) -> str:
        price = "免费" if self.is_free else f"${self.price}"
        return f"房间 {self.room_number} - {self.room_type.label} - {price}"


class FreeRoom(Room):
    """免费房间，价格恒为 0"""

    def __init__(self, room_number: str, room_type: Union[RoomType, str]):
        super().__init__(room_number, Decimal("0"), room_type)
