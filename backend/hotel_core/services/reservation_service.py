"""
预订服务 - 房间与预订存储
房间按房间号唯一存储；预订只追加、不修改、不删除。

同一房间的任意两条预订的日期区间（闭区间）不允许重叠。
冲突检查与追加在同一把锁内完成，并发预订同一房间时只有一个能成功。
"""
from typing import Dict, List, Optional, TextIO, Tuple
from datetime import datetime
import logging
import sys
import threading

from hotel_core.domain.customer import Customer
from hotel_core.domain.date_range import DateLike, to_date
from hotel_core.domain.reservation import Reservation
from hotel_core.domain.room import Room
from hotel_core.events import Event, EventPublisher, EventType, discard_event
from hotel_core.exceptions import RoomAlreadyExists, RoomAlreadyReserved, require

logger = logging.getLogger(__name__)


class ReservationService:
    """房间与预订服务"""

    def __init__(self, event_publisher: Optional[EventPublisher] = None):
        self._rooms: Dict[str, Room] = {}
        self._reservations: List[Reservation] = []
        self._lock = threading.RLock()
        # 支持依赖注入事件发布器，便于测试
        self._publish_event = event_publisher or discard_event

    # ============== 房间操作 ==============

    def add_room(self, room: Room) -> None:
        """
        添加房间

        Raises:
            RoomAlreadyExists: 房间号已存在（与价格、房型无关）
        """
        require(room, "room")
        with self._lock:
            if room.room_number in self._rooms:
                raise RoomAlreadyExists(room.room_number)
            self._rooms[room.room_number] = room

        logger.info(f"Room added: {room.room_number}")
        self._publish_event(Event(
            event_type=EventType.ROOM_ADDED,
            timestamp=datetime.now(),
            data={
                "room_number": room.room_number,
                "room_type": room.room_type.value,
                "price": str(room.price),
            },
            source="reservation_service",
        ))

    def get_room(self, room_number: str) -> Optional[Room]:
        """按房间号获取房间"""
        require(room_number, "room_number")
        with self._lock:
            return self._rooms.get(room_number)

    def get_all_rooms(self) -> Tuple[Room, ...]:
        """获取所有房间（只读快照，顺序不保证）"""
        with self._lock:
            return tuple(self._rooms.values())

    def find_rooms(self, check_in_date: DateLike, check_out_date: DateLike) -> List[Room]:
        """
        查找在 [check_in_date, check_out_date] 内没有任何重叠预订的房间

        入住日期不晚于离店日期由调用方保证，这里不再校验。
        """
        check_in = to_date(check_in_date, "check_in_date")
        check_out = to_date(check_out_date, "check_out_date")

        with self._lock:
            return [
                room for room in self._rooms.values()
                if not self._is_room_reserved(room, check_in, check_out)
            ]

    # ============== 预订操作 ==============

    def reserve_a_room(
        self,
        customer: Customer,
        room: Room,
        check_in_date: DateLike,
        check_out_date: DateLike,
    ) -> Reservation:
        """
        预订房间

        Raises:
            RoomAlreadyReserved: 该房间已有与请求区间重叠的预订
            InvalidArgument: 入住日期晚于离店日期
        """
        require(customer, "customer")
        require(room, "room")
        check_in = to_date(check_in_date, "check_in_date")
        check_out = to_date(check_out_date, "check_out_date")

        with self._lock:
            if self._is_room_reserved(room, check_in, check_out):
                raise RoomAlreadyReserved(room.room_number, check_in, check_out)
            reservation = Reservation(customer, room, check_in, check_out)
            self._reservations.append(reservation)

        logger.info(
            f"Room {room.room_number} reserved for {customer.email} "
            f"from {check_in.isoformat()} to {check_out.isoformat()}"
        )
        self._publish_event(Event(
            event_type=EventType.RESERVATION_CREATED,
            timestamp=datetime.now(),
            data={
                "email": customer.email,
                "room_number": room.room_number,
                "check_in_date": check_in.isoformat(),
                "check_out_date": check_out.isoformat(),
            },
            source="reservation_service",
        ))
        return reservation

    def get_customer_reservations(self, customer: Customer) -> List[Reservation]:
        """获取客户的所有预订（按创建顺序）"""
        require(customer, "customer")
        with self._lock:
            return [r for r in self._reservations if r.customer == customer]

    def list_all_reservations(self) -> Tuple[Reservation, ...]:
        """获取所有预订（按创建顺序），没有预订时返回空元组"""
        with self._lock:
            return tuple(self._reservations)

    def print_all_reservations(self, file: Optional[TextIO] = None) -> None:
        """将所有预订输出到文本流（默认标准输出）"""
        out = file if file is not None else sys.stdout
        reservations = self.list_all_reservations()
        if not reservations:
            print("当前没有任何预订。\n", file=out)
            return

        print("当前预订：", file=out)
        for reservation in reservations:
            print(reservation, file=out)
        print(file=out)

    def _is_room_reserved(self, room: Room, check_in, check_out) -> bool:
        """调用方需持有锁"""
        return any(
            r.room == room and r.overlaps(check_in, check_out)
            for r in self._reservations
        )
