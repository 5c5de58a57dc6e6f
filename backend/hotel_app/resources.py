"""
门面层 - 将客户/管理员的操作意图翻译为核心服务调用

HotelResource 面向客户：注册、查房、预订、查看我的预订
AdminResource 面向管理员：批量添加房间、查看全部客户/房间/预订
"""
from dataclasses import dataclass, field
from datetime import date
from typing import Iterable, List, Optional, TextIO, Tuple
import logging

from hotel_core.domain import Customer, Reservation, Room, shift_range, to_date
from hotel_core.domain.date_range import DateLike
from hotel_core.exceptions import CustomerNotFound, RoomAlreadyExists
from hotel_core.services import CustomerService, ReservationService

logger = logging.getLogger(__name__)


@dataclass
class RoomSearchResult:
    """查房结果；recommended 为 True 表示日期已被顺延"""
    check_in_date: date
    check_out_date: date
    rooms: List[Room]
    recommended: bool = False


@dataclass
class AddRoomsResult:
    """批量添加房间的结果"""
    added: List[Room] = field(default_factory=list)
    skipped: List[Room] = field(default_factory=list)


class HotelResource:
    """客户侧门面"""

    def __init__(
        self,
        customer_service: CustomerService,
        reservation_service: ReservationService,
        recommendation_days: int = 7,
    ):
        self.customer_service = customer_service
        self.reservation_service = reservation_service
        self.recommendation_days = recommendation_days

    def get_customer(self, email: str) -> Optional[Customer]:
        return self.customer_service.get_customer(email)

    def create_a_customer(self, email: str, first_name: str, last_name: str) -> Customer:
        return self.customer_service.add_customer(first_name, last_name, email)

    def get_room(self, room_number: str) -> Optional[Room]:
        return self.reservation_service.get_room(room_number)

    def book_a_room(
        self,
        customer_email: str,
        room: Room,
        check_in_date: DateLike,
        check_out_date: DateLike,
    ) -> Reservation:
        """先解析客户，再进入预订存储的临界区"""
        customer = self._get_customer_or_raise(customer_email)
        return self.reservation_service.reserve_a_room(customer, room, check_in_date, check_out_date)

    def get_customer_reservations(self, customer_email: str) -> List[Reservation]:
        return self.reservation_service.get_customer_reservations(
            self._get_customer_or_raise(customer_email)
        )

    def find_rooms(self, check_in_date: DateLike, check_out_date: DateLike) -> List[Room]:
        return self.reservation_service.find_rooms(check_in_date, check_out_date)

    def find_rooms_with_recommendations(
        self, check_in_date: DateLike, check_out_date: DateLike
    ) -> RoomSearchResult:
        """
        查找空房；若请求区间内没有空房，则把区间整体顺延
        recommendation_days 天再查一次

        Returns:
            RoomSearchResult，顺延后仍无空房时 rooms 为空
        """
        check_in = to_date(check_in_date, "check_in_date")
        check_out = to_date(check_out_date, "check_out_date")

        rooms = self.find_rooms(check_in, check_out)
        if rooms:
            return RoomSearchResult(check_in, check_out, rooms)

        new_check_in, new_check_out = shift_range(check_in, check_out, self.recommendation_days)
        rooms = self.find_rooms(new_check_in, new_check_out)
        logger.info(
            f"No rooms free for {check_in} - {check_out}, "
            f"{len(rooms)} free for {new_check_in} - {new_check_out}"
        )
        return RoomSearchResult(new_check_in, new_check_out, rooms, recommended=True)

    def _get_customer_or_raise(self, customer_email: str) -> Customer:
        customer = self.get_customer(customer_email)
        if customer is None:
            raise CustomerNotFound(customer_email)
        return customer


class AdminResource:
    """管理员侧门面"""

    def __init__(self, customer_service: CustomerService, reservation_service: ReservationService):
        self.customer_service = customer_service
        self.reservation_service = reservation_service

    def get_customer(self, email: str) -> Optional[Customer]:
        return self.customer_service.get_customer(email)

    def add_rooms(self, rooms: Iterable[Room]) -> AddRoomsResult:
        """逐个添加房间，已存在的房间号跳过"""
        result = AddRoomsResult()
        for room in rooms:
            try:
                self.reservation_service.add_room(room)
            except RoomAlreadyExists:
                logger.warning(f"Room {room.room_number} already exists, skipping")
                result.skipped.append(room)
                continue
            result.added.append(room)
        return result

    def get_all_rooms(self) -> Tuple[Room, ...]:
        return self.reservation_service.get_all_rooms()

    def get_all_customers(self) -> Tuple[Customer, ...]:
        return self.customer_service.get_all_customers()

    def get_all_reservations(self) -> Tuple[Reservation, ...]:
        return self.reservation_service.list_all_reservations()

    def display_all_reservations(self, file: Optional[TextIO] = None) -> None:
        self.reservation_service.print_all_reservations(file)
