"""
测试数据生成
注册一批模拟客户，按楼层生成房间，并随机预订若干房间
"""
from dataclasses import dataclass
from datetime import date, timedelta
from decimal import Decimal
from typing import List, Optional, Tuple
import logging
import random

from hotel_app.config import Settings
from hotel_app.resources import AdminResource, HotelResource
from hotel_core.domain import Customer, FreeRoom, Room, RoomType
from hotel_core.exceptions import CustomerAlreadyExists, CustomerNotFound, RoomAlreadyReserved

logger = logging.getLogger(__name__)

# (first_name, last_name, email)
MOCK_CUSTOMERS: Tuple[Tuple[str, str, str], ...] = (
    ("Amberly", "Atmore", "aatmore0@gizmodo.com"),
    ("Willa", "Kyllford", "wkyllford1@merriam-webster.com"),
    ("Zechariah", "O'Lunney", "zolunney2@unc.edu"),
    ("Pace", "Buttwell", "pbuttwell3@tiny.cc"),
    ("Loralee", "Inett", "linett4@yolasite.com"),
    ("Emiline", "Boteman", "eboteman0@netvibes.com"),
    ("Aristotle", "Helder", "ahelder1@businessinsider.com"),
    ("Lyle", "Worge", "lworge2@histats.com"),
    ("Costanza", "Cunniam", "ccunniam3@pcworld.com"),
    ("Ardene", "Loft", "aloft4@desdev.cn"),
    ("Joann", "Strotone", "jstrotone5@wp.com"),
    ("Gabbie", "Dannell", "gdannell6@wix.com"),
    ("Vyky", "Reye", "vreye7@tinyurl.com"),
    ("Stacee", "Mutter", "smutter8@auda.org.au"),
    ("Karil", "Rumgay", "krumgay9@blog.com"),
)

MAX_ROOM_PRICE_CENTS = 25600
# 随机预订的最大尝试次数 = 目标数量 * 该倍数
MAX_ATTEMPTS_FACTOR = 50


@dataclass
class SeedReport:
    """测试数据生成结果"""
    customers_added: int = 0
    customers_skipped: int = 0
    rooms_added: int = 0
    rooms_skipped: int = 0
    reservations_booked: int = 0


def build_rooms(floors: int, rooms_per_floor: int, rng: random.Random) -> List[Room]:
    """生成房间：房间号为 楼层 + 两位序号（如 101, 102），一半左右为免费房"""
    rooms: List[Room] = []
    for floor in range(1, floors + 1):
        for index in range(1, rooms_per_floor + 1):
            room_number = f"{floor}{index:02d}"
            room_type = rng.choice([RoomType.SINGLE, RoomType.DOUBLE])
            if rng.random() < 0.5:
                rooms.append(FreeRoom(room_number, room_type))
            else:
                price = Decimal(rng.randrange(MAX_ROOM_PRICE_CENTS)) / 100
                rooms.append(Room(room_number, price, room_type))
    return rooms


def random_date_range(today: date, spread_days: int, rng: random.Random) -> Tuple[date, date]:
    """在 today ± spread_days 内随机生成一个有序区间"""
    first = today + timedelta(days=rng.randint(-spread_days, spread_days - 1))
    second = today + timedelta(days=rng.randint(-spread_days, spread_days - 1))
    return (first, second) if first <= second else (second, first)


def populate_test_data(
    hotel_resource: HotelResource,
    admin_resource: AdminResource,
    app_settings: Settings,
    rng: Optional[random.Random] = None,
    today: Optional[date] = None,
) -> SeedReport:
    """
    填充测试数据

    已存在的客户/房间会被跳过；随机预订遇到冲突时静默重试，
    直到预订数达到 SEED_RESERVATIONS 或尝试次数耗尽。

    Args:
        hotel_resource: 客户侧门面
        admin_resource: 管理员侧门面
        app_settings: 应用设置（SEED_* 配置）
        rng: 随机数生成器，默认按 SEED_RANDOM_SEED 创建
        today: 基准日期，默认今天

    Returns:
        SeedReport
    """
    rng = rng or random.Random(app_settings.SEED_RANDOM_SEED)
    today = today or date.today()
    report = SeedReport()

    customers: List[Customer] = []
    for first_name, last_name, email in MOCK_CUSTOMERS:
        try:
            customers.append(hotel_resource.create_a_customer(email, first_name, last_name))
            report.customers_added += 1
        except CustomerAlreadyExists:
            logger.info(f"Customer {email} already exists, skipping")
            customers.append(hotel_resource.get_customer(email))
            report.customers_skipped += 1

    result = admin_resource.add_rooms(
        build_rooms(app_settings.SEED_FLOORS, app_settings.SEED_ROOMS_PER_FLOOR, rng)
    )
    report.rooms_added = len(result.added)
    report.rooms_skipped = len(result.skipped)

    rooms = list(admin_resource.get_all_rooms())
    if not customers or not rooms:
        return report

    target = app_settings.SEED_RESERVATIONS
    max_attempts = target * MAX_ATTEMPTS_FACTOR
    attempts = 0
    while report.reservations_booked < target and attempts < max_attempts:
        attempts += 1
        check_in, check_out = random_date_range(today, app_settings.SEED_DATE_SPREAD_DAYS, rng)
        customer = rng.choice(customers)
        room = rng.choice(rooms)
        try:
            hotel_resource.book_a_room(customer.email, room, check_in, check_out)
        except (RoomAlreadyReserved, CustomerNotFound):
            continue
        report.reservations_booked += 1

    if report.reservations_booked < target:
        logger.warning(
            f"Only booked {report.reservations_booked}/{target} reservations "
            f"after {attempts} attempts"
        )
    logger.info(f"Test data populated: {report}")
    return report
