"""
交互式文本菜单

主菜单：查找并预订房间、查看我的预订、注册账号、管理员菜单、退出
管理员菜单：查看客户/房间/预订、添加房间、填充测试数据、返回

任何输入提示下输入 "quit" 可放弃当前操作；输入流结束时干净退出。
"""
from datetime import date
from typing import Callable, Iterable, List, Optional
import logging
import re

from rich.console import Console

from hotel_app.dependencies import HotelServices
from hotel_app.seed import populate_test_data
from hotel_core.domain import Room, RoomType, parse_iso_date
from hotel_core.exceptions import (
    CustomerAlreadyExists, CustomerNotFound, InvalidArgument, RoomAlreadyReserved
)

logger = logging.getLogger(__name__)

ESCAPE_WORD = "quit"

InputFn = Callable[[], str]


class BaseMenu:
    """菜单基类：负责读取输入与输出文本"""

    title = ""
    options: List[str] = []

    def __init__(
        self,
        services: HotelServices,
        console: Optional[Console] = None,
        input_fn: Optional[InputFn] = None,
    ):
        self.services = services
        self.console = console or Console()
        self.input_fn = input_fn or input

    # ============== 输出 ==============

    def say(self, text: object = "", style: Optional[str] = None) -> None:
        # 实体是 dataclass，rich 会按 repr 美化输出，这里统一用 str()
        self.console.print(str(text), style=style, markup=False, highlight=False)

    def warn(self, text: str) -> None:
        self.say(text, style="yellow")

    def show_options(self) -> None:
        self.say(self.title, style="bold")
        for index, option in enumerate(self.options, start=1):
            self.say(f"{index}. {option}")

    def show_items(self, items: Iterable[object], empty_message: str, header: str) -> None:
        items = list(items)
        if not items:
            self.say(empty_message)
            self.say()
            return
        self.say(header)
        for item in items:
            self.say(item)
        self.say()

    # ============== 输入 ==============

    def read_line(self) -> Optional[str]:
        """读取一行；输入流已关闭时返回 None"""
        try:
            return self.input_fn()
        except EOFError:
            self.warn("输入已关闭...")
            return None

    def read_line_or_quit(self) -> Optional[str]:
        """读取一行；输入 quit 或输入流已关闭时返回 None"""
        line = self.read_line()
        if line is None or line.strip() == ESCAPE_WORD:
            return None
        return line.strip()

    def read_choice(self) -> Optional[int]:
        """
        读取菜单选项

        Returns:
            选项编号；输入无效时为 0；输入流已关闭时为 None
        """
        line = self.read_line()
        if line is None:
            return None
        try:
            return int(line.strip())
        except ValueError:
            return 0

    def read_date(self) -> Optional[date]:
        """读取 YYYY-MM-DD 格式的日期，格式错误时重新输入"""
        while True:
            text = self.read_line_or_quit()
            if text is None:
                return None
            try:
                return parse_iso_date(text)
            except InvalidArgument:
                self.warn(f'日期格式无效，请输入 YYYY-MM-DD，或输入 "{ESCAPE_WORD}" 退出。')

    def warn_invalid_choice(self) -> None:
        self.warn("请输入有效的数字选项！\n")


class AdminMenu(BaseMenu):
    """管理员菜单"""

    title = "请选择操作："
    options = [
        "查看所有客户",
        "查看所有房间",
        "查看所有预订",
        "添加房间",
        "填充测试数据",
        "返回主菜单",
    ]

    def display_menu(self) -> None:
        actions = {
            1: self.view_all_customers,
            2: self.view_all_rooms,
            3: self.view_all_reservations,
            4: self.add_room,
            5: self.populate_test_data,
        }
        while True:
            self.show_options()
            choice = self.read_choice()
            if choice is None or choice == 6:
                return
            action = actions.get(choice)
            if action is None:
                self.warn_invalid_choice()
                continue
            action()
            self.say("返回管理员菜单...\n")

    def view_all_customers(self) -> None:
        self.show_items(
            self.services.admin_resource.get_all_customers(),
            "当前没有注册客户！",
            "系统中的注册客户：",
        )

    def view_all_rooms(self) -> None:
        self.show_items(
            self.services.admin_resource.get_all_rooms(),
            "当前没有任何房间！",
            "系统中的房间：",
        )

    def view_all_reservations(self) -> None:
        self.services.admin_resource.display_all_reservations(self.console.file)

    def add_room(self) -> None:
        pattern = re.compile(self.services.settings.ROOM_NUMBER_PATTERN)
        while True:
            self.say(f'录入过程中随时输入 "{ESCAPE_WORD}" 可退出。')

            self.say("请输入房间号（三位数字）：")
            while True:
                room_number = self.read_line_or_quit()
                if room_number is None:
                    return
                if pattern.fullmatch(room_number):
                    break
                self.warn("房间号必须是三位数字，请重新输入。")

            self.say("请输入价格（非负数，0 表示免费房）：")
            price = self.read_line_or_quit()
            if price is None:
                return

            self.say("请输入房型（single 或 double）：")
            while True:
                text = self.read_line_or_quit()
                if text is None:
                    return
                try:
                    room_type = RoomType.parse(text)
                    break
                except InvalidArgument:
                    self.warn("无法识别的房型，请重新输入。")

            try:
                room = Room(room_number, price, room_type)
            except InvalidArgument:
                self.warn("价格必须是非负数，请重新录入。")
                continue

            result = self.services.admin_resource.add_rooms([room])
            if result.added:
                self.say(f"{room} 已添加！")
            else:
                self.warn(f"房间 {room.room_number} 已存在，已跳过。")
            return

    def populate_test_data(self) -> None:
        report = populate_test_data(
            self.services.hotel_resource,
            self.services.admin_resource,
            self.services.settings,
        )
        self.say(
            f"新增客户 {report.customers_added} 位（跳过 {report.customers_skipped} 位），"
            f"新增房间 {report.rooms_added} 间（跳过 {report.rooms_skipped} 间），"
            f"预订 {report.reservations_booked} 条。"
        )
        self.say("测试数据填充完成！")


class MainMenu(BaseMenu):
    """主菜单"""

    title = "请选择操作："
    options = [
        "查找并预订房间",
        "查看我的预订",
        "注册账号",
        "管理员",
        "退出",
    ]

    def __init__(
        self,
        services: HotelServices,
        console: Optional[Console] = None,
        input_fn: Optional[InputFn] = None,
        today: Callable[[], date] = date.today,
    ):
        super().__init__(services, console, input_fn)
        self.today = today

    def display_menu(self) -> None:
        actions = {
            1: self.find_reserve_room,
            2: self.view_customer_reservations,
            3: self.create_account,
            4: self.to_admin_menu,
        }
        while True:
            self.show_options()
            choice = self.read_choice()
            if choice is None or choice == 5:
                self.say("再见！")
                return
            action = actions.get(choice)
            if action is None:
                self.warn_invalid_choice()
                continue
            action()
            self.say("返回主菜单...\n")

    def to_admin_menu(self) -> None:
        AdminMenu(self.services, self.console, self.input_fn).display_menu()

    def find_reserve_room(self) -> None:
        hotel = self.services.hotel_resource

        self.say(f'请输入邮箱，或输入 "{ESCAPE_WORD}" 退出：')
        email = self.read_line_or_quit()
        if email is None:
            return
        customer = hotel.get_customer(email)
        if customer is None:
            self.warn("系统中找不到该邮箱，请先在主菜单注册账号后再预订。")
            return

        while True:
            self.say("请输入入住日期（YYYY-MM-DD）：")
            while True:
                check_in = self.read_date()
                if check_in is None:
                    return
                if check_in >= self.today():
                    break
                self.warn("入住日期不能早于今天，请重新输入。")

            self.say("请输入离店日期（YYYY-MM-DD）：")
            while True:
                check_out = self.read_date()
                if check_out is None:
                    return
                if check_out >= check_in:
                    break
                self.warn("离店日期不能早于入住日期，请重新输入。")

            result = hotel.find_rooms_with_recommendations(check_in, check_out)
            if not result.rooms:
                self.warn("该日期范围内暂无空房，顺延后也没有空房，请尝试其他日期。")
                continue

            if result.recommended:
                self.warn("该日期范围内暂无空房，为您推荐顺延后的日期。")
            self.say(
                f"以下房间在 {result.check_in_date.isoformat()} 至 "
                f"{result.check_out_date.isoformat()} 可预订："
            )
            for room in result.rooms:
                self.say(room)
            self.say()
            self.say(f'请输入要预订的房间号，或输入 "{ESCAPE_WORD}" 退出：')

            rooms_by_number = {room.room_number: room for room in result.rooms}
            while True:
                room_number = self.read_line_or_quit()
                if room_number is None:
                    return
                room = rooms_by_number.get(room_number)
                if room is None:
                    self.warn(f'输入的房间号不在列表中，请重新输入，或输入 "{ESCAPE_WORD}" 退出。')
                    continue
                try:
                    hotel.book_a_room(
                        customer.email, room, result.check_in_date, result.check_out_date
                    )
                except RoomAlreadyReserved:
                    self.warn(f"抱歉，房间 {room_number} 已被预订，请选择其他房间。")
                    continue
                except CustomerNotFound:
                    self.warn("系统中找不到该邮箱，请先在主菜单注册账号后再预订。")
                    return
                self.say(f"房间 {room_number} 预订成功，谢谢！")
                return

    def view_customer_reservations(self) -> None:
        self.say(f'请输入注册时使用的邮箱（或输入 "{ESCAPE_WORD}" 退出）：')
        email = self.read_line_or_quit()
        if email is None:
            return
        try:
            reservations = self.services.hotel_resource.get_customer_reservations(email)
        except CustomerNotFound:
            self.warn("该邮箱尚未注册，请先注册账号。")
            return
        self.show_items(reservations, "您还没有预订任何房间。", "您预订的房间：")

    def create_account(self) -> None:
        self.say("请输入名：")
        first_name = self._read_required("名不能为空。")
        if first_name is None:
            return

        self.say("请输入姓：")
        last_name = self._read_required("姓不能为空。")
        if last_name is None:
            return

        self.say(f'请输入邮箱（或输入 "{ESCAPE_WORD}" 退出）：')
        while True:
            email = self.read_line_or_quit()
            if email is None:
                return
            try:
                self.services.hotel_resource.create_a_customer(email, first_name, last_name)
            except InvalidArgument:
                self.warn("邮箱格式不正确，请重新输入。")
                continue
            except CustomerAlreadyExists:
                self.warn("该邮箱已被其他客户使用，请换一个邮箱。")
                continue
            self.say("注册成功，感谢您的注册！")
            return

    def _read_required(self, empty_message: str) -> Optional[str]:
        while True:
            line = self.read_line()
            if line is None:
                return None
            if line.strip():
                return line.strip()
            self.warn(empty_message)
