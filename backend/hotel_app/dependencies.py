"""
服务装配与依赖注入

每个应用实例（HTTP 应用或一次 CLI 会话）显式构造一套服务并向下传递，
不使用进程级单例。
"""
from dataclasses import dataclass
import logging

from fastapi import Request

from hotel_app.config import Settings
from hotel_app.resources import AdminResource, HotelResource
from hotel_core.events import Event, EventBus, EventType
from hotel_core.services import CustomerService, ReservationService

logger = logging.getLogger(__name__)


@dataclass
class HotelServices:
    """一套相互关联的服务实例"""
    settings: Settings
    event_bus: EventBus
    customer_service: CustomerService
    reservation_service: ReservationService
    hotel_resource: HotelResource
    admin_resource: AdminResource


def log_domain_event(event: Event) -> None:
    logger.debug(f"[{event.source}] {event.event_type}: {event.data}")


def create_services(app_settings: Settings) -> HotelServices:
    """构造服务并注册默认事件处理器"""
    event_bus = EventBus()
    for event_type in (
        EventType.CUSTOMER_REGISTERED,
        EventType.ROOM_ADDED,
        EventType.RESERVATION_CREATED,
    ):
        event_bus.subscribe(event_type, log_domain_event)

    customer_service = CustomerService(event_publisher=event_bus.publish)
    reservation_service = ReservationService(event_publisher=event_bus.publish)
    return HotelServices(
        settings=app_settings,
        event_bus=event_bus,
        customer_service=customer_service,
        reservation_service=reservation_service,
        hotel_resource=HotelResource(
            customer_service,
            reservation_service,
            recommendation_days=app_settings.RECOMMENDATION_DAYS,
        ),
        admin_resource=AdminResource(customer_service, reservation_service),
    )


def get_services(request: Request) -> HotelServices:
    """依赖注入：获取应用持有的服务"""
    return request.app.state.services


def get_hotel_resource(request: Request) -> HotelResource:
    return get_services(request).hotel_resource


def get_admin_resource(request: Request) -> AdminResource:
    return get_services(request).admin_resource
