"""
客户服务 - 客户目录
按邮箱唯一存储客户，拒绝重复注册
"""
from typing import Dict, Optional, Tuple
from datetime import datetime
import logging
import threading

from hotel_core.domain.customer import Customer
from hotel_core.events import Event, EventPublisher, EventType, discard_event
from hotel_core.exceptions import CustomerAlreadyExists, require

logger = logging.getLogger(__name__)


class CustomerService:
    """客户目录服务"""

    def __init__(self, event_publisher: Optional[EventPublisher] = None):
        self._customers: Dict[str, Customer] = {}
        self._lock = threading.RLock()
        # 支持依赖注入事件发布器，便于测试
        self._publish_event = event_publisher or discard_event

    def add_customer(self, first_name: str, last_name: str, email: str) -> Customer:
        """
        注册客户

        Raises:
            InvalidArgument: 姓名为空或邮箱格式错误
            CustomerAlreadyExists: 邮箱已被注册（与姓名无关）
        """
        customer = Customer(first_name, last_name, email)

        with self._lock:
            if customer.email in self._customers:
                raise CustomerAlreadyExists(customer.email)
            self._customers[customer.email] = customer

        logger.info(f"Customer registered: {customer.email}")
        self._publish_event(Event(
            event_type=EventType.CUSTOMER_REGISTERED,
            timestamp=datetime.now(),
            data={"email": customer.email, "name": customer.full_name},
            source="customer_service",
        ))
        return customer

    def get_customer(self, email: str) -> Optional[Customer]:
        """按邮箱查找客户，格式错误的邮箱同样返回 None"""
        require(email, "email")
        with self._lock:
            return self._customers.get(email)

    def get_all_customers(self) -> Tuple[Customer, ...]:
        """获取所有客户（只读快照，顺序不保证）"""
        with self._lock:
            return tuple(self._customers.values())
