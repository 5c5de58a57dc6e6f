"""
领域事件 - 内存级发布/订阅
客户注册、房间上架、预订成功后发布事件，解耦日志/通知等旁路逻辑
"""
from typing import Any, Callable, Dict, List, Optional
from dataclasses import dataclass, field
from datetime import datetime
from collections import deque
import logging
import threading

logger = logging.getLogger(__name__)


class EventType:
    """事件类型"""
    CUSTOMER_REGISTERED = "customer.registered"
    ROOM_ADDED = "room.added"
    RESERVATION_CREATED = "reservation.created"


@dataclass
class Event:
    """事件基类"""
    event_type: str
    timestamp: datetime
    data: Dict[str, Any]
    source: str  # 触发来源（服务名）
    event_id: str = field(default_factory=lambda: datetime.now().strftime("%Y%m%d%H%M%S%f"))


EventPublisher = Callable[[Event], None]


def discard_event(event: Event) -> None:
    """未注入发布器时的默认实现"""
    return None


class EventBus:
    """
    内存级事件总线（线程安全）

    每个应用实例持有自己的总线；处理器在发布线程中同步执行，
    单个处理器出错只记录日志，不影响其余处理器和发布方。
    最近的事件保留在有界历史中，便于排查。
    """

    def __init__(self, history_size: int = 100):
        self._handlers: Dict[str, List[Callable[[Event], None]]] = {}
        self._history: deque = deque(maxlen=history_size)
        self._lock = threading.Lock()

    def subscribe(self, event_type: str, handler: Callable[[Event], None]) -> None:
        """订阅事件类型；同一处理器重复订阅只保留一次"""
        with self._lock:
            handlers = self._handlers.setdefault(event_type, [])
            if handler in handlers:
                return
            handlers.append(handler)
        logger.debug(f"{handler.__name__} listening on {event_type}")

    def publish(self, event: Event) -> None:
        with self._lock:
            self._history.append(event)
            handlers = list(self._handlers.get(event.event_type, ()))

        for handler in handlers:
            try:
                handler(event)
            except Exception:
                logger.exception(f"Handler {handler.__name__} failed on {event.event_id}")

    def get_history(self, event_type: Optional[str] = None, limit: int = 50) -> List[Event]:
        """最近的事件，最新的在前；可按类型过滤"""
        with self._lock:
            events = list(self._history)
        matched = [e for e in reversed(events) if event_type is None or e.event_type == event_type]
        return matched[:limit]
