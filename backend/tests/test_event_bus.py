"""
领域事件总线单元测试
"""
import pytest
from datetime import datetime

from hotel_core.events import Event, EventBus, EventType


class TestEventBus:
    """事件总线测试"""

    @pytest.fixture
    def event_bus(self):
        """每个测试独立的总线实例"""
        return EventBus()

    @pytest.fixture
    def reservation_event(self):
        return Event(
            event_type=EventType.RESERVATION_CREATED,
            timestamp=datetime.now(),
            data={"room_number": "101"},
            source="test"
        )

    def test_instances_are_independent(self):
        """不再是进程级单例"""
        assert EventBus() is not EventBus()

    def test_subscribe_and_publish(self, event_bus, reservation_event):
        received = []
        event_bus.subscribe(EventType.RESERVATION_CREATED, received.append)
        event_bus.publish(reservation_event)

        assert received == [reservation_event]

    def test_other_event_types_not_delivered(self, event_bus, reservation_event):
        received = []
        event_bus.subscribe(EventType.ROOM_ADDED, received.append)
        event_bus.publish(reservation_event)

        assert received == []

    def test_handler_exception_isolation(self, event_bus, reservation_event):
        """处理器异常不影响其他处理器"""
        successful_calls = []

        def failing_handler(event):
            raise ValueError("Test error")

        def successful_handler(event):
            successful_calls.append(event)

        event_bus.subscribe(EventType.RESERVATION_CREATED, failing_handler)
        event_bus.subscribe(EventType.RESERVATION_CREATED, successful_handler)
        event_bus.publish(reservation_event)

        assert len(successful_calls) == 1

    def test_duplicate_subscription(self, event_bus, reservation_event):
        call_count = [0]

        def handler(event):
            call_count[0] += 1

        event_bus.subscribe(EventType.RESERVATION_CREATED, handler)
        event_bus.subscribe(EventType.RESERVATION_CREATED, handler)
        event_bus.publish(reservation_event)

        assert call_count[0] == 1

    def test_history_newest_first_and_bounded(self):
        event_bus = EventBus(history_size=10)
        for i in range(15):
            event_bus.publish(Event(
                event_type=EventType.ROOM_ADDED,
                timestamp=datetime.now(),
                data={"index": i},
                source="test"
            ))

        history = event_bus.get_history(limit=100)
        assert len(history) == 10
        assert history[0].data["index"] == 14

    def test_history_filter(self, event_bus, reservation_event):
        event_bus.publish(reservation_event)
        event_bus.publish(Event(
            event_type=EventType.ROOM_ADDED, timestamp=datetime.now(), data={}, source="test"
        ))

        history = event_bus.get_history(event_type=EventType.ROOM_ADDED)
        assert [e.event_type for e in history] == [EventType.ROOM_ADDED]

    def test_services_publish_through_bus(self, services):
        """装配后的服务通过应用自己的总线发布事件"""
        services.hotel_resource.create_a_customer("alice@example.com", "Alice", "Smith")

        history = services.event_bus.get_history(event_type=EventType.CUSTOMER_REGISTERED)
        assert len(history) == 1
        assert history[0].source == "customer_service"
