"""
Pytest 配置和共享 fixtures
"""
import io
import pytest
from decimal import Decimal
from fastapi.testclient import TestClient
from rich.console import Console

from hotel_app.config import Settings
from hotel_app.dependencies import create_services
from hotel_app.main import create_app
from hotel_core.domain import Customer, Room, RoomType
from hotel_core.services import CustomerService, ReservationService


@pytest.fixture
def test_settings():
    """测试用设置（固定随机种子，缩小测试数据规模）"""
    return Settings(
        SEED_RANDOM_SEED=42,
        SEED_FLOORS=2,
        SEED_ROOMS_PER_FLOOR=5,
        SEED_RESERVATIONS=6,
    )


@pytest.fixture
def customer_service():
    return CustomerService()


@pytest.fixture
def reservation_service():
    return ReservationService()


@pytest.fixture
def services(test_settings):
    """一套完整装配的服务"""
    return create_services(test_settings)


@pytest.fixture
def client(test_settings):
    """创建测试客户端（每个测试独立的内存存储）"""
    app = create_app(test_settings)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def console():
    """输出写入内存的控制台"""
    return Console(file=io.StringIO(), width=200, color_system=None)


# ============== 实体 Fixtures ==============

@pytest.fixture
def alice():
    return Customer("Alice", "Smith", "alice@example.com")


@pytest.fixture
def bob():
    return Customer("Bob", "Jones", "bob@example.com")


@pytest.fixture
def single_room():
    return Room("101", Decimal("99.5"), RoomType.SINGLE)


@pytest.fixture
def double_room():
    return Room("102", Decimal("150"), RoomType.DOUBLE)
