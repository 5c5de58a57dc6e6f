"""
门面层测试
HotelResource / AdminResource 对核心服务的封装
"""
import io
import pytest
from datetime import date

from hotel_core.domain import FreeRoom, Room, RoomType
from hotel_core.exceptions import CustomerAlreadyExists, CustomerNotFound, RoomAlreadyReserved

d = date.fromisoformat


@pytest.fixture
def hotel(services):
    return services.hotel_resource


@pytest.fixture
def admin(services):
    return services.admin_resource


class TestHotelResource:
    def test_create_and_get_customer(self, hotel):
        hotel.create_a_customer("alice@example.com", "Alice", "Smith")
        customer = hotel.get_customer("alice@example.com")
        assert customer.first_name == "Alice"
        assert customer.last_name == "Smith"

    def test_create_duplicate_customer(self, hotel):
        hotel.create_a_customer("alice@example.com", "Alice", "Smith")
        with pytest.raises(CustomerAlreadyExists):
            hotel.create_a_customer("alice@example.com", "Other", "Person")

    def test_book_a_room_requires_registered_customer(self, hotel, admin, single_room):
        admin.add_rooms([single_room])
        with pytest.raises(CustomerNotFound):
            hotel.book_a_room("ghost@example.com", single_room, d("2024-01-01"), d("2024-01-02"))

    def test_book_a_room(self, hotel, admin, single_room):
        admin.add_rooms([single_room])
        hotel.create_a_customer("alice@example.com", "Alice", "Smith")

        reservation = hotel.book_a_room("alice@example.com", single_room, d("2024-01-01"), d("2024-01-02"))
        assert reservation.customer.email == "alice@example.com"
        assert hotel.get_customer_reservations("alice@example.com") == [reservation]

        with pytest.raises(RoomAlreadyReserved):
            hotel.book_a_room("alice@example.com", single_room, d("2024-01-02"), d("2024-01-03"))

    def test_get_reservations_for_unknown_customer(self, hotel):
        with pytest.raises(CustomerNotFound):
            hotel.get_customer_reservations("ghost@example.com")

    def test_find_rooms_without_recommendation(self, hotel, admin, single_room):
        admin.add_rooms([single_room])
        result = hotel.find_rooms_with_recommendations(d("2024-01-01"), d("2024-01-03"))

        assert result.rooms == [single_room]
        assert result.recommended is False
        assert (result.check_in_date, result.check_out_date) == (d("2024-01-01"), d("2024-01-03"))

    def test_find_rooms_recommends_shifted_range(self, hotel, admin, single_room):
        admin.add_rooms([single_room])
        hotel.create_a_customer("alice@example.com", "Alice", "Smith")
        hotel.book_a_room("alice@example.com", single_room, d("2024-01-01"), d("2024-01-05"))

        result = hotel.find_rooms_with_recommendations(d("2024-01-02"), d("2024-01-03"))

        assert result.recommended is True
        assert (result.check_in_date, result.check_out_date) == (d("2024-01-09"), d("2024-01-10"))
        assert result.rooms == [single_room]

    def test_recommendation_can_be_empty(self, hotel, admin, single_room):
        admin.add_rooms([single_room])
        hotel.create_a_customer("alice@example.com", "Alice", "Smith")
        hotel.book_a_room("alice@example.com", single_room, d("2024-01-01"), d("2024-01-31"))

        result = hotel.find_rooms_with_recommendations(d("2024-01-02"), d("2024-01-03"))
        assert result.recommended is True
        assert result.rooms == []


class TestAdminResource:
    def test_add_rooms_skips_duplicates(self, admin):
        result = admin.add_rooms([
            Room("101", 100, RoomType.SINGLE),
            FreeRoom("102", RoomType.DOUBLE),
            Room("101", 50, RoomType.DOUBLE),
        ])

        assert [r.room_number for r in result.added] == ["101", "102"]
        assert [r.room_number for r in result.skipped] == ["101"]
        assert len(admin.get_all_rooms()) == 2

    def test_get_all_customers(self, admin, hotel):
        hotel.create_a_customer("alice@example.com", "Alice", "Smith")
        assert [c.email for c in admin.get_all_customers()] == ["alice@example.com"]
        assert admin.get_customer("alice@example.com") is not None

    def test_display_all_reservations(self, admin, hotel, single_room):
        out = io.StringIO()
        admin.display_all_reservations(out)
        assert "当前没有任何预订" in out.getvalue()

        admin.add_rooms([single_room])
        hotel.create_a_customer("alice@example.com", "Alice", "Smith")
        hotel.book_a_room("alice@example.com", single_room, d("2024-01-01"), d("2024-01-02"))

        out = io.StringIO()
        admin.display_all_reservations(out)
        assert "alice@example.com" in out.getvalue()
        assert len(admin.get_all_reservations()) == 1
