"""
客户目录服务单元测试
"""
import pytest
from unittest.mock import Mock

from hotel_core.events import EventType
from hotel_core.exceptions import CustomerAlreadyExists, InvalidArgument
from hotel_core.services import CustomerService


class TestAddCustomer:
    def test_add_and_get(self, customer_service):
        customer = customer_service.add_customer("Alice", "Smith", "alice@example.com")
        assert customer_service.get_customer("alice@example.com") is customer

    def test_duplicate_email_rejected_even_with_different_names(self, customer_service):
        customer_service.add_customer("Alice", "Smith", "alice@example.com")
        with pytest.raises(CustomerAlreadyExists):
            customer_service.add_customer("Someone", "Else", "alice@example.com")

        assert len(customer_service.get_all_customers()) == 1
        assert customer_service.get_customer("alice@example.com").first_name == "Alice"

    def test_invalid_customer_not_stored(self, customer_service):
        with pytest.raises(InvalidArgument):
            customer_service.add_customer("Alice", "Smith", "not-an-email")
        with pytest.raises(InvalidArgument):
            customer_service.add_customer("", "Smith", "alice@example.com")
        assert customer_service.get_all_customers() == ()

    def test_publishes_event(self):
        publisher = Mock()
        service = CustomerService(event_publisher=publisher)
        service.add_customer("Alice", "Smith", "alice@example.com")

        publisher.assert_called_once()
        event = publisher.call_args[0][0]
        assert event.event_type == EventType.CUSTOMER_REGISTERED
        assert event.data["email"] == "alice@example.com"

    def test_no_event_on_failure(self):
        publisher = Mock()
        service = CustomerService(event_publisher=publisher)
        service.add_customer("Alice", "Smith", "alice@example.com")
        publisher.reset_mock()

        with pytest.raises(CustomerAlreadyExists):
            service.add_customer("Alice", "Smith", "alice@example.com")
        publisher.assert_not_called()


class TestGetCustomer:
    def test_unknown_email_returns_none(self, customer_service):
        assert customer_service.get_customer("nobody@example.com") is None

    def test_malformed_email_returns_none(self, customer_service):
        assert customer_service.get_customer("not an email") is None

    def test_none_email_is_contract_violation(self, customer_service):
        with pytest.raises(TypeError):
            customer_service.get_customer(None)

    def test_get_all_customers(self, customer_service):
        customer_service.add_customer("Alice", "Smith", "alice@example.com")
        customer_service.add_customer("Bob", "Jones", "bob@example.com")
        emails = {c.email for c in customer_service.get_all_customers()}
        assert emails == {"alice@example.com", "bob@example.com"}

    def test_get_all_customers_is_read_only(self, customer_service):
        customer_service.add_customer("Alice", "Smith", "alice@example.com")
        customers = customer_service.get_all_customers()
        with pytest.raises((TypeError, AttributeError)):
            customers.append(None)
