"""
Core Services Module - 客户目录与房间/预订存储
"""

from hotel_core.services.customer_service import CustomerService
from hotel_core.services.reservation_service import ReservationService

__all__ = [
    "CustomerService",
    "ReservationService",
]
