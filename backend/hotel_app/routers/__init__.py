# API Routers
from hotel_app.routers import customers, rooms, reservations, admin

__all__ = ['customers', 'rooms', 'reservations', 'admin']
