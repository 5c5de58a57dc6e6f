# API Schemas
from hotel_app.models import schemas

__all__ = ['schemas']
