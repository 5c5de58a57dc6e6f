"""
Pydantic 模式定义
用于 API 请求/响应验证
"""
from datetime import date
from decimal import Decimal
from typing import List
from pydantic import BaseModel, Field, ConfigDict
from hotel_core.domain import RoomType


# ============== 客户 Schemas ==============

class CustomerBase(BaseModel):
    first_name: str = Field(..., max_length=100)
    last_name: str = Field(..., max_length=100)
    email: str = Field(..., max_length=254)


class CustomerCreate(CustomerBase):
    pass


class CustomerResponse(CustomerBase):
    model_config = ConfigDict(from_attributes=True)


# ============== 房间 Schemas ==============

class RoomBase(BaseModel):
    room_number: str = Field(..., max_length=10)
    price: Decimal
    room_type: RoomType


class RoomCreate(RoomBase):
    pass


class RoomResponse(RoomBase):
    is_free: bool
    model_config = ConfigDict(from_attributes=True)


class RoomBatchCreate(BaseModel):
    rooms: List[RoomCreate] = Field(..., min_length=1)


class RoomBatchResponse(BaseModel):
    """批量添加结果，skipped 为已存在而被跳过的房间号"""
    added: List[RoomResponse]
    skipped: List[str]


class RoomSearchResponse(BaseModel):
    """查房结果，recommended 为 True 表示日期已被顺延"""
    check_in_date: date
    check_out_date: date
    recommended: bool
    rooms: List[RoomResponse]


# ============== 预订 Schemas ==============

class ReservationCreate(BaseModel):
    email: str = Field(..., max_length=254)
    room_number: str = Field(..., max_length=10)
    check_in_date: date
    check_out_date: date


class ReservationResponse(BaseModel):
    customer: CustomerResponse
    room: RoomResponse
    check_in_date: date
    check_out_date: date
    model_config = ConfigDict(from_attributes=True)


# ============== 测试数据 Schemas ==============

class SeedResponse(BaseModel):
    customers_added: int
    customers_skipped: int
    rooms_added: int
    rooms_skipped: int
    reservations_booked: int
