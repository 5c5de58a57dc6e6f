"""
管理员路由
查看全部客户/房间/预订，批量添加房间，填充测试数据
"""
import re
from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from hotel_app.dependencies import HotelServices, get_services
from hotel_app.models.schemas import (
    CustomerResponse, RoomResponse, RoomBatchCreate, RoomBatchResponse,
    ReservationResponse, SeedResponse
)
from hotel_app.seed import populate_test_data
from hotel_core.domain import Room
from hotel_core.exceptions import InvalidArgument

router = APIRouter(prefix="/admin", tags=["管理"])


@router.get("/customers", response_model=List[CustomerResponse])
def list_customers(services: HotelServices = Depends(get_services)):
    """获取所有客户"""
    return [
        CustomerResponse.model_validate(c)
        for c in services.admin_resource.get_all_customers()
    ]


@router.get("/rooms", response_model=List[RoomResponse])
def list_rooms(services: HotelServices = Depends(get_services)):
    """获取所有房间"""
    return [
        RoomResponse.model_validate(r)
        for r in services.admin_resource.get_all_rooms()
    ]


@router.post("/rooms", response_model=RoomBatchResponse, status_code=status.HTTP_201_CREATED)
def add_rooms(
    data: RoomBatchCreate,
    services: HotelServices = Depends(get_services)
):
    """批量添加房间，已存在的房间号会被跳过"""
    pattern = re.compile(services.settings.ROOM_NUMBER_PATTERN)
    rooms = []
    for item in data.rooms:
        if not pattern.fullmatch(item.room_number):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"房间号必须是三位数字: '{item.room_number}'"
            )
        try:
            rooms.append(Room(item.room_number, item.price, item.room_type))
        except InvalidArgument as e:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    result = services.admin_resource.add_rooms(rooms)
    return RoomBatchResponse(
        added=[RoomResponse.model_validate(r) for r in result.added],
        skipped=[r.room_number for r in result.skipped],
    )


@router.get("/reservations", response_model=List[ReservationResponse])
def list_reservations(services: HotelServices = Depends(get_services)):
    """获取所有预订（按创建顺序）"""
    return [
        ReservationResponse.model_validate(r)
        for r in services.admin_resource.get_all_reservations()
    ]


@router.post("/test-data", response_model=SeedResponse)
def create_test_data(services: HotelServices = Depends(get_services)):
    """填充测试数据"""
    report = populate_test_data(
        services.hotel_resource, services.admin_resource, services.settings
    )
    return SeedResponse(
        customers_added=report.customers_added,
        customers_skipped=report.customers_skipped,
        rooms_added=report.rooms_added,
        rooms_skipped=report.rooms_skipped,
        reservations_booked=report.reservations_booked,
    )
