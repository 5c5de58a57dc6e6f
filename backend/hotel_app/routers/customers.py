"""
客户路由
"""
from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from hotel_app.dependencies import get_hotel_resource
from hotel_app.models.schemas import CustomerCreate, CustomerResponse, ReservationResponse
from hotel_app.resources import HotelResource
from hotel_core.exceptions import CustomerAlreadyExists, CustomerNotFound, InvalidArgument

router = APIRouter(prefix="/customers", tags=["客户"])


@router.post("", response_model=CustomerResponse, status_code=status.HTTP_201_CREATED)
def create_customer(
    data: CustomerCreate,
    hotel: HotelResource = Depends(get_hotel_resource)
):
    """注册客户"""
    try:
        customer = hotel.create_a_customer(data.email, data.first_name, data.last_name)
    except InvalidArgument as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except CustomerAlreadyExists as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    return CustomerResponse.model_validate(customer)


# 邮箱本地部分可能含 "/"，因此按 path 匹配；带后缀的路由需先注册
@router.get("/{email:path}/reservations", response_model=List[ReservationResponse])
def get_customer_reservations(
    email: str,
    hotel: HotelResource = Depends(get_hotel_resource)
):
    """获取客户的预订（按创建顺序）"""
    try:
        reservations = hotel.get_customer_reservations(email)
    except CustomerNotFound as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return [ReservationResponse.model_validate(r) for r in reservations]


@router.get("/{email:path}", response_model=CustomerResponse)
def get_customer(
    email: str,
    hotel: HotelResource = Depends(get_hotel_resource)
):
    """按邮箱获取客户"""
    customer = hotel.get_customer(email)
    if not customer:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="客户不存在")
    return CustomerResponse.model_validate(customer)
