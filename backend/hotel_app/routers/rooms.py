"""
房间查询路由
"""
from datetime import date
from fastapi import APIRouter, Depends, HTTPException, status, Query
from hotel_app.dependencies import get_hotel_resource
from hotel_app.models.schemas import RoomResponse, RoomSearchResponse
from hotel_app.resources import HotelResource

router = APIRouter(prefix="/rooms", tags=["房间"])


@router.get("/available", response_model=RoomSearchResponse)
def find_available_rooms(
    check_in: date = Query(..., description="入住日期 YYYY-MM-DD"),
    check_out: date = Query(..., description="离店日期 YYYY-MM-DD"),
    hotel: HotelResource = Depends(get_hotel_resource)
):
    """查找空房；无空房时返回顺延后的推荐结果"""
    if check_in > check_out:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="入住日期不能晚于离店日期"
        )
    result = hotel.find_rooms_with_recommendations(check_in, check_out)
    return RoomSearchResponse(
        check_in_date=result.check_in_date,
        check_out_date=result.check_out_date,
        recommended=result.recommended,
        rooms=[RoomResponse.model_validate(room) for room in result.rooms],
    )


@router.get("/{room_number}", response_model=RoomResponse)
def get_room(
    room_number: str,
    hotel: HotelResource = Depends(get_hotel_resource)
):
    """按房间号获取房间"""
    room = hotel.get_room(room_number)
    if not room:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="房间不存在")
    return RoomResponse.model_validate(room)
