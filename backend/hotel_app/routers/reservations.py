"""
预订路由
"""
from fastapi import APIRouter, Depends, HTTPException, status
from hotel_app.dependencies import get_hotel_resource
from hotel_app.models.schemas import ReservationCreate, ReservationResponse
from hotel_app.resources import HotelResource
from hotel_core.exceptions import CustomerNotFound, InvalidArgument, RoomAlreadyReserved

router = APIRouter(prefix="/reservations", tags=["预订"])


@router.post("", response_model=ReservationResponse, status_code=status.HTTP_201_CREATED)
def create_reservation(
    data: ReservationCreate,
    hotel: HotelResource = Depends(get_hotel_resource)
):
    """预订房间"""
    room = hotel.get_room(data.room_number)
    if not room:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="房间不存在")

    try:
        reservation = hotel.book_a_room(
            data.email, room, data.check_in_date, data.check_out_date
        )
    except CustomerNotFound as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except RoomAlreadyReserved as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except InvalidArgument as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return ReservationResponse.model_validate(reservation)
