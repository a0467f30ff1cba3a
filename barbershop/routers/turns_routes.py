# barbershop/routers/turns_routes.py

from fastapi import APIRouter, Depends

from barbershop.booking import TurnBookingService
from barbershop.deps import get_booking_service
from barbershop.errors import BookingError
from barbershop.schemas import (
    Message,
    TurnCreate,
    TurnEnvelope,
    TurnList,
    TurnPublic,
    TurnUpdate,
)

router = APIRouter(
    prefix="/turns",
    tags=["turns"],
)


@router.post("", response_model=Message)
def create_turn(
    turn: TurnCreate,
    booking: TurnBookingService = Depends(get_booking_service),
):
    try:
        created = booking.create_turn(turn)
    except BookingError as exc:
        raise exc.to_http_exception()
    return {"message": "Turn created", "id": created.id}


@router.get("", response_model=TurnList)
def list_turns(booking: TurnBookingService = Depends(get_booking_service)):
    try:
        turns = booking.list_turns()
    except BookingError as exc:
        raise exc.to_http_exception()
    # serialize while the session is still open so relationships resolve
    return {"turns": [TurnPublic.model_validate(t) for t in turns]}


@router.get("/{turn_id}", response_model=TurnEnvelope)
def get_turn(
    turn_id: int,
    booking: TurnBookingService = Depends(get_booking_service),
):
    try:
        turn = booking.get_turn(turn_id)
    except BookingError as exc:
        raise exc.to_http_exception()
    return {"turn": TurnPublic.model_validate(turn)}


@router.put("/{turn_id}", response_model=Message, response_model_exclude_none=True)
def update_turn(
    turn_id: int,
    turn: TurnUpdate,
    booking: TurnBookingService = Depends(get_booking_service),
):
    try:
        booking.update_turn(turn_id, turn)
    except BookingError as exc:
        raise exc.to_http_exception()
    return {"message": "Turn updated"}


@router.delete("/{turn_id}", response_model=Message, response_model_exclude_none=True)
def delete_turn(
    turn_id: int,
    booking: TurnBookingService = Depends(get_booking_service),
):
    try:
        booking.delete_turn(turn_id)
    except BookingError as exc:
        raise exc.to_http_exception()
    return {"message": "Turn deleted"}
