# barbershop/deps.py

from fastapi import Depends
from sqlmodel import Session

from .booking import TurnBookingService
from .db import get_session
from .repositories import BarberRepository, ClientRepository, ServiceRepository, TurnRepository


def get_booking_service(session: Session = Depends(get_session)) -> TurnBookingService:
    return TurnBookingService(
        clients=ClientRepository(session),
        barbers=BarberRepository(session),
        services=ServiceRepository(session),
        turns=TurnRepository(session),
    )
