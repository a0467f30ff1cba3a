# barbershop/routers/barbers_routes.py

from typing import List

from fastapi import APIRouter, Depends
from sqlmodel import Session

from barbershop.db import get_session
from barbershop.errors import RecordNotFound
from barbershop.models import Barber
from barbershop.repositories import BarberRepository
from barbershop.schemas import BarberCreate, BarberPublic

router = APIRouter(
    prefix="/barbers",
    tags=["barbers"],
)


@router.post("", status_code=201, response_model=BarberPublic)
def create_barber(
    barber: BarberCreate,
    session: Session = Depends(get_session),
):
    return BarberRepository(session).add(Barber(**barber.model_dump()))


@router.get("", response_model=List[BarberPublic])
def list_barbers(session: Session = Depends(get_session)):
    return BarberRepository(session).list_all()


@router.get("/{barber_id}", response_model=BarberPublic)
def get_barber(
    barber_id: int,
    session: Session = Depends(get_session),
):
    barber = BarberRepository(session).find_by_id(barber_id)
    if barber is None:
        raise RecordNotFound("Barber not found").to_http_exception()
    return barber
