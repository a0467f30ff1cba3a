# barbershop/routers/services_routes.py

from typing import List

from fastapi import APIRouter, Depends
from sqlmodel import Session

from barbershop.db import get_session
from barbershop.errors import RecordNotFound
from barbershop.models import Service
from barbershop.repositories import ServiceRepository
from barbershop.schemas import ServiceCreate, ServicePublic

router = APIRouter(
    prefix="/services",
    tags=["services"],
)


@router.post("", status_code=201, response_model=ServicePublic)
def create_service(
    service: ServiceCreate,
    session: Session = Depends(get_session),
):
    return ServiceRepository(session).add(Service(**service.model_dump()))


@router.get("", response_model=List[ServicePublic])
def list_services(session: Session = Depends(get_session)):
    return ServiceRepository(session).list_all()


@router.get("/{service_id}", response_model=ServicePublic)
def get_service(
    service_id: int,
    session: Session = Depends(get_session),
):
    service = ServiceRepository(session).find_by_id(service_id)
    if service is None:
        raise RecordNotFound("Service not found").to_http_exception()
    return service
