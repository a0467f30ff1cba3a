# barbershop/routers/clients_routes.py

from typing import List

from fastapi import APIRouter, Depends
from sqlmodel import Session

from barbershop.db import get_session
from barbershop.errors import RecordNotFound
from barbershop.models import Client
from barbershop.repositories import ClientRepository
from barbershop.schemas import ClientCreate, ClientPublic

router = APIRouter(
    prefix="/clients",
    tags=["clients"],
)


@router.post("", status_code=201, response_model=ClientPublic)
def create_client(
    client: ClientCreate,
    session: Session = Depends(get_session),
):
    return ClientRepository(session).add(Client(**client.model_dump()))


@router.get("", response_model=List[ClientPublic])
def list_clients(session: Session = Depends(get_session)):
    return ClientRepository(session).list_all()


@router.get("/{client_id}", response_model=ClientPublic)
def get_client(
    client_id: int,
    session: Session = Depends(get_session),
):
    client = ClientRepository(session).find_by_id(client_id)
    if client is None:
        raise RecordNotFound("Client not found").to_http_exception()
    return client
