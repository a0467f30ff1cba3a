# barbershop/schemas.py

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

# largest value a signed 64-bit database column holds is BIGINT_LIMIT - 1
BIGINT_LIMIT = 2**63


class ClientCreate(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    last_name: str = Field(min_length=1, max_length=100)
    phone: Optional[str] = Field(default=None, max_length=30)
    email: Optional[str] = Field(default=None, max_length=255)


class ClientPublic(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    last_name: str
    phone: Optional[str] = None
    email: Optional[str] = None


class BarberCreate(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    last_name: str = Field(min_length=1, max_length=100)


class BarberPublic(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    last_name: str


class ServiceCreate(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    description: Optional[str] = None
    price: float = Field(default=0.0, ge=0)
    duration_minutes: int = Field(default=30, gt=0)


class ServicePublic(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: Optional[str] = None
    price: float
    duration_minutes: int


class TurnCreate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    date: int = Field(gt=0, lt=BIGINT_LIMIT)  # epoch milliseconds
    service_id: int = Field(gt=0, lt=BIGINT_LIMIT)
    barber_id: int = Field(gt=0, lt=BIGINT_LIMIT)
    client_id: int = Field(gt=0, lt=BIGINT_LIMIT)


# full replacement, same shape as create
class TurnUpdate(TurnCreate):
    pass


class TurnPublic(BaseModel):
    """A turn with its associations expanded and the raw foreign keys left out."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    date: int
    service: ServicePublic
    barber: BarberPublic
    client: ClientPublic


class TurnList(BaseModel):
    turns: List[TurnPublic]


class TurnEnvelope(BaseModel):
    turn: TurnPublic


class Message(BaseModel):
    message: str
    id: Optional[int] = None
