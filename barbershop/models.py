# barbershop/models.py

from typing import List, Optional

from sqlalchemy import BigInteger, Column, UniqueConstraint
from sqlmodel import Field, Relationship, SQLModel


class Client(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str
    last_name: str
    phone: Optional[str] = None
    email: Optional[str] = Field(default=None, index=True)

    turns: List["Turn"] = Relationship(back_populates="client")


class Barber(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str
    last_name: str

    turns: List["Turn"] = Relationship(back_populates="barber")


class Service(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(index=True)
    description: Optional[str] = None
    price: float = 0.0
    duration_minutes: int = 30

    turns: List["Turn"] = Relationship(back_populates="service")


class Turn(SQLModel, table=True):
    # one turn per exact timestamp, enforced by the database as well
    __table_args__ = (
        UniqueConstraint("date", name="uq_turn_date"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)

    date: int = Field(sa_column=Column("date", BigInteger, nullable=False))  # epoch milliseconds
    service_id: int = Field(foreign_key="service.id")
    barber_id: int = Field(foreign_key="barber.id")
    client_id: int = Field(foreign_key="client.id")

    service: Optional[Service] = Relationship(back_populates="turns")
    barber: Optional[Barber] = Relationship(back_populates="turns")
    client: Optional[Client] = Relationship(back_populates="turns")
