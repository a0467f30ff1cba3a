# barbershop/repositories.py

"""
Data access for clients, barbers, services and turns.

Each entity gets a small repository interface so the booking layer
never talks to the session directly.  The SQLModel implementations
below are what the API uses; tests can swap in in-memory versions.
"""

from abc import ABC, abstractmethod
import logging
from typing import Generic, List, Optional, Type, TypeVar

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import selectinload
from sqlmodel import Session, SQLModel, select

from .models import Barber, Client, Service, Turn

T = TypeVar("T", bound=SQLModel)

logger = logging.getLogger(__name__)


class Repository(ABC, Generic[T]):
    """Lookup by primary key."""

    @abstractmethod
    def find_by_id(self, id: int) -> Optional[T]:
        """Return the entity with this id, or None."""


class TurnStore(Repository[Turn]):
    """Turn storage: lookups plus the writes the booking flows need."""

    @abstractmethod
    def find_by_date(self, date: int) -> Optional[Turn]:
        """Return the turn scheduled at exactly ``date`` (epoch ms), if any."""

    @abstractmethod
    def find_expanded(self, id: int) -> Optional[Turn]:
        """Like ``find_by_id`` but with service, barber and client loaded."""

    @abstractmethod
    def list_all(self) -> List[Turn]:
        """All turns in insertion order, associations loaded."""

    @abstractmethod
    def add(self, turn: Turn) -> Turn:
        """Insert a new turn and return it with its id filled in."""

    @abstractmethod
    def save(self, turn: Turn) -> Turn:
        """Persist changes made to an existing turn."""

    @abstractmethod
    def remove(self, turn: Turn) -> None:
        """Delete the turn."""


class SqlRepository(Repository[T]):
    model: Type[T]

    def __init__(self, session: Session):
        self.session = session

    def find_by_id(self, id: int) -> Optional[T]:
        return self.session.get(self.model, id)

    def list_all(self) -> List[T]:
        return list(self.session.exec(select(self.model).order_by(self.model.id)).all())

    def add(self, obj: T) -> T:
        self.session.add(obj)
        self._commit()
        self.session.refresh(obj)  # fills obj.id
        return obj

    def _commit(self) -> None:
        try:
            self.session.commit()
        except IntegrityError:
            self.session.rollback()
            raise


class ClientRepository(SqlRepository[Client]):
    model = Client


class BarberRepository(SqlRepository[Barber]):
    model = Barber


class ServiceRepository(SqlRepository[Service]):
    model = Service


class TurnRepository(SqlRepository[Turn], TurnStore):
    model = Turn

    def _expanded(self):
        return select(Turn).options(
            selectinload(Turn.service),
            selectinload(Turn.barber),
            selectinload(Turn.client),
        )

    def find_by_date(self, date: int) -> Optional[Turn]:
        return self.session.exec(select(Turn).where(Turn.date == date)).first()

    def find_expanded(self, id: int) -> Optional[Turn]:
        return self.session.exec(self._expanded().where(Turn.id == id)).first()

    def list_all(self) -> List[Turn]:
        return list(self.session.exec(self._expanded().order_by(Turn.id)).all())

    def save(self, turn: Turn) -> Turn:
        self.session.add(turn)
        self._commit()
        self.session.refresh(turn)
        return turn

    def remove(self, turn: Turn) -> None:
        turn_id = turn.id
        self.session.delete(turn)
        self.session.commit()
        logger.debug("Removed turn row %s", turn_id)
