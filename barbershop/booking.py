# barbershop/booking.py

"""
Turn booking: the business rules behind creating and changing turns.

``TurnBookingService`` receives its four repositories at construction
time and never touches a session itself.  Create and update run the
same ordered list of named rules (``TURN_RULES``); the first rule that
fails decides the error returned to the caller, and nothing is written.

Dates are epoch milliseconds.  A turn's date must be strictly after
"now" as given by the injected clock, and no two turns may share a
date.  The date check is repeated by the database through the
``uq_turn_date`` constraint, so a concurrent writer that slips between
the check and the insert still ends up with ``DateConflict``.
"""

from contextlib import contextmanager
from dataclasses import dataclass
from datetime import datetime, timezone
import logging
from typing import Callable, Iterator, List, Optional, Tuple

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from .errors import (
    BarberNotFound,
    ClientNotFound,
    DateConflict,
    InvalidDate,
    ServiceNotFound,
    TurnBookingError,
    TurnNotFound,
    UnexpectedStoreError,
)
from .models import Barber, Client, Service, Turn
from .repositories import Repository, TurnStore
from .schemas import TurnCreate

logger = logging.getLogger(__name__)

Clock = Callable[[], int]


def now_ms() -> int:
    return int(datetime.now(timezone.utc).timestamp() * 1000)


RuleCheck = Callable[["TurnBookingService", TurnCreate, Optional[int]], Optional[TurnBookingError]]


@dataclass(frozen=True)
class Rule:
    """A named check returning None on pass or the error it stands for."""

    name: str
    check: RuleCheck


def _date_in_future(booking: "TurnBookingService", data: TurnCreate, turn_id: Optional[int]):
    if data.date <= booking.now():
        return InvalidDate()
    return None


def _service_exists(booking: "TurnBookingService", data: TurnCreate, turn_id: Optional[int]):
    if booking.services.find_by_id(data.service_id) is None:
        return ServiceNotFound()
    return None


def _barber_exists(booking: "TurnBookingService", data: TurnCreate, turn_id: Optional[int]):
    if booking.barbers.find_by_id(data.barber_id) is None:
        return BarberNotFound()
    return None


def _client_exists(booking: "TurnBookingService", data: TurnCreate, turn_id: Optional[int]):
    if booking.clients.find_by_id(data.client_id) is None:
        return ClientNotFound()
    return None


def _date_available(booking: "TurnBookingService", data: TurnCreate, turn_id: Optional[int]):
    # a turn keeping its own date does not conflict with itself
    existing = booking.turns.find_by_date(data.date)
    if existing is not None and existing.id != turn_id:
        return DateConflict()
    return None


TURN_RULES: Tuple[Rule, ...] = (
    Rule("date_in_future", _date_in_future),
    Rule("service_exists", _service_exists),
    Rule("barber_exists", _barber_exists),
    Rule("client_exists", _client_exists),
    Rule("date_available", _date_available),
)


class TurnBookingService:
    """Create, list, fetch, update and delete turns."""

    def __init__(
        self,
        clients: Repository[Client],
        barbers: Repository[Barber],
        services: Repository[Service],
        turns: TurnStore,
        clock: Clock = now_ms,
        rules: Tuple[Rule, ...] = TURN_RULES,
    ):
        self.clients = clients
        self.barbers = barbers
        self.services = services
        self.turns = turns
        self.rules = rules
        self._clock = clock

    def now(self) -> int:
        return self._clock()

    def first_failure(self, data: TurnCreate, turn_id: Optional[int] = None) -> Optional[TurnBookingError]:
        """Run the rules in order and return the first failure, or None."""
        for rule in self.rules:
            error = rule.check(self, data, turn_id)
            if error is not None:
                logger.info("Turn rejected by rule %s (%s)", rule.name, error.code)
                return error
        return None

    def validate(self, data: TurnCreate, turn_id: Optional[int] = None) -> None:
        error = self.first_failure(data, turn_id)
        if error is not None:
            raise error

    @contextmanager
    def _store_errors(self, operation: str) -> Iterator[None]:
        try:
            yield
        except SQLAlchemyError as exc:
            logger.exception("Store failure during %s", operation)
            raise UnexpectedStoreError() from exc

    def _raise_if_taken(self, date: int, turn_id: Optional[int]) -> None:
        existing = self.turns.find_by_date(date)
        if existing is not None and existing.id != turn_id:
            logger.info("Turn date %s taken by a concurrent write", date)
            raise DateConflict()

    def create_turn(self, data: TurnCreate) -> Turn:
        with self._store_errors("create_turn"):
            self.validate(data)

            turn = Turn(
                date=data.date,
                service_id=data.service_id,
                barber_id=data.barber_id,
                client_id=data.client_id,
            )
            try:
                turn = self.turns.add(turn)
            except IntegrityError:
                self._raise_if_taken(data.date, None)
                raise

            logger.info("Turn %s created at %s", turn.id, data.date)
            return turn

    def list_turns(self) -> List[Turn]:
        with self._store_errors("list_turns"):
            return self.turns.list_all()

    def get_turn(self, turn_id: int) -> Turn:
        with self._store_errors("get_turn"):
            turn = self.turns.find_expanded(turn_id)
            if turn is None:
                raise TurnNotFound()
            return turn

    def update_turn(self, turn_id: int, data: TurnCreate) -> Turn:
        """Replace date, service, barber and client of an existing turn."""
        with self._store_errors("update_turn"):
            turn = self.turns.find_by_id(turn_id)
            if turn is None:
                raise TurnNotFound()

            self.validate(data, turn_id=turn_id)

            turn.date = data.date
            turn.service_id = data.service_id
            turn.barber_id = data.barber_id
            turn.client_id = data.client_id
            try:
                turn = self.turns.save(turn)
            except IntegrityError:
                self._raise_if_taken(data.date, turn_id)
                raise

            logger.info("Turn %s updated to %s", turn_id, data.date)
            return turn

    def delete_turn(self, turn_id: int) -> None:
        with self._store_errors("delete_turn"):
            turn = self.turns.find_by_id(turn_id)
            if turn is None:
                raise TurnNotFound()
            self.turns.remove(turn)
            logger.info("Turn %s deleted", turn_id)
