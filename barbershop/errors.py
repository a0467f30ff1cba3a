# barbershop/errors.py

"""
Domain errors raised by the booking layer.

Business-rule failures are user errors: the caller can fix the input
and retry, so they map to HTTP 400 with a short message.  Store
failures map to an opaque 500.
"""

from typing import Optional

from fastapi import HTTPException, status

SERVER_ERROR_MESSAGE = "There was a server error"


class BookingError(Exception):
    """Base class for all booking errors."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = SERVER_ERROR_MESSAGE

    def __init__(self, message: Optional[str] = None, code: Optional[str] = None) -> None:
        self.message = message or self.default_message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)

    def to_http_exception(self) -> HTTPException:
        return HTTPException(status_code=self.status_code, detail=self.message)


class TurnBookingError(BookingError):
    """A turn request broke a business rule."""

    status_code = status.HTTP_400_BAD_REQUEST


class InvalidDate(TurnBookingError):
    default_message = "The date must be today or a future date"


class ServiceNotFound(TurnBookingError):
    default_message = "Service not found"


class BarberNotFound(TurnBookingError):
    default_message = "Barber not found"


class ClientNotFound(TurnBookingError):
    default_message = "Client not found"


class DateConflict(TurnBookingError):
    default_message = "There is a turn in the same date"


class TurnNotFound(TurnBookingError):
    default_message = "Turn not found"


class RecordNotFound(BookingError):
    """Lookup of a client, barber or service by id failed."""

    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Record not found"


class UnexpectedStoreError(BookingError):
    """The store raised something the booking layer cannot act on.

    The original exception is chained as ``__cause__`` and logged; the
    message given to callers stays generic.
    """
