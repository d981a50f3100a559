"""Domain error codes for the events module."""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ErrorCode(Enum):
    """Domain error codes."""

    INVALID_ID = "INVALID_ID"
    INVALID_PAYLOAD = "INVALID_PAYLOAD"
    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    TICKET_NOT_FOUND = "TICKET_NOT_FOUND"
    EVENT_NAME_CONFLICT = "EVENT_NAME_CONFLICT"
    TICKET_CODE_CONFLICT = "TICKET_CODE_CONFLICT"
    EVENT_ALREADY_HAPPENED = "EVENT_ALREADY_HAPPENED"
    TICKET_ALREADY_USED = "TICKET_ALREADY_USED"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class MalformedIdentifierError(DomainError):
    """Raised when an identifier is not a positive integer."""

    def __init__(self, raw: Any) -> None:
        super().__init__(
            code=ErrorCode.INVALID_ID,
            message="Invalid id format",
        )
        self.raw = raw


class InvalidPayloadError(DomainError):
    """Raised when a request payload fails validation."""

    def __init__(self, details: dict[str, Any] | None = None) -> None:
        super().__init__(
            code=ErrorCode.INVALID_PAYLOAD,
            message="Validation failed",
        )
        self.details = details or {}


class EventNotFoundError(DomainError):
    """Raised when an event is not found."""

    def __init__(self, event_id: int) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message="Event not found",
        )
        self.event_id = event_id


class TicketNotFoundError(DomainError):
    """Raised when a ticket is not found."""

    def __init__(self, ticket_id: int) -> None:
        super().__init__(
            code=ErrorCode.TICKET_NOT_FOUND,
            message="Ticket not found",
        )
        self.ticket_id = ticket_id


class EventNameConflictError(DomainError):
    """Raised when another event already holds the name."""

    def __init__(self, name: str) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NAME_CONFLICT,
            message="An event with this name already exists",
        )
        self.name = name


class TicketCodeConflictError(DomainError):
    """Raised when the code is already registered for the event."""

    def __init__(self, event_id: int, code: str) -> None:
        super().__init__(
            code=ErrorCode.TICKET_CODE_CONFLICT,
            message="Ticket already registered for this event",
        )
        self.event_id = event_id
        self.ticket_code = code


class EventPassedError(DomainError):
    """Raised when issuing or redeeming against an event that is not upcoming."""

    def __init__(self, event_id: int) -> None:
        super().__init__(
            code=ErrorCode.EVENT_ALREADY_HAPPENED,
            message="Event has already happened",
        )
        self.event_id = event_id


class TicketAlreadyUsedError(DomainError):
    """Raised on a second redemption of the same ticket."""

    def __init__(self, ticket_id: int) -> None:
        super().__init__(
            code=ErrorCode.TICKET_ALREADY_USED,
            message="Ticket has already been used",
        )
        self.ticket_id = ticket_id
