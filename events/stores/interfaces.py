"""Store interfaces (repository pattern).

Stores must be swappable and return domain models. Every uniqueness rule
checked by the services is also enforced by the store at write time and
reported as DuplicateRecordError.
"""

from abc import ABC, abstractmethod
from datetime import datetime

from events.domain import Event, EventId, Ticket, TicketId


class EventStore(ABC):
    """Interface for event persistence operations."""

    @abstractmethod
    def list_events(self) -> list[Event]:
        """Return all events."""
        ...

    @abstractmethod
    def get_event(self, event_id: EventId) -> Event | None:
        """Return an event by ID, or None if not found."""
        ...

    @abstractmethod
    def find_event_by_name(self, name: str) -> Event | None:
        """Return the event holding exactly this name, or None."""
        ...

    @abstractmethod
    def create_event(self, name: str, date: datetime) -> Event:
        """Persist a new event and return it with its assigned ID.

        Raises:
            DuplicateRecordError: If the name is already taken.
        """
        ...

    @abstractmethod
    def update_event(self, event: Event) -> Event:
        """Overwrite name and date of an existing event.

        Raises:
            DuplicateRecordError: If another event holds the name.
            RecordNotFoundError: If the event no longer exists.
        """
        ...

    @abstractmethod
    def delete_event(self, event_id: EventId) -> None:
        """Delete all tickets of the event, then the event, atomically.

        Raises:
            RecordNotFoundError: If the event no longer exists.
        """
        ...


class TicketStore(ABC):
    """Interface for ticket persistence operations."""

    @abstractmethod
    def get_ticket(self, ticket_id: TicketId) -> Ticket | None:
        """Return a ticket by ID, or None if not found."""
        ...

    @abstractmethod
    def list_tickets_for_event(self, event_id: EventId) -> list[Ticket]:
        """Return all tickets referencing the event (empty if none)."""
        ...

    @abstractmethod
    def find_ticket_by_code(self, event_id: EventId, code: str) -> Ticket | None:
        """Return the ticket of this event with exactly this code, or None."""
        ...

    @abstractmethod
    def create_ticket(self, event_id: EventId, owner: str, code: str) -> Ticket:
        """Persist a new unused ticket and return it with its assigned ID.

        Raises:
            DuplicateRecordError: If the code is already taken for the event.
            RecordNotFoundError: If the event no longer exists.
        """
        ...

    @abstractmethod
    def mark_ticket_used(self, ticket_id: TicketId) -> bool:
        """Atomically flip ``used`` from false to true.

        Returns True if this call performed the transition, False if the
        ticket was already used (or is gone).
        """
        ...
