"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in events/models.py (persistence layer).
"""

from dataclasses import dataclass, replace
from datetime import datetime

from events.domain.value_objects import EventId, TicketId


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event."""

    id: EventId
    name: str
    date: datetime

    def has_happened(self, now: datetime) -> bool:
        """An event is upcoming only while its date is strictly after now."""
        return self.date <= now


@dataclass(frozen=True)
class Ticket:
    """Domain representation of a Ticket."""

    id: TicketId
    event_id: EventId
    owner: str
    code: str
    used: bool = False

    def redeemed(self) -> "Ticket":
        """Return this ticket after the one-way used transition."""
        if self.used:
            raise ValueError("Ticket is already used")
        return replace(self, used=True)
