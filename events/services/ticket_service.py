"""Ticket service: issuance, listing and redemption.

The order of checks in issue_ticket and redeem_ticket decides which error a
caller sees when several conditions fail at once; keep it stable.
"""

import logging
from collections.abc import Callable
from datetime import datetime
from typing import Any

from django.utils import timezone

from events.domain import Event, EventId, Ticket, TicketId
from events.domain.errors import (
    EventNotFoundError,
    EventPassedError,
    TicketAlreadyUsedError,
    TicketCodeConflictError,
    TicketNotFoundError,
)
from events.domain.validation import TicketPayloadSchema, parse_identifier, require_fields
from events.domain.value_objects import MAX_ID
from events.stores.errors import DuplicateRecordError, RecordNotFoundError
from events.stores.interfaces import EventStore, TicketStore

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


class TicketService:
    """Service for ticket operations."""

    def __init__(
        self,
        events: EventStore,
        tickets: TicketStore,
        clock: Clock = timezone.now,
    ) -> None:
        self._events = events
        self._tickets = tickets
        self._clock = clock

    def issue_ticket(self, payload: Any) -> Ticket:
        """Issue an unused ticket against an upcoming event.

        Raises:
            InvalidPayloadError: If owner, code or eventId is missing or malformed.
            EventNotFoundError: If the event does not exist.
            EventPassedError: If the event is not upcoming.
            TicketCodeConflictError: If the code is already registered for the event.
        """
        data = require_fields(payload, TicketPayloadSchema)
        raw_event_id = data["eventId"]
        event = None
        if 0 < raw_event_id <= MAX_ID:
            event = self._events.get_event(EventId(raw_event_id))
        if event is None:
            raise EventNotFoundError(raw_event_id)
        self._ensure_upcoming(event)

        owner, code = data["owner"], data["code"]
        if self._tickets.find_ticket_by_code(event.id, code) is not None:
            logger.info("Rejected ticket for event %s: code %r taken", event.id.value, code)
            raise TicketCodeConflictError(event.id.value, code)
        try:
            ticket = self._tickets.create_ticket(event.id, owner, code)
        except DuplicateRecordError as exc:
            logger.warning("Ticket code %r for event %s taken concurrently", code, event.id.value)
            raise TicketCodeConflictError(event.id.value, code) from exc
        except RecordNotFoundError as exc:
            raise EventNotFoundError(event.id.value) from exc
        logger.info("Issued ticket %s for event %s", ticket.id.value, event.id.value)
        return ticket

    def list_tickets_for_event(self, event_id: str) -> list[Ticket]:
        """Return the tickets of an event; an unknown event has none.

        Raises:
            MalformedIdentifierError: If the event_id is not a positive integer.
        """
        eid = EventId(parse_identifier(event_id))
        return self._tickets.list_tickets_for_event(eid)

    def redeem_ticket(self, ticket_id: str) -> Ticket:
        """Mark a ticket as used, exactly once.

        Raises:
            MalformedIdentifierError: If the ticket_id is not a positive integer.
            TicketNotFoundError: If the ticket does not exist.
            EventPassedError: If the ticket's event is not upcoming.
            TicketAlreadyUsedError: If the ticket was already redeemed.
        """
        tid = TicketId(parse_identifier(ticket_id))
        ticket = self._tickets.get_ticket(tid)
        if ticket is None:
            raise TicketNotFoundError(tid.value)
        event = self._events.get_event(ticket.event_id)
        if event is None:
            # The event was deleted together with this ticket in between.
            raise TicketNotFoundError(tid.value)
        self._ensure_upcoming(event)
        if ticket.used:
            logger.info("Rejected redemption of ticket %s: already used", tid.value)
            raise TicketAlreadyUsedError(tid.value)
        if not self._tickets.mark_ticket_used(tid):
            logger.warning("Ticket %s redeemed concurrently", tid.value)
            raise TicketAlreadyUsedError(tid.value)
        logger.info("Redeemed ticket %s", tid.value)
        return ticket.redeemed()

    def _ensure_upcoming(self, event: Event) -> None:
        if event.has_happened(self._clock()):
            logger.info("Rejected ticket operation: event %s already happened", event.id.value)
            raise EventPassedError(event.id.value)
