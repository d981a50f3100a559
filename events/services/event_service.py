"""Event service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

import logging
from typing import Any

from events.domain import Event, EventId
from events.domain.errors import EventNameConflictError, EventNotFoundError
from events.domain.validation import EventPayloadSchema, parse_identifier, require_fields
from events.stores.errors import DuplicateRecordError, RecordNotFoundError
from events.stores.interfaces import EventStore

logger = logging.getLogger(__name__)


class EventService:
    """Service for event registry operations."""

    def __init__(self, store: EventStore) -> None:
        self._store = store

    def list_events(self) -> list[Event]:
        """Return all events."""
        return self._store.list_events()

    def get_event(self, event_id: str) -> Event:
        """Return an event by ID.

        Raises:
            MalformedIdentifierError: If the event_id is not a positive integer.
            EventNotFoundError: If the event does not exist.
        """
        return self._require_event(EventId(parse_identifier(event_id)))

    def create_event(self, payload: Any) -> Event:
        """Create an event from a ``{name, date}`` payload.

        Raises:
            InvalidPayloadError: If name or date is missing or malformed.
            EventNameConflictError: If an event with the name already exists.
        """
        data = require_fields(payload, EventPayloadSchema)
        name = data["name"]
        if self._store.find_event_by_name(name) is not None:
            logger.info("Rejected event create: name %r already taken", name)
            raise EventNameConflictError(name)
        try:
            event = self._store.create_event(name, data["date"])
        except DuplicateRecordError as exc:
            logger.warning("Event name %r taken concurrently", name)
            raise EventNameConflictError(name) from exc
        logger.info("Created event %s (%r)", event.id.value, event.name)
        return event

    def update_event(self, event_id: str, payload: Any) -> Event:
        """Replace name and date of an existing event.

        Raises:
            MalformedIdentifierError: If the event_id is not a positive integer.
            InvalidPayloadError: If name or date is missing or malformed.
            EventNotFoundError: If the event does not exist.
            EventNameConflictError: If another event holds the name.
        """
        eid = EventId(parse_identifier(event_id))
        data = require_fields(payload, EventPayloadSchema)
        current = self._require_event(eid)
        holder = self._store.find_event_by_name(data["name"])
        if holder is not None and holder.id != current.id:
            logger.info(
                "Rejected rename of event %s: name %r held by event %s",
                eid.value,
                data["name"],
                holder.id.value,
            )
            raise EventNameConflictError(data["name"])
        changed = Event(id=current.id, name=data["name"], date=data["date"])
        try:
            event = self._store.update_event(changed)
        except DuplicateRecordError as exc:
            logger.warning("Event name %r taken concurrently", changed.name)
            raise EventNameConflictError(changed.name) from exc
        except RecordNotFoundError as exc:
            raise EventNotFoundError(eid.value) from exc
        logger.info("Updated event %s", eid.value)
        return event

    def delete_event(self, event_id: str) -> None:
        """Delete an event together with all of its tickets.

        Raises:
            MalformedIdentifierError: If the event_id is not a positive integer.
            EventNotFoundError: If the event does not exist.
        """
        eid = EventId(parse_identifier(event_id))
        self._require_event(eid)
        try:
            self._store.delete_event(eid)
        except RecordNotFoundError as exc:
            raise EventNotFoundError(eid.value) from exc
        logger.info("Deleted event %s", eid.value)

    def _require_event(self, event_id: EventId) -> Event:
        event = self._store.get_event(event_id)
        if event is None:
            raise EventNotFoundError(event_id.value)
        return event
