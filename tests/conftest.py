"""Pytest configuration and shared fixtures."""

import itertools
from datetime import datetime, timedelta, timezone

import pytest
from rest_framework.test import APIClient

from events import models
from events.domain import Event, EventId, Ticket, TicketId
from events.stores.errors import DuplicateRecordError, RecordNotFoundError
from events.stores.interfaces import EventStore, TicketStore

NOW = datetime(2030, 6, 1, 20, 0, tzinfo=timezone.utc)


class InMemoryEventStore(EventStore):
    """Dict-backed store honouring the same constraints as the database."""

    def __init__(self) -> None:
        self.events: dict[int, Event] = {}
        self.tickets: dict[int, Ticket] = {}
        self._event_ids = itertools.count(1)

    def list_events(self):
        return list(self.events.values())

    def get_event(self, event_id):
        return self.events.get(event_id.value)

    def find_event_by_name(self, name):
        return next((e for e in self.events.values() if e.name == name), None)

    def create_event(self, name, date):
        if any(e.name == name for e in self.events.values()):
            raise DuplicateRecordError("name")
        event = Event(id=EventId(next(self._event_ids)), name=name, date=date)
        self.events[event.id.value] = event
        return event

    def update_event(self, event):
        if event.id.value not in self.events:
            raise RecordNotFoundError("Event", event.id.value)
        if any(e.name == event.name and e.id != event.id for e in self.events.values()):
            raise DuplicateRecordError("name")
        self.events[event.id.value] = event
        return event

    def delete_event(self, event_id):
        if event_id.value not in self.events:
            raise RecordNotFoundError("Event", event_id.value)
        for ticket in [t for t in self.tickets.values() if t.event_id == event_id]:
            del self.tickets[ticket.id.value]
        del self.events[event_id.value]


class InMemoryTicketStore(TicketStore):
    def __init__(self, events: InMemoryEventStore) -> None:
        self._events = events
        self._ticket_ids = itertools.count(1)

    @property
    def tickets(self) -> dict[int, Ticket]:
        return self._events.tickets

    def get_ticket(self, ticket_id):
        return self.tickets.get(ticket_id.value)

    def list_tickets_for_event(self, event_id):
        return [t for t in self.tickets.values() if t.event_id == event_id]

    def find_ticket_by_code(self, event_id, code):
        return next(
            (t for t in self.tickets.values() if t.event_id == event_id and t.code == code),
            None,
        )

    def create_ticket(self, event_id, owner, code):
        if event_id.value not in self._events.events:
            raise RecordNotFoundError("Event", event_id.value)
        if any(t.event_id == event_id and t.code == code for t in self.tickets.values()):
            raise DuplicateRecordError("code")
        ticket = Ticket(
            id=TicketId(next(self._ticket_ids)), event_id=event_id, owner=owner, code=code
        )
        self.tickets[ticket.id.value] = ticket
        return ticket

    def mark_ticket_used(self, ticket_id):
        ticket = self.tickets.get(ticket_id.value)
        if ticket is None or ticket.used:
            return False
        self.tickets[ticket_id.value] = ticket.redeemed()
        return True


@pytest.fixture
def event_store() -> InMemoryEventStore:
    return InMemoryEventStore()


@pytest.fixture
def ticket_store(event_store) -> InMemoryTicketStore:
    return InMemoryTicketStore(event_store)


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def clear_cache():
    from django.core.cache import cache
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def make_event():
    """Create an Event row dated relative to the real current time."""
    from django.utils import timezone as dj_timezone

    counter = itertools.count(1)

    def _make(name=None, *, days=7):
        return models.Event.objects.create(
            name=name or f"Event {next(counter)}",
            date=dj_timezone.now() + timedelta(days=days),
        )

    return _make


@pytest.fixture
def make_ticket():
    counter = itertools.count(1)

    def _make(event, *, code=None, owner="Ann", used=False):
        return models.Ticket.objects.create(
            event=event, owner=owner, code=code or f"CODE{next(counter):04d}", used=used
        )

    return _make
