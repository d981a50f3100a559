"""Django ORM implementation of the event and ticket stores."""

import logging
from datetime import datetime
from functools import partial

from django.db import IntegrityError, transaction
from django.utils import timezone

from events import cache, models
from events.domain import Event, EventId, Ticket, TicketId
from events.stores.errors import DuplicateRecordError, RecordNotFoundError
from events.stores.interfaces import EventStore, TicketStore

logger = logging.getLogger(__name__)


def _to_event(row: models.Event) -> Event:
    return Event(id=EventId(row.pk), name=row.name, date=row.date)


def _to_ticket(row: models.Ticket) -> Ticket:
    return Ticket(
        id=TicketId(row.pk),
        event_id=EventId(row.event_id),
        owner=row.owner,
        code=row.code,
        used=row.used,
    )


class DjangoEventStore(EventStore):
    """Relational event store using Django ORM."""

    def list_events(self) -> list[Event]:
        return [_to_event(row) for row in models.Event.objects.all()]

    def get_event(self, event_id: EventId) -> Event | None:
        row = models.Event.objects.filter(pk=event_id.value).first()
        return _to_event(row) if row else None

    def find_event_by_name(self, name: str) -> Event | None:
        row = models.Event.objects.filter(name=name).first()
        return _to_event(row) if row else None

    def create_event(self, name: str, date: datetime) -> Event:
        try:
            with transaction.atomic():
                row = models.Event.objects.create(name=name, date=date)
        except IntegrityError as exc:
            if models.Event.objects.filter(name=name).exists():
                raise DuplicateRecordError("name") from exc
            raise
        return _to_event(row)

    def update_event(self, event: Event) -> Event:
        try:
            with transaction.atomic():
                row = (
                    models.Event.objects.select_for_update()
                    .filter(pk=event.id.value)
                    .first()
                )
                if row is None:
                    raise RecordNotFoundError("Event", event.id.value)
                row.name = event.name
                row.date = event.date
                row.save(update_fields=["name", "date", "updated_at"])
        except IntegrityError as exc:
            taken = (
                models.Event.objects.filter(name=event.name)
                .exclude(pk=event.id.value)
                .exists()
            )
            if taken:
                raise DuplicateRecordError("name") from exc
            raise
        return _to_event(row)

    def delete_event(self, event_id: EventId) -> None:
        with transaction.atomic():
            row = models.Event.objects.select_for_update().filter(pk=event_id.value).first()
            if row is None:
                raise RecordNotFoundError("Event", event_id.value)
            deleted, _ = models.Ticket.objects.filter(event_id=row.pk).delete()
            row.delete()
        logger.debug("Deleted event %s with %d ticket(s)", event_id.value, deleted)


class DjangoTicketStore(TicketStore):
    """Relational ticket store using Django ORM."""

    def get_ticket(self, ticket_id: TicketId) -> Ticket | None:
        row = models.Ticket.objects.filter(pk=ticket_id.value).first()
        return _to_ticket(row) if row else None

    def list_tickets_for_event(self, event_id: EventId) -> list[Ticket]:
        rows = models.Ticket.objects.filter(event_id=event_id.value)
        return [_to_ticket(row) for row in rows]

    def find_ticket_by_code(self, event_id: EventId, code: str) -> Ticket | None:
        row = models.Ticket.objects.filter(event_id=event_id.value, code=code).first()
        return _to_ticket(row) if row else None

    def create_ticket(self, event_id: EventId, owner: str, code: str) -> Ticket:
        try:
            with transaction.atomic():
                # Holds the event row so a concurrent delete cannot orphan the ticket.
                locked = models.Event.objects.select_for_update().filter(pk=event_id.value).first()
                if locked is None:
                    raise RecordNotFoundError("Event", event_id.value)
                row = models.Ticket.objects.create(
                    event_id=event_id.value, owner=owner, code=code
                )
        except IntegrityError as exc:
            if models.Ticket.objects.filter(event_id=event_id.value, code=code).exists():
                raise DuplicateRecordError("code") from exc
            raise
        return _to_ticket(row)

    def mark_ticket_used(self, ticket_id: TicketId) -> bool:
        with transaction.atomic():
            updated = models.Ticket.objects.filter(pk=ticket_id.value, used=False).update(
                used=True, updated_at=timezone.now()
            )
            event_id = (
                models.Ticket.objects.filter(pk=ticket_id.value)
                .values_list("event_id", flat=True)
                .first()
            )
            # Bulk update emits no post_save, so the signal handlers never see it.
            if updated and event_id is not None:
                transaction.on_commit(partial(cache.invalidate_ticket_list, event_id))
        return bool(updated)
