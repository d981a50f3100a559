from dataclasses import dataclass
from typing import TYPE_CHECKING

from django.apps import AppConfig

if TYPE_CHECKING:
    from events.services.event_service import EventService
    from events.services.ticket_service import TicketService


@dataclass(frozen=True)
class Services:
    """Services wired to their stores, built once per process."""

    events: "EventService"
    tickets: "TicketService"


def build_services() -> Services:
    from events.services.event_service import EventService
    from events.services.ticket_service import TicketService
    from events.stores.django_store import DjangoEventStore, DjangoTicketStore

    event_store = DjangoEventStore()
    ticket_store = DjangoTicketStore()
    return Services(
        events=EventService(event_store),
        tickets=TicketService(event_store, ticket_store),
    )


class EventsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "events"
    verbose_name = "Events and tickets"

    services: Services

    def ready(self) -> None:
        from events import signals  # noqa: F401

        self.services = build_services()
