"""Cache keys for event and ticket read endpoints."""

from django.conf import settings
from django.core.cache import cache

EVENT_LIST_KEY = "events:list"


def event_key(event_id: int) -> str:
    return f"events:{event_id}"


def ticket_list_key(event_id: int) -> str:
    return f"events:{event_id}:tickets"


def timeout() -> int:
    return settings.EVENTS_CACHE_TIMEOUT


def invalidate_event(event_id: int) -> None:
    cache.delete_many([EVENT_LIST_KEY, event_key(event_id)])


def invalidate_ticket_list(event_id: int) -> None:
    cache.delete(ticket_list_key(event_id))
