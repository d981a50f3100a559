"""Django signals for cache invalidation.

Keys are dropped only once the write commits; dropping them earlier lets a
concurrent read cache the pre-commit row again.
"""

from functools import partial

from django.db import transaction
from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from events import cache
from events.models import Event, Ticket


def _drop_event_keys(event_id: int) -> None:
    cache.invalidate_event(event_id)
    cache.invalidate_ticket_list(event_id)


@receiver([post_save, post_delete], sender=Event)
def invalidate_event_cache(sender, instance, **kwargs):
    """Invalidate caches when an event is saved or deleted."""
    transaction.on_commit(partial(_drop_event_keys, instance.pk))


@receiver([post_save, post_delete], sender=Ticket)
def invalidate_ticket_cache(sender, instance, **kwargs):
    """Invalidate the ticket list of the owning event."""
    transaction.on_commit(partial(cache.invalidate_ticket_list, instance.event_id))
