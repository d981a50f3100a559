"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
The constraints here back the uniqueness rules the services pre-check.
"""

from django.db import models


class Event(models.Model):
    """Persistence model for events."""

    name = models.CharField(max_length=255, unique=True)
    date = models.DateTimeField()
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["date", "id"]
        indexes = [
            models.Index(fields=["date"], name="event_date_idx"),
        ]

    def __str__(self) -> str:
        return self.name


class Ticket(models.Model):
    """Persistence model for tickets."""

    event = models.ForeignKey(Event, on_delete=models.CASCADE, related_name="tickets")
    owner = models.CharField(max_length=255)
    code = models.CharField(max_length=255)
    used = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["id"]
        constraints = [
            models.UniqueConstraint(
                fields=["event", "code"], name="unique_ticket_code_per_event"
            ),
        ]

    def __str__(self) -> str:
        return f"{self.code} - {self.owner}"
