from events.handlers.views import (
    EventDetailView,
    EventListView,
    TicketCreateView,
    TicketListView,
    TicketRedeemView,
)

__all__ = [
    "EventDetailView",
    "EventListView",
    "TicketCreateView",
    "TicketListView",
    "TicketRedeemView",
]
