from django.urls import path

from events.handlers import (
    EventDetailView,
    EventListView,
    TicketCreateView,
    TicketListView,
    TicketRedeemView,
)

urlpatterns = [
    path("events", EventListView.as_view(), name="event-list"),
    path("events/<str:event_id>", EventDetailView.as_view(), name="event-detail"),
    path("tickets", TicketCreateView.as_view(), name="ticket-create"),
    path("tickets/use/<str:ticket_id>", TicketRedeemView.as_view(), name="ticket-redeem"),
    path("tickets/<str:event_id>", TicketListView.as_view(), name="ticket-list"),
]
