"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests
- Call services for business logic
- Map domain errors to HTTP responses (see handlers/errors.py)
- Never contain business logic
- Never expose internal error details
"""

from django.apps import apps
from django.core.cache import cache
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from events import cache as keys
from events.domain.validation import parse_identifier
from events.handlers.serializers import EventSerializer, TicketSerializer


def _services():
    return apps.get_app_config("events").services


def _cached(key: str, build):
    data = cache.get(key)
    if data is None:
        data = build()
        cache.set(key, data, keys.timeout())
    return data


class EventListView(APIView):
    """Handler for GET/POST /events"""

    def get(self, request: Request) -> Response:
        data = _cached(
            keys.EVENT_LIST_KEY,
            lambda: EventSerializer(_services().events.list_events(), many=True).data,
        )
        return Response(data)

    def post(self, request: Request) -> Response:
        event = _services().events.create_event(request.data)
        return Response(EventSerializer(event).data, status=status.HTTP_201_CREATED)


class EventDetailView(APIView):
    """Handler for GET/PUT/DELETE /events/{event_id}"""

    def get(self, request: Request, event_id: str) -> Response:
        data = _cached(
            keys.event_key(parse_identifier(event_id)),
            lambda: EventSerializer(_services().events.get_event(event_id)).data,
        )
        return Response(data)

    def put(self, request: Request, event_id: str) -> Response:
        event = _services().events.update_event(event_id, request.data)
        return Response(EventSerializer(event).data)

    def delete(self, request: Request, event_id: str) -> Response:
        _services().events.delete_event(event_id)
        return Response(status=status.HTTP_204_NO_CONTENT)


class TicketCreateView(APIView):
    """Handler for POST /tickets"""

    def post(self, request: Request) -> Response:
        ticket = _services().tickets.issue_ticket(request.data)
        return Response(TicketSerializer(ticket).data, status=status.HTTP_201_CREATED)


class TicketListView(APIView):
    """Handler for GET /tickets/{event_id}"""

    def get(self, request: Request, event_id: str) -> Response:
        data = _cached(
            keys.ticket_list_key(parse_identifier(event_id)),
            lambda: TicketSerializer(
                _services().tickets.list_tickets_for_event(event_id), many=True
            ).data,
        )
        return Response(data)


class TicketRedeemView(APIView):
    """Handler for PUT /tickets/use/{ticket_id}"""

    def put(self, request: Request, ticket_id: str) -> Response:
        ticket = _services().tickets.redeem_ticket(ticket_id)
        return Response(TicketSerializer(ticket).data)
