"""Integration tests for the /events endpoints.

Run with: pytest tests/test_event_api.py -v
"""

from datetime import timedelta

import pytest
from django.utils import timezone
from rest_framework.test import APIClient

from events import models


def _future(days=30):
    return (timezone.now() + timedelta(days=days)).isoformat()


@pytest.mark.django_db
class TestEventList:
    """Tests for GET /events"""

    def test_list_events(self, api_client: APIClient, make_event):
        """Given events exist, returns all of them."""
        for _ in range(3):
            make_event()
        response = api_client.get("/events")
        assert response.status_code == 200
        assert isinstance(response.json(), list)
        assert len(response.json()) == 3

    def test_list_events_empty(self, api_client: APIClient):
        """Given no events, returns an empty list."""
        response = api_client.get("/events")
        assert response.status_code == 200
        assert response.json() == []


@pytest.mark.django_db
class TestEventDetail:
    """Tests for GET /events/{id}"""

    def test_get_event_returns_details(self, api_client: APIClient, make_event):
        """Given event exists, returns event details."""
        event = make_event("Jazz Night")
        response = api_client.get(f"/events/{event.pk}")
        assert response.status_code == 200
        body = response.json()
        assert body["id"] == event.pk
        assert body["name"] == "Jazz Night"
        assert "date" in body

    def test_get_event_not_found(self, api_client: APIClient):
        """Given event does not exist, returns 404."""
        response = api_client.get("/events/999999")
        assert response.status_code == 404
        assert response.json()["code"] == "EVENT_NOT_FOUND"

    def test_get_event_leading_zero_id(self, api_client: APIClient, make_event):
        """Given a zero-padded id, resolves it like the plain number."""
        event = make_event()
        assert api_client.get(f"/events/00{event.pk}").json()["id"] == event.pk
        assert api_client.get("/events/0999999").status_code == 404
        assert api_client.get("/events/000").status_code == 400

    def test_get_event_invalid_id_format(self, api_client: APIClient):
        """Given a non-numeric id, returns 400."""
        response = api_client.get("/events/invalid-id")
        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_ID"


@pytest.mark.django_db
class TestEventCreate:
    """Tests for POST /events"""

    def test_create_event(self, api_client: APIClient):
        """Given a valid payload, returns 201 with the new id."""
        response = api_client.post("/events", {"name": "Jazz Night", "date": _future()})
        assert response.status_code == 201
        body = response.json()
        assert "id" in body
        assert models.Event.objects.filter(pk=body["id"], name="Jazz Night").exists()

    def test_create_event_empty_payload(self, api_client: APIClient):
        """Given an empty payload, returns 422 with field details."""
        response = api_client.post("/events", {})
        assert response.status_code == 422
        assert response.json()["code"] == "INVALID_PAYLOAD"
        assert "name" in response.json()["details"]

    def test_create_event_malformed_json(self, api_client: APIClient):
        """Given a body that is not JSON, returns 422."""
        response = api_client.post("/events", "{not json", content_type="application/json")
        assert response.status_code == 422

    def test_create_event_duplicate_name(self, api_client: APIClient):
        """Given a taken name, returns 409 and stores nothing."""
        first = api_client.post("/events", {"name": "Jazz Night", "date": _future()})
        second = api_client.post("/events", {"name": "Jazz Night", "date": _future(60)})
        assert first.status_code == 201
        assert second.status_code == 409
        assert models.Event.objects.count() == 1

    def test_create_event_numeric_name(self, api_client: APIClient):
        """Given a number as name, returns 422 and stores nothing."""
        response = api_client.post("/events", {"name": 12345, "date": _future()})
        assert response.status_code == 422
        assert "name" in response.json()["details"]
        assert not models.Event.objects.exists()

    def test_update_event_numeric_name(self, api_client: APIClient, make_event):
        """Given a number as the new name, returns 422 and keeps the old name."""
        event = make_event("Jazz Night")
        response = api_client.put(f"/events/{event.pk}", {"name": 42, "date": _future()})
        assert response.status_code == 422
        event.refresh_from_db()
        assert event.name == "Jazz Night"

    def test_create_event_in_the_past_is_allowed(self, api_client: APIClient):
        """Given a past date, the event is still created."""
        response = api_client.post("/events", {"name": "Last Year", "date": _future(-365)})
        assert response.status_code == 201


@pytest.mark.django_db
class TestEventUpdate:
    """Tests for PUT /events/{id}"""

    def test_update_event(self, api_client: APIClient, make_event):
        """Given a new name, returns 200 with the updated event."""
        event = make_event("Old Event")
        response = api_client.put(
            f"/events/{event.pk}", {"name": "Updated Event", "date": _future()}
        )
        assert response.status_code == 200
        assert response.json()["name"] == "Updated Event"
        event.refresh_from_db()
        assert event.name == "Updated Event"

    def test_update_event_invalid_payload(self, api_client: APIClient, make_event):
        """Given a blank name, returns 422."""
        event = make_event()
        response = api_client.put(f"/events/{event.pk}", {"name": ""})
        assert response.status_code == 422

    def test_update_event_not_found(self, api_client: APIClient):
        """Given event does not exist, returns 404."""
        response = api_client.put("/events/999999", {"name": "Any Name", "date": _future()})
        assert response.status_code == 404

    def test_update_event_invalid_id(self, api_client: APIClient):
        """Given a non-numeric id, returns 400."""
        response = api_client.put("/events/invalid-id", {"name": "Any", "date": _future()})
        assert response.status_code == 400

    def test_update_event_to_existing_name(self, api_client: APIClient, make_event):
        """Given a name held by another event, returns 409 and keeps the old name."""
        make_event("Name Taken")
        event = make_event("Another Event")
        response = api_client.put(
            f"/events/{event.pk}", {"name": "Name Taken", "date": _future()}
        )
        assert response.status_code == 409
        event.refresh_from_db()
        assert event.name == "Another Event"


@pytest.mark.django_db
class TestEventDelete:
    """Tests for DELETE /events/{id}"""

    def test_delete_event(self, api_client: APIClient, make_event, make_ticket):
        """Given event exists, returns 204 and removes it with its tickets."""
        event = make_event()
        make_ticket(event)
        response = api_client.delete(f"/events/{event.pk}")
        assert response.status_code == 204
        assert not models.Event.objects.filter(pk=event.pk).exists()
        assert not models.Ticket.objects.filter(event_id=event.pk).exists()

    def test_delete_event_not_found(self, api_client: APIClient):
        """Given event does not exist, returns 404."""
        response = api_client.delete("/events/999999")
        assert response.status_code == 404

    def test_delete_event_invalid_id(self, api_client: APIClient):
        """Given a non-numeric id, returns 400."""
        response = api_client.delete("/events/invalid-id")
        assert response.status_code == 400
