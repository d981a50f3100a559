"""Structural request checks performed before any persistence access.

Schemas are plain DRF serializers used for their field validation only;
nothing here touches the database.
"""

from collections.abc import Mapping
from typing import Any

from rest_framework import serializers

from events.domain.errors import InvalidPayloadError, MalformedIdentifierError
from events.domain.value_objects import MAX_ID, parse_positive_int


class StrictCharField(serializers.CharField):
    """CharField that rejects numbers instead of coercing them to text."""

    def to_internal_value(self, data):
        if not isinstance(data, str):
            self.fail("invalid")
        return super().to_internal_value(data)


class EventPayloadSchema(serializers.Serializer):
    name = StrictCharField(max_length=255, allow_blank=False, trim_whitespace=False)
    date = serializers.DateTimeField()


class TicketPayloadSchema(serializers.Serializer):
    owner = StrictCharField(max_length=255, allow_blank=False, trim_whitespace=False)
    code = StrictCharField(max_length=255, allow_blank=False, trim_whitespace=False)
    eventId = serializers.IntegerField()


def parse_identifier(raw: Any) -> int:
    """Return ``raw`` as a positive integer id.

    Accepts ints and strings of ASCII digits without sign or padding.
    Leading zeros are ignored, so "007" is 7.

    Raises:
        MalformedIdentifierError: For anything else.
    """
    if isinstance(raw, bool):
        raise MalformedIdentifierError(raw)
    if isinstance(raw, int):
        if not 0 < raw <= MAX_ID:
            raise MalformedIdentifierError(raw)
        return raw
    if not isinstance(raw, str):
        raise MalformedIdentifierError(raw)
    try:
        return parse_positive_int(raw)
    except ValueError:
        raise MalformedIdentifierError(raw) from None


def require_fields(
    payload: Any, schema: type[serializers.Serializer]
) -> dict[str, Any]:
    """Validate ``payload`` against ``schema`` and return the cleaned values.

    Raises:
        InvalidPayloadError: If the payload is not a mapping or any
            required field is missing or malformed.
    """
    if not isinstance(payload, Mapping):
        raise InvalidPayloadError({"non_field_errors": ["Expected an object"]})
    serializer = schema(data=payload)
    if not serializer.is_valid():
        raise InvalidPayloadError(dict(serializer.errors))
    return dict(serializer.validated_data)
