"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass

# Largest value a signed 64-bit primary key column can hold.
MAX_ID = 2**63 - 1


def parse_positive_int(value: str) -> int:
    """Parse a string of ASCII digits into a positive id; leading zeros are allowed."""
    if not value.isascii() or not value.isdigit():
        raise ValueError(f"Not a positive integer: {value!r}")
    number = int(value)
    if not 0 < number <= MAX_ID:
        raise ValueError(f"Identifier out of range: {value!r}")
    return number


@dataclass(frozen=True)
class EventId:
    """Unique identifier for an Event."""

    value: int

    def __post_init__(self) -> None:
        if not 0 < self.value <= MAX_ID:
            raise ValueError("EventId must be a positive integer")


@dataclass(frozen=True)
class TicketId:
    """Unique identifier for a Ticket."""

    value: int

    def __post_init__(self) -> None:
        if not 0 < self.value <= MAX_ID:
            raise ValueError("TicketId must be a positive integer")
