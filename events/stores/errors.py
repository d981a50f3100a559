"""Errors raised by store implementations.

Services translate these into domain errors; they never reach handlers.
"""


class StoreError(Exception):
    """Base class for persistence failures the services know how to map."""


class DuplicateRecordError(StoreError):
    """A write was rejected by a uniqueness constraint."""

    def __init__(self, field: str) -> None:
        super().__init__(f"Duplicate value for {field}")
        self.field = field


class RecordNotFoundError(StoreError):
    """A write targeted, or referenced, a row that no longer exists."""

    def __init__(self, entity: str, record_id: int) -> None:
        super().__init__(f"{entity} {record_id} does not exist")
        self.entity = entity
        self.record_id = record_id
