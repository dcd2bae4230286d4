from __future__ import annotations


class NotFoundError(LookupError):
    """A fee, resident, apartment or payment id did not resolve."""

    def __init__(self, entity: str, entity_id: int | str | None = None) -> None:
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} not found")


class InvalidInputError(ValueError):
    """Caller-supplied data was rejected before any mutation."""
