"""Base model for all domain entities."""

from typing import Any, Self

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for natter entities.

    Entities are frozen; derived values such as read-side like counts are
    attached by copying with `evolve`.
    """

    model_config = ConfigDict(
        frozen=True,
        arbitrary_types_allowed=True,  # Allow custom value objects
    )

    def evolve(self, **changes: Any) -> Self:
        """Return a copy with the given fields replaced."""
        return self.model_copy(update=changes)
