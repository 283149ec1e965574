"""Crumbs: the work items of the task coordination system."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import StrEnum
from typing import Any

from .errors import InvalidStateError, InvalidTransitionError, PropertyNotFoundError


class CrumbState(StrEnum):
    """Crumb states; pebble and dust are terminal."""

    DRAFT = "draft"
    PENDING = "pending"
    READY = "ready"
    TAKEN = "taken"
    PEBBLE = "pebble"
    DUST = "dust"


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Crumb:
    """A work item. Changes made here must be saved through a table."""

    crumb_id: str = ""
    name: str = ""
    state: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None
    properties: dict[str, Any] = field(default_factory=dict)

    def _touch(self) -> None:
        self.updated_at = _now()

    def set_state(self, state: str) -> None:
        """Move to any recognised state; raise InvalidStateError otherwise."""
        try:
            new_state = CrumbState(state)
        except ValueError:
            raise InvalidStateError() from None
        self.state = new_state
        self._touch()

    def pebble(self) -> None:
        """Mark as completed; only allowed from the taken state."""
        if self.state != CrumbState.TAKEN:
            raise InvalidTransitionError()
        self.state = CrumbState.PEBBLE
        self._touch()

    def dust(self) -> None:
        """Mark as failed or abandoned, from any state."""
        self.state = CrumbState.DUST
        self._touch()

    def set_property(self, property_id: str, value: Any) -> None:
        """Assign a property value; type checks happen when the crumb is saved."""
        self.properties[property_id] = value
        self._touch()

    def get_property(self, property_id: str) -> Any:
        """Return one property value or raise PropertyNotFoundError."""
        try:
            return self.properties[property_id]
        except KeyError:
            raise PropertyNotFoundError() from None

    def get_properties(self) -> dict[str, Any]:
        """Return all property values."""
        return self.properties

    def clear_property(self, property_id: str) -> None:
        """Remove a property value or raise PropertyNotFoundError."""
        if property_id not in self.properties:
            raise PropertyNotFoundError()
        del self.properties[property_id]
        self._touch()