"""Trails: exploratory work sessions that group crumbs."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import StrEnum

from .errors import InvalidStateError


class TrailState(StrEnum):
    """Trail states; completed and abandoned are terminal."""

    DRAFT = "draft"
    PENDING = "pending"
    ACTIVE = "active"
    COMPLETED = "completed"
    ABANDONED = "abandoned"


_TERMINAL = frozenset({TrailState.COMPLETED, TrailState.ABANDONED})

_ALLOWED: dict[str, frozenset[TrailState]] = {
    TrailState.DRAFT: frozenset({TrailState.PENDING, TrailState.ACTIVE}),
    TrailState.PENDING: frozenset({TrailState.ACTIVE}),
    TrailState.ACTIVE: frozenset({TrailState.COMPLETED, TrailState.ABANDONED}),
    "": frozenset(TrailState),
}


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Trail:
    """An exploratory work session. Changes must be saved through a table."""

    trail_id: str = ""
    state: str = ""
    created_at: datetime | None = None
    completed_at: datetime | None = None

    def set_state(self, state: str) -> None:
        """Move to another state, following the allowed transitions.

        draft may go to pending or active, pending to active, active to
        completed or abandoned; a new trail with no state may take any state.
        Raises InvalidStateError for an unknown state or a forbidden move.
        """
        try:
            target = TrailState(state)
        except ValueError:
            raise InvalidStateError() from None
        if self.state in _TERMINAL:
            raise InvalidStateError()
        allowed = _ALLOWED.get(self.state)
        if allowed is None or target not in allowed:
            raise InvalidStateError()
        self.state = target

    def _finish(self, state: TrailState) -> None:
        if self.state != TrailState.ACTIVE:
            raise InvalidStateError()
        self.state = state
        self.completed_at = _now()

    def complete(self) -> None:
        """Mark an active trail as completed and record when."""
        self._finish(TrailState.COMPLETED)

    def abandon(self) -> None:
        """Mark an active trail as abandoned and record when."""
        self._finish(TrailState.ABANDONED)