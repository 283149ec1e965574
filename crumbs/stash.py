"""Stashes: shared state between crumbs in a trail."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from typing import Any

from .errors import InvalidHolderError, InvalidStashTypeError, LockHeldError, NotLockHolderError


class StashType(StrEnum):
    """Kinds of stash; the shape of the value depends on the kind."""

    RESOURCE = "resource"
    ARTIFACT = "artifact"
    CONTEXT = "context"
    COUNTER = "counter"
    LOCK = "lock"


class StashOperation(StrEnum):
    """Operations recorded in a stash's history."""

    CREATE = "create"
    SET = "set"
    INCREMENT = "increment"
    ACQUIRE = "acquire"
    RELEASE = "release"


def _as_count(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0
    return int(value)


def _counter_value(value: Any) -> int:
    if isinstance(value, dict):
        return _as_count(value.get("value"))
    return _as_count(value)


def _lock_holder(value: Any) -> str | None:
    if isinstance(value, dict):
        holder = value.get("holder")
        if isinstance(holder, str):
            return holder
    return None


@dataclass
class Stash:
    """Shared state scoped to a trail or global.

    Each mutating method bumps version and records last_operation; the
    change must then be saved through a table.
    """

    stash_id: str = ""
    name: str = ""
    stash_type: str = ""
    value: Any = None
    version: int = 0
    created_at: datetime | None = None
    last_operation: str = ""
    changed_by: str | None = None

    def _record(self, operation: StashOperation) -> None:
        self.version += 1
        self.last_operation = operation

    def set_value(self, value: Any) -> None:
        """Replace the value; not allowed on locks."""
        if self.stash_type == StashType.LOCK:
            raise InvalidStashTypeError()
        self.value = value
        self._record(StashOperation.SET)

    def increment(self, delta: int) -> int:
        """Add delta to a counter and return the new count."""
        if self.stash_type != StashType.COUNTER:
            raise InvalidStashTypeError()
        new_value = _counter_value(self.value) + delta
        self.value = {"value": new_value}
        self._record(StashOperation.INCREMENT)
        return new_value

    def acquire(self, holder: str) -> None:
        """Take the lock for holder; acquiring again by the same holder is a no-op."""
        if self.stash_type != StashType.LOCK:
            raise InvalidStashTypeError()
        if not holder:
            raise InvalidHolderError()
        current = _lock_holder(self.value)
        if current is not None:
            if current == holder:
                return
            raise LockHeldError()
        self.value = {
            "holder": holder,
            "acquired_at": datetime.now().astimezone().isoformat(timespec="seconds"),
        }
        self._record(StashOperation.ACQUIRE)

    def release(self, holder: str) -> None:
        """Release the lock; only its current holder may do so."""
        if self.stash_type != StashType.LOCK:
            raise InvalidStashTypeError()
        if _lock_holder(self.value) != holder or self.value is None:
            raise NotLockHolderError()
        self.value = None
        self._record(StashOperation.RELEASE)


@dataclass
class StashHistoryEntry:
    """One recorded change to a stash."""

    history_id: str = ""
    stash_id: str = ""
    version: int = 0
    value: Any = None
    operation: str = ""
    changed_by: str | None = None
    created_at: datetime | None = None