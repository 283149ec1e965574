"""Configuration for opening a cupboard."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from .errors import (
    BackendEmptyError,
    BackendUnknownError,
    BatchIntervalInvalidError,
    BatchSizeInvalidError,
    SyncStrategyUnknownError,
)

BACKEND_SQLITE = "sqlite"

DEFAULT_BATCH_SIZE = 100
DEFAULT_BATCH_INTERVAL = 5


class SyncStrategy(StrEnum):
    """When writes are persisted to the JSONL files."""

    IMMEDIATE = "immediate"
    ON_CLOSE = "on_close"
    BATCH = "batch"


@dataclass
class SQLiteConfig:
    """Settings for the SQLite backend.

    An empty sync_strategy means immediate. batch_size and batch_interval
    (seconds) are only used by the batch strategy.
    """

    sync_strategy: str = ""
    batch_size: int = 0
    batch_interval: int = 0

    def validate(self) -> None:
        """Raise a ConfigError if the settings are inconsistent."""
        match self.sync_strategy:
            case "" | SyncStrategy.IMMEDIATE | SyncStrategy.ON_CLOSE:
                return
            case SyncStrategy.BATCH:
                if self.batch_size < 0:
                    raise BatchSizeInvalidError()
                if self.batch_interval < 0:
                    raise BatchIntervalInvalidError()
                if self.batch_size == 0 and self.batch_interval == 0:
                    raise BatchSizeInvalidError(
                        f"{BatchSizeInvalidError.default_message}: "
                        "must set BatchSize or BatchInterval"
                    )
            case other:
                raise SyncStrategyUnknownError(
                    f"{SyncStrategyUnknownError.default_message}: {other}"
                )


@dataclass
class Config:
    """Configuration for attaching a cupboard."""

    backend: str = ""
    data_dir: str = ""
    sqlite_config: SQLiteConfig | None = None

    def validate(self) -> None:
        """Raise a ConfigError if the backend is empty, unknown or misconfigured."""
        if not self.backend:
            raise BackendEmptyError()
        if self.backend != BACKEND_SQLITE:
            raise BackendUnknownError(
                f"{BackendUnknownError.default_message}: {self.backend}"
            )
        if self.sqlite_config is not None:
            self.sqlite_config.validate()


def effective_sync_strategy(config: SQLiteConfig | None) -> str:
    """Return the sync strategy in force, defaulting to immediate."""
    if config is None or not config.sync_strategy:
        return SyncStrategy.IMMEDIATE
    return config.sync_strategy


def effective_batch_size(config: SQLiteConfig | None) -> int:
    """Return the batch size in force, defaulting to 100."""
    if config is None or config.batch_size <= 0:
        return DEFAULT_BATCH_SIZE
    return config.batch_size


def effective_batch_interval(config: SQLiteConfig | None) -> int:
    """Return the batch interval in seconds, defaulting to 5."""
    if config is None or config.batch_interval <= 0:
        return DEFAULT_BATCH_INTERVAL
    return config.batch_interval