import pytest

from crumbs.config import (
    BACKEND_SQLITE,
    Config,
    SQLiteConfig,
    SyncStrategy,
    effective_batch_interval,
    effective_batch_size,
    effective_sync_strategy,
)
from crumbs.errors import (
    BackendEmptyError,
    BackendUnknownError,
    BatchIntervalInvalidError,
    BatchSizeInvalidError,
    ConfigError,
    SyncStrategyUnknownError,
)


def test_empty_backend_rejected():
    with pytest.raises(BackendEmptyError, match="backend cannot be empty"):
        Config(data_dir="data").validate()


def test_unknown_backend_names_backend():
    with pytest.raises(BackendUnknownError, match="unknown backend: postgres"):
        Config(backend="postgres").validate()


def test_sqlite_backend_without_sqlite_config_is_valid():
    config = Config(backend=BACKEND_SQLITE, data_dir="data")
    assert config.validate() is None
    assert config.sqlite_config is None


@pytest.mark.parametrize("strategy", ["", "immediate", "on_close"])
def test_simple_strategies_are_valid(strategy):
    config = Config(backend="sqlite", sqlite_config=SQLiteConfig(sync_strategy=strategy))
    assert config.validate() is None


def test_unknown_strategy_rejected_through_config():
    config = Config(backend="sqlite", sqlite_config=SQLiteConfig(sync_strategy="weekly"))
    with pytest.raises(SyncStrategyUnknownError, match="unknown sync strategy: weekly"):
        config.validate()


def test_batch_negative_size_rejected():
    with pytest.raises(BatchSizeInvalidError):
        SQLiteConfig(sync_strategy="batch", batch_size=-1, batch_interval=5).validate()


def test_batch_negative_interval_rejected():
    with pytest.raises(BatchIntervalInvalidError):
        SQLiteConfig(sync_strategy="batch", batch_size=10, batch_interval=-1).validate()


def test_batch_needs_size_or_interval():
    with pytest.raises(BatchSizeInvalidError, match="must set BatchSize or BatchInterval"):
        SQLiteConfig(sync_strategy=SyncStrategy.BATCH).validate()


@pytest.mark.parametrize("size,interval", [(10, 0), (0, 3), (10, 3)])
def test_batch_with_size_or_interval_valid(size, interval):
    cfg = SQLiteConfig(sync_strategy="batch", batch_size=size, batch_interval=interval)
    assert cfg.validate() is None


def test_config_errors_share_base():
    with pytest.raises(ConfigError):
        Config().validate()
    with pytest.raises(ValueError):
        Config(backend="other").validate()


def test_effective_sync_strategy_defaults():
    assert effective_sync_strategy(None) == "immediate"
    assert effective_sync_strategy(SQLiteConfig()) == SyncStrategy.IMMEDIATE
    assert effective_sync_strategy(SQLiteConfig(sync_strategy="on_close")) == "on_close"


def test_effective_batch_size_defaults():
    assert effective_batch_size(None) == 100
    assert effective_batch_size(SQLiteConfig(batch_size=-4)) == 100
    assert effective_batch_size(SQLiteConfig(batch_size=7)) == 7


def test_effective_batch_interval_defaults():
    assert effective_batch_interval(None) == 5
    assert effective_batch_interval(SQLiteConfig(batch_interval=0)) == 5
    assert effective_batch_interval(SQLiteConfig(batch_interval=9)) == 9


@pytest.mark.parametrize("value", ["immediate", "on_close", "batch"])
def test_each_sync_strategy_value_is_effective(value):
    cfg = SQLiteConfig(sync_strategy=value, batch_size=1)
    assert cfg.validate() is None
    assert effective_sync_strategy(cfg) == value
    assert effective_sync_strategy(cfg) == SyncStrategy(value)