# crumbs

A small data model for coordinating work. A *crumb* is a single work item.
A *trail* groups crumbs into an exploratory session. *Properties* and
*categories* add custom attributes to crumbs. *Metadata* attaches comments
and attachments to crumbs. *Links* form a graph between entities. *Stashes*
hold shared state such as counters, locks and context values.

The package defines these entities as dataclasses, the rules for moving
them between states, the configuration for a storage backend, and the
abstract `Table` and `Cupboard` interfaces that a backend implements.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Crumbs (`crumbs.crumb`)

```python
from crumbs.crumb import Crumb, CrumbState
from crumbs.errors import InvalidTransitionError

crumb = Crumb(name="Write the report", state=CrumbState.TAKEN)
crumb.set_property("priority", 3)
crumb.pebble()            # taken -> pebble (done)

other = Crumb(name="Draft idea")
try:
    other.pebble()        # only a taken crumb can be pebbled
except InvalidTransitionError:
    other.dust()          # dust is allowed from any state
```

States (`CrumbState`) are `draft`, `pending`, `ready`, `taken`, `pebble`
(completed) and `dust` (failed or abandoned). `set_state` accepts any of
them and raises `InvalidStateError` for anything else.

Properties live in the `properties` dict: `set_property`, `get_property`,
`get_properties` and `clear_property`. Reading or clearing a missing
property raises `PropertyNotFoundError`. Every change sets `updated_at`
to the current UTC time.

## Trails (`crumbs.trail`)

```python
from crumbs.trail import Trail, TrailState

trail = Trail()
trail.set_state(TrailState.DRAFT)
trail.set_state(TrailState.ACTIVE)
trail.complete()          # records completed_at
```

Allowed moves: a new trail with no state may take any state; draft may go
to pending or active; pending to active; active to completed or abandoned.
Completed and abandoned are terminal. Any other move, and `complete` or
`abandon` on a trail that is not active, raises `InvalidStateError`.

## Stashes (`crumbs.stash`)

```python
from crumbs.stash import Stash, StashType

counter = Stash(name="requests", stash_type=StashType.COUNTER, version=1)
counter.increment(10)
counter.increment(-3)     # returns 7; value is {"value": 7}

lock = Stash(name="mutex", stash_type=StashType.LOCK, version=1)
lock.acquire("worker-1")  # value is {"holder": ..., "acquired_at": ...}
lock.release("worker-1")  # value is None again
```

Each mutation raises `version` by one and records the `StashOperation` in
`last_operation`. `set_value` is refused on locks, `increment` works only
on counters, and `acquire`/`release` only on locks; otherwise
`InvalidStashTypeError` is raised. Acquiring again as the same holder
changes nothing; acquiring a lock held by someone else raises
`LockHeldError`; an empty holder raises `InvalidHolderError`; releasing a
lock you do not hold raises `NotLockHolderError`. `StashHistoryEntry`
describes one recorded change.

## Properties and categories (`crumbs.property`)

`Property.define_category` and `Property.get_categories` work only on
properties whose `value_type` is `ValueType.CATEGORICAL` (otherwise
`InvalidValueTypeError`). Storage is delegated to a `CategoryDefiner`, an
abstract class you implement. An empty category name raises
`InvalidNameError`. Categories come back ordered by ordinal, then by name.

## Links and metadata

`crumbs.link` defines `Link` and `LinkType` (`belongs_to`, `child_of`,
`branches_from`, `scoped_to`). `crumbs.metadata` defines `Metadata`,
`Schema` and `ContentType` (`text`, `json`). These are plain dataclasses.

## Configuration (`crumbs.config`)

```python
from crumbs.config import Config, SQLiteConfig, SyncStrategy

config = Config(
    backend="sqlite",
    data_dir=".crumbs",
    sqlite_config=SQLiteConfig(sync_strategy=SyncStrategy.BATCH, batch_size=50),
)
config.validate()
```

`validate` raises `BackendEmptyError`, `BackendUnknownError` (only
`"sqlite"` is known), `SyncStrategyUnknownError`, `BatchSizeInvalidError`
or `BatchIntervalInvalidError`. The batch strategy needs a positive batch
size or interval. `effective_sync_strategy`, `effective_batch_size` and
`effective_batch_interval` return the values in force, falling back to
`immediate`, 100 writes and 5 seconds.

## Storage interfaces (`crumbs.storage`)

`Table` declares `get`, `set`, `delete` and `fetch`; `Cupboard` declares
`get_table`, `attach` and `detach`, and detaches when used as a context
manager. `TableName` lists the standard table names.

## What this package does not do

It ships no storage backend: there is no concrete `Cupboard` or `Table`,
nothing is written to disk, and no IDs are generated. The configuration
classes describe a SQLite backend, but one has to be supplied separately.
There is no command-line tool.

## Errors (`crumbs.errors`)

Every error derives from `CrumbsError`, so callers can catch the whole
family or a single case such as `NotFoundError`. Configuration errors
derive from `ConfigError`, which is also a `ValueError`.