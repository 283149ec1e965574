"""Exception hierarchy for the crumbs storage system."""


class CrumbsError(Exception):
    """Base class for every error raised by crumbs."""

    default_message = "crumbs error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class NotFoundError(CrumbsError):
    default_message = "entity not found"


class InvalidIDError(CrumbsError):
    default_message = "invalid entity ID"


class InvalidDataError(CrumbsError):
    default_message = "invalid entity data"


class InvalidStateError(CrumbsError):
    default_message = "invalid state value"


class InvalidTransitionError(CrumbsError):
    default_message = "invalid state transition"


class InvalidNameError(CrumbsError):
    default_message = "invalid name"


class DuplicateNameError(CrumbsError):
    default_message = "duplicate name"


class InvalidValueTypeError(CrumbsError):
    default_message = "invalid value type"


class PropertyNotFoundError(CrumbsError):
    default_message = "property not found"


class TypeMismatchError(CrumbsError):
    default_message = "type mismatch"


class InvalidCategoryError(CrumbsError):
    default_message = "invalid category"


class InvalidStashTypeError(CrumbsError):
    default_message = "invalid stash type or operation"


class LockHeldError(CrumbsError):
    default_message = "lock is held"


class NotLockHolderError(CrumbsError):
    default_message = "caller is not the lock holder"


class InvalidHolderError(CrumbsError):
    default_message = "holder cannot be empty"


class AlreadyInTrailError(CrumbsError):
    default_message = "crumb already belongs to a trail"


class NotInTrailError(CrumbsError):
    default_message = "crumb does not belong to the trail"


class CupboardDetachedError(CrumbsError):
    default_message = "cupboard is detached"


class AlreadyAttachedError(CrumbsError):
    default_message = "cupboard is already attached"


class TableNotFoundError(CrumbsError):
    default_message = "table not found"


class ConfigError(CrumbsError, ValueError):
    """Base class for configuration validation errors."""

    default_message = "invalid configuration"


class BackendEmptyError(ConfigError):
    default_message = "backend cannot be empty"


class BackendUnknownError(ConfigError):
    default_message = "unknown backend"


class SyncStrategyUnknownError(ConfigError):
    default_message = "unknown sync strategy"


class BatchSizeInvalidError(ConfigError):
    default_message = "batch size must be positive when using batch sync strategy"


class BatchIntervalInvalidError(ConfigError):
    default_message = "batch interval must be positive when using batch sync strategy"