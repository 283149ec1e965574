"""Abstract storage contracts: tables of entities and the cupboard that holds them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import StrEnum
from typing import TYPE_CHECKING, Any, Mapping

if TYPE_CHECKING:
    from .config import Config


class TableName(StrEnum):
    """Standard table names used by the system."""

    CRUMBS = "crumbs"
    TRAILS = "trails"
    PROPERTIES = "properties"
    METADATA = "metadata"
    LINKS = "links"
    STASHES = "stashes"


class Table(ABC):
    """Uniform CRUD operations for one entity type."""

    @abstractmethod
    def get(self, entity_id: str) -> Any:
        """Return the entity with this ID.

        Raises InvalidIDError for an empty ID, NotFoundError if absent and
        CupboardDetachedError once the cupboard is detached.
        """

    @abstractmethod
    def set(self, entity_id: str, data: Any) -> str:
        """Persist an entity and return its ID.

        An empty ID creates a new entity with a freshly generated UUID v7;
        otherwise the entity is updated, or created if it does not exist.
        """

    @abstractmethod
    def delete(self, entity_id: str) -> None:
        """Remove the entity with this ID.

        Raises InvalidIDError for an empty ID and NotFoundError if absent.
        """

    @abstractmethod
    def fetch(self, filters: Mapping[str, Any] | None) -> list[Any]:
        """Return all entities whose fields equal every value in filters.

        An empty or missing filter returns every entity in the table.
        """


class Cupboard(ABC):
    """Storage access and lifecycle management.

    Usable as a context manager: leaving the block detaches the cupboard.
    """

    @abstractmethod
    def get_table(self, name: str) -> Table:
        """Return the table with this name.

        Raises TableNotFoundError for an unknown name and
        CupboardDetachedError once detached.
        """

    @abstractmethod
    def attach(self, config: Config) -> None:
        """Initialise the backend with the given configuration.

        Raises AlreadyAttachedError if already attached.
        """

    @abstractmethod
    def detach(self) -> None:
        """Release all resources; calling it again does nothing."""

    def __enter__(self) -> Cupboard:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.detach()