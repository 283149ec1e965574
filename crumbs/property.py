"""Properties and categories: extensible attributes on crumbs."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum

from .errors import InvalidNameError, InvalidValueTypeError


class ValueType(StrEnum):
    """Types of value a property accepts."""

    CATEGORICAL = "categorical"
    TEXT = "text"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    TIMESTAMP = "timestamp"
    LIST = "list"


@dataclass
class Category:
    """An enumeration value of a categorical property; lower ordinals sort first."""

    category_id: str = ""
    property_id: str = ""
    name: str = ""
    ordinal: int = 0


class CategoryDefiner(ABC):
    """Storage for categories, supplied by a backend."""

    @abstractmethod
    def define_category(self, property_id: str, name: str, ordinal: int) -> Category:
        """Create and persist a category; raise DuplicateNameError on a clash."""

    @abstractmethod
    def get_categories(self, property_id: str) -> list[Category]:
        """Return every category of a property, possibly none."""


@dataclass
class Property:
    """A custom attribute that can be assigned to crumbs."""

    property_id: str = ""
    name: str = ""
    description: str = ""
    value_type: str = ""
    created_at: datetime | None = None

    def _require_categorical(self) -> None:
        if self.value_type != ValueType.CATEGORICAL:
            raise InvalidValueTypeError()

    def define_category(self, definer: CategoryDefiner, name: str, ordinal: int) -> Category:
        """Create a category for this categorical property."""
        self._require_categorical()
        if not name:
            raise InvalidNameError()
        return definer.define_category(self.property_id, name, ordinal)

    def get_categories(self, definer: CategoryDefiner) -> list[Category]:
        """Return this property's categories ordered by ordinal, then name."""
        self._require_categorical()
        categories = definer.get_categories(self.property_id)
        return sorted(categories, key=lambda c: (c.ordinal, c.name))