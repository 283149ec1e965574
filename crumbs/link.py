"""Links: directed edges in the entity graph."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum


class LinkType(StrEnum):
    """Relationship kinds between entities."""

    BELONGS_TO = "belongs_to"  # crumb -> trail membership
    CHILD_OF = "child_of"  # crumb -> crumb dependency
    BRANCHES_FROM = "branches_from"  # trail -> crumb branch point
    SCOPED_TO = "scoped_to"  # stash -> trail scope


@dataclass
class Link:
    """A directed edge from one entity to another."""

    link_id: str = ""
    link_type: str = ""
    from_id: str = ""
    to_id: str = ""
    created_at: datetime | None = None