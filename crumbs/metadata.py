"""Metadata entries and the schemas that describe them."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum


class ContentType(StrEnum):
    """Content formats a metadata schema may require."""

    TEXT = "text"
    JSON = "json"


@dataclass
class Metadata:
    """Supplementary information attached to a crumb."""

    metadata_id: str = ""
    crumb_id: str = ""
    table_name: str = ""
    content: str = ""
    property_id: str | None = None
    created_at: datetime | None = None


@dataclass
class Schema:
    """Definition of a metadata table such as comments or attachments."""

    schema_name: str = ""
    description: str = ""
    content_type: str = ""