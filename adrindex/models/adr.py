"""ADR-level data models."""

from __future__ import annotations

import datetime
from typing import Dict, List

from pydantic import BaseModel, Field

VALID_STATUSES = ("Approved", "Partially Implemented", "Implemented")
METADATA_KEYS = ("Date", "Author", "Status", "Tags")


class ExtractedMetadata(BaseModel):
    """Raw heading and metadata table values scanned from one document."""

    heading: str = ""
    fields: Dict[str, str] = Field(default_factory=dict)
    unknown_keys: List[str] = Field(default_factory=list)
    duplicate_keys: List[str] = Field(default_factory=list)


class AdrRecord(BaseModel):
    """A validated ADR ready for indexing."""

    sequence_number: int = Field(..., gt=0)
    heading: str = ""
    authors: List[str] = Field(..., min_length=1)
    date: datetime.date
    status: str
    tags: List[str] = Field(..., min_length=1)
    source_path: str
