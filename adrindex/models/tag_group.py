"""Tag aggregate consumed by the renderer."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field

from .adr import AdrRecord


class TagGroup(BaseModel):
    """All records sharing one tag, ordered by sequence number."""

    tag: str
    records: List[AdrRecord] = Field(default_factory=list)
