"""Typed models shared across the application."""

from .adr import METADATA_KEYS, VALID_STATUSES, AdrRecord, ExtractedMetadata
from .tag_group import TagGroup

__all__ = [
    "AdrRecord",
    "ExtractedMetadata",
    "METADATA_KEYS",
    "TagGroup",
    "VALID_STATUSES",
]
