"""Corpus validation and tag indexing."""

from .tag_index import build_tag_index, collect_tags
from .validation import verify_unique_sequence

__all__ = ["build_tag_index", "collect_tags", "verify_unique_sequence"]
