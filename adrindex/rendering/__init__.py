"""Rendering of the tag index."""

from .layout import build_index_document, title_case
from .readme import ReadmeRenderer

__all__ = ["ReadmeRenderer", "build_index_document", "title_case"]
