"""Writes the rendered ADR index to stdout or a file."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Iterable, Optional, TextIO

from adrindex.config import settings
from adrindex.errors import RenderError
from adrindex.models.tag_group import TagGroup
from adrindex.rendering.layout import build_index_document

logger = logging.getLogger(__name__)


class ReadmeRenderer:
    """Renders tag groups into the fixed index layout."""

    def __init__(self, title: Optional[str] = None) -> None:
        self.title = title or settings.index_title

    def render(self, groups: Iterable[TagGroup]) -> str:
        return build_index_document(self.title, groups)

    def write(
        self,
        groups: Iterable[TagGroup],
        output_path: Optional[Path] = None,
        stream: Optional[TextIO] = None,
    ) -> None:
        """Write to `output_path` when given, otherwise to `stream` (stdout by default)."""
        document = self.render(groups)
        try:
            if output_path is not None:
                output_path.parent.mkdir(parents=True, exist_ok=True)
                output_path.write_text(document, encoding="utf-8")
                logger.info("Wrote ADR index to %s", output_path)
                return
            (stream or sys.stdout).write(document)
        except OSError as exc:
            raise RenderError(f"cannot write ADR index: {exc}", str(output_path or "<stdout>")) from exc
