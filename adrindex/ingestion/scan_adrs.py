"""Scan the ADR directory and read document text."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

from adrindex.config import settings
from adrindex.errors import DocumentReadError

logger = logging.getLogger(__name__)


def discover_adrs(root: Optional[Path] = None, extension: Optional[str] = None) -> List[Path]:
    """Return every ADR document directly under `root`, sorted by name."""
    root_path = root or settings.adr_dir_path
    suffix = extension or settings.adr_extension
    if not root_path.is_dir():
        raise DocumentReadError(f"ADR directory {root_path} does not exist")

    try:
        entries = sorted(root_path.iterdir())
    except OSError as exc:
        raise DocumentReadError(f"cannot list ADR directory: {exc}", str(root_path)) from exc

    paths = [entry for entry in entries if entry.is_file() and entry.suffix == suffix]
    logger.info("Discovered %s ADR documents in %s", len(paths), root_path)
    return paths


def load_document(path: Path) -> str:
    """Read one document as UTF-8 text."""
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise DocumentReadError(f"cannot read document: {exc}", str(path)) from exc
