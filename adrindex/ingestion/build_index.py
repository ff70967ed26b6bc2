"""Build the tag index over every ADR and render it."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, TextIO

from adrindex.config import settings
from adrindex.errors import AdrIndexError
from adrindex.indexing.tag_index import build_tag_index
from adrindex.indexing.validation import verify_unique_sequence
from adrindex.ingestion.build_records import parse_adr
from adrindex.ingestion.scan_adrs import discover_adrs, load_document
from adrindex.models.adr import AdrRecord
from adrindex.models.tag_group import TagGroup
from adrindex.rendering.readme import ReadmeRenderer

logger = logging.getLogger(__name__)


def load_records(root: Optional[Path] = None) -> List[AdrRecord]:
    """Parse every ADR under `root`; the first invalid document aborts the load."""
    records: List[AdrRecord] = []
    for path in discover_adrs(root):
        records.append(parse_adr(path, load_document(path)))
    logger.info("Built %s ADR records", len(records))
    return records


def build_index(root: Optional[Path] = None) -> List[TagGroup]:
    records = load_records(root)
    verify_unique_sequence(records)
    return build_tag_index(records)


def run(
    root: Optional[Path] = None,
    output_path: Optional[Path] = None,
    stream: Optional[TextIO] = None,
) -> List[TagGroup]:
    """Load, validate, index and render in one pass."""
    groups = build_index(root)
    ReadmeRenderer().write(groups, output_path=output_path, stream=stream)
    return groups


def main() -> None:
    """CLI entry point."""
    logging.basicConfig(level=settings.log_level)
    try:
        run(settings.adr_dir_path, settings.output_path_obj)
    except AdrIndexError as exc:
        logger.error("ADR index build failed: %s", exc)
        raise SystemExit(1) from exc


if __name__ == "__main__":
    main()
