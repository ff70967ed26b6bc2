"""Extract the heading and metadata table from AsciiDoc ADR text."""

from __future__ import annotations

import io
import logging
import re
from enum import Enum
from typing import Dict, Iterator, List, Optional, Tuple

from adrindex.models.adr import METADATA_KEYS, ExtractedMetadata

logger = logging.getLogger(__name__)

HEADING_PATTERN = re.compile(r"^=\s+(?P<title>.*)$")
TABLE_START = "|Metadata"
TABLE_END = "|==="
CELL_SEPARATOR = "|"


class TableState(Enum):
    BEFORE_TABLE = "before-table"
    IN_TABLE = "in-table"
    AFTER_TABLE = "after-table"


def iter_lines(text: str) -> Iterator[str]:
    """Yield lines split on LF, CRLF or CR only, without their terminator."""
    for line in io.StringIO(text, newline=None):
        yield line.rstrip("\n")


def extract_heading(text: str) -> str:
    """Return the first `= Title` line without its marker, or an empty string."""
    for line in iter_lines(text):
        match = HEADING_PATTERN.match(line)
        if match:
            return match.group("title").strip()
    return ""


def split_row(line: str) -> Optional[Tuple[str, str]]:
    """Split a `|key|value` row, returning None when it has fewer than two cells."""
    cells = line.strip().split(CELL_SEPARATOR)
    if len(cells) < 3:
        return None
    key = cells[1].strip()
    if not key:
        return None
    return key, cells[2].strip()


def extract_metadata(text: str) -> ExtractedMetadata:
    """Scan `text` for the heading and the first `|Metadata` ... `|===` table.

    A key repeated inside the table keeps its last value; the earlier value is
    dropped and the key is listed in `duplicate_keys`. Keys outside
    METADATA_KEYS are kept in `fields` but reported through `unknown_keys`.
    Missing heading or table is not an error here.
    """
    fields: Dict[str, str] = {}
    unknown_keys: List[str] = []
    duplicate_keys: List[str] = []
    state = TableState.BEFORE_TABLE

    for line in iter_lines(text):
        if state is TableState.BEFORE_TABLE:
            if line.startswith(TABLE_START):
                state = TableState.IN_TABLE
            continue
        if state is TableState.AFTER_TABLE:
            break
        if line.startswith(TABLE_END):
            state = TableState.AFTER_TABLE
            continue
        if line.startswith(TABLE_START):
            continue
        if CELL_SEPARATOR not in line:
            continue
        row = split_row(line)
        if row is None:
            logger.debug("Skipping malformed metadata row %r", line)
            continue
        key, value = row
        if key in fields:
            logger.debug("Metadata key %s repeated, keeping the last value", key)
            if key not in duplicate_keys:
                duplicate_keys.append(key)
        elif key not in METADATA_KEYS:
            unknown_keys.append(key)
        fields[key] = value

    return ExtractedMetadata(
        heading=extract_heading(text),
        fields=fields,
        unknown_keys=unknown_keys,
        duplicate_keys=duplicate_keys,
    )
