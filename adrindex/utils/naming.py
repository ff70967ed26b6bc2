"""Sequence numbers derived from ADR file names."""

from __future__ import annotations

import re
from pathlib import PurePath
from typing import Optional

from adrindex.errors import InvalidFilenameError, InvalidSequenceError

SEPARATOR = "-"
DIGITS_PATTERN = re.compile(r"[0-9]+")


def parse_sequence_number(filename: str, source_path: Optional[str] = None) -> int:
    """Return the ADR index encoded as the leading `-` segment of a file name.

    `filename` may be a bare name or a path; the directory part and the
    extension are ignored, so `adr/0002-adopt-x.adoc` yields 2.
    """
    base = PurePath(filename).stem
    parts = base.split(SEPARATOR)
    if len(parts) < 2:
        raise InvalidFilenameError(base, source_path)
    segment = parts[0]
    if not DIGITS_PATTERN.fullmatch(segment):
        raise InvalidSequenceError(segment, source_path)
    number = int(segment)
    if number == 0:
        raise InvalidSequenceError(segment, source_path)
    return number
