"""Turn extracted ADR metadata into validated records."""

from __future__ import annotations

import datetime
import logging
import re
from pathlib import Path
from typing import Callable, List, Mapping, Optional, Union

from adrindex.errors import (
    AdrIndexError,
    InvalidDateError,
    InvalidStatusError,
    MissingAuthorsError,
    MissingDateError,
    MissingTagsError,
)
from adrindex.ingestion.extract_metadata import extract_metadata
from adrindex.models.adr import VALID_STATUSES, AdrRecord, ExtractedMetadata
from adrindex.utils.naming import parse_sequence_number

logger = logging.getLogger(__name__)

DATE_FORMAT = "%d-%m-%Y"
DATE_PATTERN = re.compile(r"\d{2}-\d{2}-\d{4}")
ZERO_DATE = datetime.date(1, 1, 1)

SequenceParser = Callable[[str, Optional[str]], int]


def parse_comma_list(value: str) -> List[str]:
    """Split a comma separated cell, dropping blank entries."""
    items = [item.strip() for item in value.split(",")]
    return [item for item in items if item]


def parse_date(value: str, source_path: Optional[str] = None) -> datetime.date:
    """Parse a `DD-MM-YYYY` cell."""
    if not DATE_PATTERN.fullmatch(value):
        raise InvalidDateError(value, source_path)
    try:
        return datetime.datetime.strptime(value, DATE_FORMAT).date()
    except ValueError as exc:
        raise InvalidDateError(value, source_path) from exc


def _check_date(fields: Mapping[str, str], source_path: str) -> datetime.date:
    raw = fields.get("Date")
    if raw is None:
        raise MissingDateError(source_path)
    parsed = parse_date(raw, source_path)
    if parsed == ZERO_DATE:
        raise MissingDateError(source_path)
    return parsed


def _check_status(fields: Mapping[str, str], source_path: str) -> str:
    status = fields.get("Status", "")
    if status not in VALID_STATUSES:
        raise InvalidStatusError(status, VALID_STATUSES, source_path)
    return status


def _check_authors(fields: Mapping[str, str], source_path: str) -> List[str]:
    authors = parse_comma_list(fields.get("Author", ""))
    if not authors:
        raise MissingAuthorsError(source_path)
    return authors


def _check_tags(fields: Mapping[str, str], source_path: str) -> List[str]:
    tags = parse_comma_list(fields.get("Tags", ""))
    if not tags:
        raise MissingTagsError(source_path)
    return tags


def build_record(
    source_path: Union[str, Path],
    extracted: ExtractedMetadata,
    sequence_parser: SequenceParser = parse_sequence_number,
) -> AdrRecord:
    """Validate extracted metadata and build an AdrRecord.

    Every field is checked before giving up. The first failure is raised and
    the rest are attached to it as `related`, in the order sequence number,
    date, status, authors, tags.
    """
    path = str(source_path)
    for key in extracted.unknown_keys:
        logger.warning("Unexpected metadata key %s in %s", key, path)
    if not extracted.heading:
        logger.warning("No heading found in %s", path)

    errors: List[AdrIndexError] = []
    values = {}
    checks = (
        ("sequence_number", lambda: sequence_parser(path, path)),
        ("date", lambda: _check_date(extracted.fields, path)),
        ("status", lambda: _check_status(extracted.fields, path)),
        ("authors", lambda: _check_authors(extracted.fields, path)),
        ("tags", lambda: _check_tags(extracted.fields, path)),
    )
    for name, check in checks:
        try:
            values[name] = check()
        except AdrIndexError as exc:
            logger.error("%s", exc)
            errors.append(exc)

    if errors:
        first = errors[0]
        first.related = errors[1:]
        raise first

    return AdrRecord(
        heading=extracted.heading,
        source_path=path,
        **values,
    )


def parse_adr(
    source_path: Union[str, Path],
    text: str,
    sequence_parser: SequenceParser = parse_sequence_number,
) -> AdrRecord:
    """Extract and validate one document's text."""
    extracted = extract_metadata(text)
    logger.debug(
        "Extracted %s metadata fields from %s", len(extracted.fields), source_path
    )
    return build_record(source_path, extracted, sequence_parser=sequence_parser)
