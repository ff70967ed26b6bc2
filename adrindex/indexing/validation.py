"""Checks that span the whole ADR corpus."""

from __future__ import annotations

import logging
from typing import Dict, Iterable

from adrindex.errors import DuplicateSequenceError
from adrindex.models.adr import AdrRecord

logger = logging.getLogger(__name__)


def verify_unique_sequence(records: Iterable[AdrRecord]) -> None:
    """Raise DuplicateSequenceError on the first reused sequence number, in input order."""
    seen: Dict[int, str] = {}
    for record in records:
        first_path = seen.get(record.sequence_number)
        if first_path is not None:
            raise DuplicateSequenceError(
                record.sequence_number, first_path, record.source_path
            )
        seen[record.sequence_number] = record.source_path
    logger.debug("Verified %s unique ADR sequence numbers", len(seen))
