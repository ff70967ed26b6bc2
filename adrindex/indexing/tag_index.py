"""Group ADR records by tag for the rendered index."""

from __future__ import annotations

import logging
from typing import Iterable, List

from adrindex.models.adr import AdrRecord
from adrindex.models.tag_group import TagGroup

logger = logging.getLogger(__name__)


def collect_tags(records: Iterable[AdrRecord]) -> List[str]:
    """Return the distinct tags of `records` in code point order."""
    return sorted({tag for record in records for tag in record.tags})


def build_tag_index(records: Iterable[AdrRecord]) -> List[TagGroup]:
    """Build one TagGroup per tag, each listing its records by sequence number.

    A record is listed once per group even if its tag list repeats the tag.
    The result depends only on the record set, not on its order.
    """
    record_list = list(records)
    groups: List[TagGroup] = []
    for tag in collect_tags(record_list):
        matched = sorted(
            (record for record in record_list if tag in record.tags),
            key=lambda record: record.sequence_number,
        )
        groups.append(TagGroup(tag=tag, records=matched))
    logger.info("Indexed %s records under %s tags", len(record_list), len(groups))
    return groups
