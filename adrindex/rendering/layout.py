"""Fixed AsciiDoc layout for the ADR index."""

from __future__ import annotations

import re
from typing import Iterable, List

from adrindex.models.adr import AdrRecord
from adrindex.models.tag_group import TagGroup

WORD_START_PATTERN = re.compile(r"(?<!\w)\w")
UNTITLED = "(untitled)"


def title_case(text: str) -> str:
    """Upper-case the first letter of every word, leaving the rest untouched."""
    return WORD_START_PATTERN.sub(lambda match: match.group(0).upper(), text)


def join_tags(tags: Iterable[str]) -> str:
    return ", ".join(tags)


def format_record_line(record: AdrRecord) -> str:
    heading = record.heading or UNTITLED
    return (
        f"* link:{record.source_path}[ADR-{record.sequence_number}] "
        f"{heading} ({join_tags(record.tags)})"
    )


def format_tag_section(group: TagGroup) -> str:
    lines: List[str] = [f"== {title_case(group.tag)}", ""]
    lines.extend(format_record_line(record) for record in group.records)
    return "\n".join(lines)


def build_index_document(title: str, groups: Iterable[TagGroup]) -> str:
    sections = [f"= {title}"]
    sections.extend(format_tag_section(group) for group in groups)
    return "\n\n".join(sections) + "\n"
