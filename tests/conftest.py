"""Shared fixtures for ADR index tests."""
from __future__ import annotations

from pathlib import Path
from typing import Callable, Optional

import pytest


def make_adr_text(
    heading: Optional[str] = "Adopt X",
    date: Optional[str] = "01-02-2023",
    author: Optional[str] = "Alice, Bob",
    status: Optional[str] = "Approved",
    tags: Optional[str] = "infra, naming",
    extra_rows: tuple[str, ...] = (),
) -> str:
    rows = []
    if date is not None:
        rows.append(f"|Date|{date}")
    if author is not None:
        rows.append(f"|Author|{author}")
    if status is not None:
        rows.append(f"|Status|{status}")
    if tags is not None:
        rows.append(f"|Tags|{tags}")
    rows.extend(extra_rows)
    lines = []
    if heading is not None:
        lines.extend([f"= {heading}", ""])
    lines.extend(['[cols="1,3"]', "|===", "|Metadata|", *rows, "|===", ""])
    lines.extend(["== Context", "", "Some context.", ""])
    return "\n".join(lines)


@pytest.fixture
def adr_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "adr"
    directory.mkdir()
    return directory


@pytest.fixture
def write_adr(adr_dir: Path) -> Callable[..., Path]:
    def _write(name: str, **kwargs) -> Path:
        path = adr_dir / name
        path.write_text(make_adr_text(**kwargs), encoding="utf-8")
        return path

    return _write
