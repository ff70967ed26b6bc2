"""Tests for adrindex.ingestion.extract_metadata."""
from __future__ import annotations

from adrindex.ingestion.extract_metadata import extract_heading, extract_metadata, iter_lines, split_row

from conftest import make_adr_text


class TestExtractHeading:
    def test_first_line(self) -> None:
        assert extract_heading("= Adopt X\n\nbody") == "Adopt X"

    def test_heading_after_attributes(self) -> None:
        text = ":toc:\n:sectnums:\n\n= Use Kafka  \n"
        assert extract_heading(text) == "Use Kafka"

    def test_first_match_wins(self) -> None:
        assert extract_heading("= One\n= Two\n") == "One"

    def test_section_headings_ignored(self) -> None:
        assert extract_heading("== Context\n=== Detail\n") == ""

    def test_marker_needs_whitespace(self) -> None:
        assert extract_heading("=NoSpace\n") == ""

    def test_missing_heading(self) -> None:
        assert extract_heading("just text") == ""


class TestSplitRow:
    def test_key_value(self) -> None:
        assert split_row("| Date | 01-02-2023 ") == ("Date", "01-02-2023")

    def test_extra_cells_ignored(self) -> None:
        assert split_row("|Status|Approved|note") == ("Status", "Approved")

    def test_single_cell(self) -> None:
        assert split_row("|Date") is None

    def test_empty_key(self) -> None:
        assert split_row("||value") is None


class TestExtractMetadata:
    def test_full_document(self) -> None:
        extracted = extract_metadata(make_adr_text())
        assert extracted.heading == "Adopt X"
        assert extracted.fields == {
            "Date": "01-02-2023",
            "Author": "Alice, Bob",
            "Status": "Approved",
            "Tags": "infra, naming",
        }
        assert extracted.unknown_keys == []
        assert extracted.duplicate_keys == []

    def test_metadata_line_is_not_a_row(self) -> None:
        extracted = extract_metadata("|Metadata|Header\n|Date|01-02-2023\n|===\n")
        assert "Metadata" not in extracted.fields
        assert extracted.fields == {"Date": "01-02-2023"}

    def test_rows_outside_table_ignored(self) -> None:
        text = "|Date|01-01-2020\n|Metadata|\n|Status|Approved\n|===\n|Tags|late\n"
        assert extract_metadata(text).fields == {"Status": "Approved"}

    def test_only_first_table_is_read(self) -> None:
        text = "|Metadata|\n|Status|Approved\n|===\n|Metadata|\n|Status|Implemented\n|===\n"
        assert extract_metadata(text).fields == {"Status": "Approved"}

    def test_last_duplicate_wins(self) -> None:
        text = "|Metadata|\n|Status|Approved\n|Status|Implemented\n|Status|Implemented\n|===\n"
        extracted = extract_metadata(text)
        assert extracted.fields["Status"] == "Implemented"
        assert extracted.duplicate_keys == ["Status"]

    def test_unknown_keys_reported(self) -> None:
        text = make_adr_text(extra_rows=("|Reviewer|Carol", "|Reviewer|Dan"))
        extracted = extract_metadata(text)
        assert extracted.unknown_keys == ["Reviewer"]
        assert extracted.fields["Reviewer"] == "Dan"

    def test_blank_and_malformed_lines_skipped(self) -> None:
        text = "|Metadata|\n\nplain text\n|Date\n|Tags|a, b\n|===\n"
        assert extract_metadata(text).fields == {"Tags": "a, b"}

    def test_unterminated_table_reads_to_end(self) -> None:
        text = "|Metadata|\n|Author|Alice\n"
        assert extract_metadata(text).fields == {"Author": "Alice"}

    def test_missing_table(self) -> None:
        extracted = extract_metadata("= Title\n\nNo metadata here.\n")
        assert extracted.heading == "Title"
        assert extracted.fields == {}

    def test_crlf_line_endings(self) -> None:
        text = make_adr_text().replace("\n", "\r\n")
        extracted = extract_metadata(text)
        assert extracted.heading == "Adopt X"
        assert extracted.fields["Tags"] == "infra, naming"

    def test_metadata_line_inside_table_skipped(self) -> None:
        extracted = extract_metadata("|Metadata|\n|Date|01-02-2023\n|Metadata|x\n|===\n")
        assert extracted.fields == {"Date": "01-02-2023"}
        assert extracted.unknown_keys == []

    def test_unicode_line_separators_kept_in_values(self) -> None:
        text = "= Use Kafka\n|Metadata|\n|Tags|a\u0085b\n|Author|x y\x0cz\n|===\n"
        extracted = extract_metadata(text)
        assert extracted.heading == "Use Kafka"
        assert extracted.fields == {"Tags": "a\u0085b", "Author": "x y\x0cz"}

    def test_bare_carriage_return_line_endings(self) -> None:
        extracted = extract_metadata("= Title\r|Metadata|\r|Status|Approved\r|===\r")
        assert extracted.heading == "Title"
        assert extracted.fields == {"Status": "Approved"}


class TestIterLines:
    def test_splits_only_on_line_breaks(self) -> None:
        assert list(iter_lines("a\r\nb\rc\nd e\x1cf")) == ["a", "b", "c", "d e\x1cf"]

    def test_trailing_newline(self) -> None:
        assert list(iter_lines("a\n")) == ["a"]
