"""
Exceptions raised while building the ADR index.

Every error is fatal for the run: the batch driver lets them propagate and
the entry point turns them into a non-zero exit with the formatted message.
"""

from __future__ import annotations

from typing import List, Optional, Sequence


class AdrIndexError(Exception):
    """Base exception for ADR index failures."""

    def __init__(
        self,
        message: str,
        source_path: Optional[str] = None,
        field: Optional[str] = None,
    ) -> None:
        """
        Initialize the error.

        Args:
            message: Error description
            source_path: Document that caused the error, if any
            field: Metadata field that failed validation, if any
        """
        super().__init__(message)
        self.message = message
        self.source_path = source_path
        self.field = field
        self.related: List[AdrIndexError] = []

    @property
    def errors(self) -> List[AdrIndexError]:
        """This error followed by any further failures found in the same document."""
        return [self, *self.related]

    @property
    def fields(self) -> List[str]:
        return [error.field or "filename" for error in self.errors]

    def _describe(self) -> str:
        if self.field:
            return f"{self.message} (field: {self.field})"
        return self.message

    def __str__(self) -> str:
        msg = self._describe()
        if self.source_path:
            msg = f"{msg} in {self.source_path}"
        if self.related:
            msg += "; also: " + "; ".join(error._describe() for error in self.related)
        return msg


class DocumentReadError(AdrIndexError):
    """Raised when a document or the ADR directory cannot be read."""


class InvalidFilenameError(AdrIndexError):
    """Raised when a file name does not follow the `<n>-<slug>` convention."""

    def __init__(self, filename: str, source_path: Optional[str] = None) -> None:
        super().__init__(f"invalid filename {filename!r}", source_path)
        self.filename = filename


class InvalidSequenceError(AdrIndexError):
    """Raised when the leading file name segment is not a positive integer."""

    def __init__(self, segment: str, source_path: Optional[str] = None) -> None:
        super().__init__(f"invalid file sequence {segment!r}", source_path)
        self.segment = segment


class MissingDateError(AdrIndexError):
    def __init__(self, source_path: Optional[str] = None) -> None:
        super().__init__("date is required", source_path, field="Date")


class InvalidDateError(AdrIndexError):
    def __init__(self, value: str, source_path: Optional[str] = None) -> None:
        super().__init__(
            f"invalid date {value!r}, not DD-MM-YYYY", source_path, field="Date"
        )
        self.value = value


class MissingAuthorsError(AdrIndexError):
    def __init__(self, source_path: Optional[str] = None) -> None:
        super().__init__("authors is required", source_path, field="Author")


class InvalidStatusError(AdrIndexError):
    """Raised when the status is not one of the recognized values."""

    def __init__(
        self,
        value: str,
        valid_statuses: Sequence[str],
        source_path: Optional[str] = None,
    ) -> None:
        super().__init__(
            f"invalid status {value!r}, must be one of: {', '.join(valid_statuses)}",
            source_path,
            field="Status",
        )
        self.value = value
        self.valid_statuses = list(valid_statuses)


class MissingTagsError(AdrIndexError):
    def __init__(self, source_path: Optional[str] = None) -> None:
        super().__init__("tags is required", source_path, field="Tags")


class DuplicateSequenceError(AdrIndexError):
    """Raised when two documents resolve to the same sequence number."""

    def __init__(self, sequence_number: int, first_path: str, second_path: str) -> None:
        super().__init__(
            f"duplicate index {sequence_number}, conflict between "
            f"{second_path} and {first_path}"
        )
        self.sequence_number = sequence_number
        self.first_path = first_path
        self.second_path = second_path


class RenderError(AdrIndexError):
    """Raised when the rendered index cannot be written."""
