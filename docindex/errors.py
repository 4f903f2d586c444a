"""
Exceptions raised while reading index files.

Every parse failure is fatal to the file being read: the parser raises one of
these and returns nothing for that file.
"""

from __future__ import annotations


class IndexFormatError(ValueError):
    """
    Base class for malformed index file content.

    Attributes:
        text: The offending text (tag, column or whole line).
        line_number: 1-based line in the source, if known.
        origin: Name of the documentation unit being parsed, if known.
    """

    reason = "malformed index entry"

    def __init__(
        self,
        text: str,
        line_number: int | None = None,
        origin: str | None = None,
    ) -> None:
        self.text = text
        self.line_number = line_number
        self.origin = origin
        super().__init__(self._render())

    def _render(self) -> str:
        message = f"{self.reason}: {self.text!r}"
        if self.origin is not None and self.line_number is not None:
            message = f"{self.origin}:{self.line_number}: {message}"
        elif self.line_number is not None:
            message = f"line {self.line_number}: {message}"
        elif self.origin is not None:
            message = f"{self.origin}: {message}"
        return message

    def locate(self, line_number: int, origin: str) -> IndexFormatError:
        """Attach source position information and refresh the message."""
        self.line_number = line_number
        self.origin = origin
        self.args = (self._render(),)
        return self


class UnknownEntryKind(IndexFormatError):
    """Column 0 is not one of the known kind tags."""

    reason = "unknown index entry kind"

    @property
    def tag(self) -> str:
        return self.text


class MalformedLineNumber(IndexFormatError):
    """Column 5 is not a decimal integer."""

    reason = "malformed line number"


class MalformedRecord(IndexFormatError):
    """A tabbed line with fewer than six columns."""

    reason = "expected 6 tab-separated columns"
