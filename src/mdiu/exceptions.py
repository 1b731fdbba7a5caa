"""Exception hierarchy for mdiu."""

from __future__ import annotations

from enum import Enum
from typing import Optional


class MdiuError(Exception):
    """Base exception for all mdiu errors."""


class ContentErrorKind(str, Enum):
    EMPTY = "empty"
    CONTAINS_LINE_BREAK = "contains_line_break"


class ContentError(MdiuError):
    """Raised when text does not satisfy the Content invariants.

    ``index`` is the position of the offending block when the error is
    raised while validating a whole document, otherwise None.
    """

    kind: ContentErrorKind
    message = "Invalid content"

    def __init__(self, text: str = "", index: Optional[int] = None):
        self.text = text
        self.index = index
        detail = self.message
        if index is not None:
            detail = f"{detail} (block {index})"
        super().__init__(detail)

    def at(self, index: int) -> ContentError:
        """Return a copy of this error pointing at block ``index``."""
        return type(self)(self.text, index=index)


class EmptyContentError(ContentError):
    """Raised when content is empty."""

    kind = ContentErrorKind.EMPTY
    message = "Content is empty"


class LineBreakError(ContentError):
    """Raised when content contains a line break character."""

    kind = ContentErrorKind.CONTAINS_LINE_BREAK
    message = "Content contains line break characters"


class UnknownFormatError(MdiuError):
    """Raised when a format name or file extension is not recognised."""


class ConfigError(MdiuError):
    """Raised when configuration is invalid or missing."""


class DocumentLoadError(MdiuError):
    """Raised when a serialized document cannot be read."""


class OutputError(MdiuError):
    """Raised when rendered output cannot be written."""
