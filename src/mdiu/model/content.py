"""The Content scalar: non-empty text without line breaks."""

from __future__ import annotations

from pydantic import ConfigDict, RootModel, field_validator

from mdiu.exceptions import EmptyContentError, LineBreakError

LINE_BREAKS = ("\n", "\r")


def check_text(text: str) -> None:
    """Raise if ``text`` is not valid content."""
    if not text:
        raise EmptyContentError(text)
    if any(ch in text for ch in LINE_BREAKS):
        raise LineBreakError(text)


class Content(RootModel[str]):
    """A piece of text that is non-empty and free of ``\\n``/``\\r``.

    Line breaks delimit blocks in line-oriented output, so block text must
    not contain them. ``Content("...")`` checks the text and raises
    ``EmptyContentError`` or ``LineBreakError``. ``Content.unchecked`` skips
    the check for text already known to be valid; invalid text passed that
    way renders as broken markup rather than failing.
    """

    model_config = ConfigDict(frozen=True)

    @field_validator("root")
    @classmethod
    def _check_root(cls, value: str) -> str:
        check_text(value)
        return value

    @classmethod
    def unchecked(cls, text: str) -> Content:
        """Build Content without validating ``text``."""
        return cls.model_construct(text)

    def validate(self) -> None:  # type: ignore[override]
        """Re-check the invariants (needed after ``unchecked`` construction)."""
        check_text(self.root)

    @property
    def text(self) -> str:
        return self.root

    def __str__(self) -> str:
        return self.root
