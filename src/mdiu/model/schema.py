"""Pydantic models for document blocks.

A document is a flat, ordered list of blocks. Order is the reading order and
is the only thing renderers use to detect runs of links or list items.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Annotated, Any, Iterator, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from mdiu.model.content import Content


class HeadingLevel(IntEnum):
    ONE = 1
    TWO = 2
    THREE = 3


# ---------------------------------------------------------------------------
# Block payloads
# ---------------------------------------------------------------------------


class Link(BaseModel):
    """A URI with an optional label.

    The URI is opaque: whatever is passed is stored as its string form and
    written out verbatim.
    """

    model_config = ConfigDict(frozen=True)

    uri: str
    label: Optional[Content] = None

    @field_validator("uri", mode="before")
    @classmethod
    def _uri_to_str(cls, value: Any) -> str:
        if isinstance(value, str):
            return value
        if hasattr(value, "geturl"):  # urllib.parse results
            return value.geturl()
        return str(value)


class Preformatted(BaseModel):
    """Verbatim text, which may span several lines, with optional alt text."""

    model_config = ConfigDict(frozen=True)

    text: str
    alt: Optional[Content] = None


# ---------------------------------------------------------------------------
# Block types (discriminated union via `type` field)
# ---------------------------------------------------------------------------


class TextBlock(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["text"] = "text"
    content: Content

    def contents(self) -> Iterator[Content]:
        yield self.content


class LinkBlock(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["link"] = "link"
    link: Link

    def contents(self) -> Iterator[Content]:
        if self.link.label is not None:
            yield self.link.label


class HeadingBlock(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["heading"] = "heading"
    level: HeadingLevel
    content: Content

    def contents(self) -> Iterator[Content]:
        yield self.content


class ListItemBlock(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["list_item"] = "list_item"
    content: Content

    def contents(self) -> Iterator[Content]:
        yield self.content


class QuoteBlock(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["quote"] = "quote"
    content: Content

    def contents(self) -> Iterator[Content]:
        yield self.content


class PreformattedBlock(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["preformatted"] = "preformatted"
    preformatted: Preformatted

    def contents(self) -> Iterator[Content]:
        # The verbatim text is exempt from the Content rules.
        if self.preformatted.alt is not None:
            yield self.preformatted.alt


class EmptyBlock(BaseModel):
    """A blank separator line."""

    model_config = ConfigDict(frozen=True)

    type: Literal["empty"] = "empty"

    def contents(self) -> Iterator[Content]:
        return iter(())


# The closed union of all block types
Block = Annotated[
    Union[
        TextBlock,
        LinkBlock,
        HeadingBlock,
        ListItemBlock,
        QuoteBlock,
        PreformattedBlock,
        EmptyBlock,
    ],
    Field(discriminator="type"),
]
