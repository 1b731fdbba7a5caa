"""Document model."""

from mdiu.model.content import Content, check_text
from mdiu.model.schema import (
    Block,
    EmptyBlock,
    HeadingBlock,
    HeadingLevel,
    Link,
    LinkBlock,
    ListItemBlock,
    Preformatted,
    PreformattedBlock,
    QuoteBlock,
    TextBlock,
)

__all__ = [
    "Block",
    "Content",
    "EmptyBlock",
    "HeadingBlock",
    "HeadingLevel",
    "Link",
    "LinkBlock",
    "ListItemBlock",
    "Preformatted",
    "PreformattedBlock",
    "QuoteBlock",
    "TextBlock",
    "check_text",
]
