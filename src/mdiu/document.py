"""Document: an append-only builder over a block sequence.

Appenders never validate; raw strings are stored as unchecked Content and
the whole document is checked in one pass by ``validate()``/``build()``.
Every appender returns a new Document, so a prefix can be reused::

    base = Document().h1("my site")
    homepage = base.build()
    article = base.h2("my article").build()
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict

from mdiu.config import Config
from mdiu.exceptions import ContentError
from mdiu.formats.base import Format
from mdiu.formats.factory import get_format
from mdiu.model.content import Content
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

logger = logging.getLogger(__name__)

TextLike = Union[Content, str]


def _content(value: TextLike) -> Content:
    if isinstance(value, Content):
        return value
    return Content.unchecked(value)


class Document(BaseModel):
    """An ordered sequence of blocks under construction."""

    model_config = ConfigDict(frozen=True)

    blocks: tuple[Block, ...] = ()

    def __len__(self) -> int:
        return len(self.blocks)

    # ------------------------------------------------------------------
    # Appenders
    # ------------------------------------------------------------------

    def append(self, block: Block) -> Document:
        """Return a new Document with ``block`` appended."""
        return self.model_copy(update={"blocks": (*self.blocks, block)})

    def text(self, text: TextLike) -> Document:
        return self.append(TextBlock(content=_content(text)))

    def link(self, uri: Any) -> Document:
        """Append a link without a label."""
        return self.append(LinkBlock(link=Link(uri=uri)))

    def link_with_label(self, uri: Any, label: TextLike) -> Document:
        return self.append(LinkBlock(link=Link(uri=uri, label=_content(label))))

    def heading(self, level: HeadingLevel, text: TextLike) -> Document:
        return self.append(HeadingBlock(level=level, content=_content(text)))

    def h1(self, text: TextLike) -> Document:
        return self.heading(HeadingLevel.ONE, text)

    def h2(self, text: TextLike) -> Document:
        return self.heading(HeadingLevel.TWO, text)

    def h3(self, text: TextLike) -> Document:
        return self.heading(HeadingLevel.THREE, text)

    def list_item(self, text: TextLike) -> Document:
        return self.append(ListItemBlock(content=_content(text)))

    def quote(self, text: TextLike) -> Document:
        return self.append(QuoteBlock(content=_content(text)))

    def preformatted(self, text: str) -> Document:
        """Append verbatim text; it may contain line breaks."""
        return self.append(PreformattedBlock(preformatted=Preformatted(text=text)))

    def preformatted_with_alt(self, text: str, alt: TextLike) -> Document:
        return self.append(
            PreformattedBlock(preformatted=Preformatted(text=text, alt=_content(alt)))
        )

    def empty(self) -> Document:
        """Append a blank line."""
        return self.append(EmptyBlock())

    # ------------------------------------------------------------------
    # Validation and output
    # ------------------------------------------------------------------

    def validate(self) -> None:  # type: ignore[override]
        """Check every Content in the document.

        Stops at the first invalid Content.

        Raises:
            ContentError: The first failure, with ``index`` set to the
                position of the offending block.
        """
        for index, block in enumerate(self.blocks):
            for content in block.contents():
                try:
                    content.validate()
                except ContentError as exc:
                    raise exc.at(index) from exc

    def build(self) -> list[Block]:
        """Validate and return the finished blocks.

        Raises:
            ContentError: If any block holds invalid content.
        """
        self.validate()
        logger.debug("Built document with %d blocks", len(self.blocks))
        return list(self.blocks)

    def render(self, fmt: str | Format = "gemtext", config: Optional[Config] = None) -> str:
        """Build the document and render it with the given format."""
        return get_format(fmt, config).render(self.build())

    def to_json(self, **kwargs) -> str:
        """Serialize to JSON string."""
        return self.model_dump_json(indent=2, **kwargs)

    @classmethod
    def from_json(cls, json_str: str) -> Document:
        """Deserialize from JSON string. Content is validated while loading."""
        return cls.model_validate_json(json_str)
