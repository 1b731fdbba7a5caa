"""Build documents from typed blocks and render them as gemtext, HTML or Markdown."""

from __future__ import annotations

from typing import Iterable

from mdiu.config import Config
from mdiu.document import Document
from mdiu.exceptions import (
    ConfigError,
    ContentError,
    ContentErrorKind,
    DocumentLoadError,
    EmptyContentError,
    LineBreakError,
    MdiuError,
    OutputError,
    UnknownFormatError,
)
from mdiu.formats import (
    Format,
    GemtextFormat,
    HtmlFormat,
    MarkdownFormat,
    available_formats,
    get_format,
)
from mdiu.model import (
    Block,
    Content,
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

__version__ = "0.3.0"


def render(blocks: Iterable[Block], fmt: str | Format = "gemtext", config: Config | None = None) -> str:
    """Render ``blocks`` with the named format.

    >>> render(Document().h1("my site").build())
    '# my site\\n'
    """
    return get_format(fmt, config).render(blocks)


__all__ = [
    "Block",
    "Config",
    "ConfigError",
    "Content",
    "ContentError",
    "ContentErrorKind",
    "Document",
    "DocumentLoadError",
    "EmptyBlock",
    "EmptyContentError",
    "Format",
    "GemtextFormat",
    "HeadingBlock",
    "HeadingLevel",
    "HtmlFormat",
    "LineBreakError",
    "Link",
    "LinkBlock",
    "ListItemBlock",
    "MarkdownFormat",
    "MdiuError",
    "OutputError",
    "Preformatted",
    "PreformattedBlock",
    "QuoteBlock",
    "TextBlock",
    "UnknownFormatError",
    "__version__",
    "available_formats",
    "get_format",
    "render",
]
