"""HTML renderer.

Runs of two or more consecutive links, and runs of two or more consecutive
list items, are wrapped in ``<ul>`` with ``<li>`` members. Links and list
items with no neighbour of their kind are rendered as ``<p>``.
"""

from __future__ import annotations

import logging
from html import escape
from typing import Iterable

from mdiu.formats.base import Format, with_lookahead
from mdiu.formats.list_state import ListState, next_state
from mdiu.model.schema import (
    Block,
    EmptyBlock,
    HeadingBlock,
    Link,
    LinkBlock,
    ListItemBlock,
    PreformattedBlock,
    QuoteBlock,
    TextBlock,
)

logger = logging.getLogger(__name__)


class HtmlFormat(Format):
    """Renders blocks as a fragment of HTML elements, one per line."""

    name = "html"
    extension = ".html"

    def render(self, blocks: Iterable[Block]) -> str:
        parts: list[str] = []
        link_state = ListState.NOT_IN_LIST
        item_state = ListState.NOT_IN_LIST

        for index, (block, following) in enumerate(with_lookahead(blocks)):
            if isinstance(block, LinkBlock):
                link_state = next_state(link_state, isinstance(following, LinkBlock))
                parts.append(self._wrap(link_state, self._link(block.link), index))
            elif isinstance(block, ListItemBlock):
                item_state = next_state(item_state, isinstance(following, ListItemBlock))
                parts.append(self._wrap(item_state, self._text(block.content), index))
            else:
                parts.append(self._render_block(block))

        return "".join(parts)

    def _render_block(self, block: Block) -> str:
        """Render a block that never takes part in a run."""
        if isinstance(block, TextBlock):
            return f"<p>{self._text(block.content)}</p>\n"
        elif isinstance(block, HeadingBlock):
            return f"<h{block.level:d}>{self._text(block.content)}</h{block.level:d}>\n"
        elif isinstance(block, QuoteBlock):
            return f"<blockquote>{self._text(block.content)}</blockquote>\n"
        elif isinstance(block, PreformattedBlock):
            return self._preformatted(block)
        elif isinstance(block, EmptyBlock):
            return ""
        logger.warning("Unknown block type: %s", type(block).__name__)
        return ""

    def _wrap(self, state: ListState, inner: str, index: int) -> str:
        """Wrap a link or list item according to its run state."""
        out = ""
        if state.opens:
            logger.debug("Opening list at block %d", index)
            out += "<ul>\n"

        tag = "li" if state.is_member else "p"
        out += f"<{tag}>{inner}</{tag}>\n"

        if state.closes:
            logger.debug("Closing list at block %d", index)
            out += "</ul>\n"
        return out

    def _link(self, link: Link) -> str:
        uri = self._text(link.uri)
        label = self._text(link.label) if link.label is not None else uri
        return f'<a href="{uri}">{label}</a>'

    def _preformatted(self, block: PreformattedBlock) -> str:
        pre = block.preformatted
        text = self._text(pre.text)
        if self.config.html.emit_pre_alt and pre.alt is not None:
            return f'<pre title="{self._text(pre.alt)}">\n{text}\n</pre>\n'
        return f"<pre>\n{text}\n</pre>\n"

    def _text(self, value: object) -> str:
        text = str(value)
        if self.config.html.escape:
            return escape(text)
        return text
