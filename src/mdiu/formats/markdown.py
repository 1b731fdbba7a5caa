"""Markdown renderer.

Paragraph-like blocks are separated by a blank line. Runs of links or list
items are written as a bullet list with no blank lines between members and
one blank line after the run. A link with no neighbouring link is written
as a plain inline link paragraph.
"""

from __future__ import annotations

import logging
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

BULLET = "* "


class MarkdownFormat(Format):
    """Renders blocks as Markdown 1.0.1."""

    name = "markdown"
    extension = ".md"

    def render(self, blocks: Iterable[Block]) -> str:
        parts: list[str] = []
        link_state = ListState.NOT_IN_LIST
        item_state = ListState.NOT_IN_LIST

        for block, following in with_lookahead(blocks):
            if isinstance(block, LinkBlock):
                link_state = next_state(link_state, isinstance(following, LinkBlock))
                text = _link(block.link)
                if link_state.is_member:
                    text = BULLET + text
                parts.append(_terminate(link_state, text))
            elif isinstance(block, ListItemBlock):
                item_state = next_state(item_state, isinstance(following, ListItemBlock))
                parts.append(_terminate(item_state, f"{BULLET}{block.content}"))
            else:
                parts.append(self._render_block(block))

        out = "".join(parts)
        # Every block ends in a blank line; keep a single final newline.
        if out.endswith("\n\n"):
            out = out[:-1]
        return out

    def _render_block(self, block: Block) -> str:
        if isinstance(block, TextBlock):
            return f"{block.content}\n\n"
        elif isinstance(block, HeadingBlock):
            return f"{'#' * block.level} {block.content}\n\n"
        elif isinstance(block, QuoteBlock):
            return f"> {block.content}\n\n"
        elif isinstance(block, PreformattedBlock):
            indent = " " * self.config.markdown.code_indent
            lines = _lines(block.preformatted.text)
            return "\n".join(indent + line for line in lines) + "\n\n"
        elif isinstance(block, EmptyBlock):
            return ""
        logger.warning("Unknown block type: %s", type(block).__name__)
        return ""


def _link(link: Link) -> str:
    # Markdown 1.0.1 autolinks don't work for relative URIs, so a bare link
    # uses its URI as the label.
    label = link.label if link.label is not None else link.uri
    return f"[{label}]({link.uri})"


def _lines(text: str) -> list[str]:
    r"""Split on "\n" only, dropping one trailing "\r" per line and a final empty line."""
    lines = [line[:-1] if line.endswith("\r") else line for line in text.split("\n")]
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def _terminate(state: ListState, line: str) -> str:
    if state.is_member and not state.closes:
        return f"{line}\n"
    return f"{line}\n\n"
