"""Gemtext renderer: one line per block."""

from __future__ import annotations

import logging
from typing import Iterable

from mdiu.formats.base import Format
from mdiu.model.schema import (
    Block,
    EmptyBlock,
    HeadingBlock,
    LinkBlock,
    ListItemBlock,
    PreformattedBlock,
    QuoteBlock,
    TextBlock,
)

logger = logging.getLogger(__name__)

PREFORMATTED_FENCE = "```"


class GemtextFormat(Format):
    """Renders blocks as gemtext. No grouping: every block stands alone."""

    name = "gemtext"
    extension = ".gmi"

    def render(self, blocks: Iterable[Block]) -> str:
        lines = [self._render_block(block) for block in blocks]
        logger.debug("Rendered %d blocks as gemtext", len(lines))
        return "".join(lines)

    def _render_block(self, block: Block) -> str:
        if isinstance(block, TextBlock):
            return f"{block.content}\n"
        elif isinstance(block, LinkBlock):
            if block.link.label is not None:
                return f"=> {block.link.uri} {block.link.label}\n"
            return f"=> {block.link.uri}\n"
        elif isinstance(block, HeadingBlock):
            return f"{'#' * block.level} {block.content}\n"
        elif isinstance(block, ListItemBlock):
            return f"* {block.content}\n"
        elif isinstance(block, QuoteBlock):
            return f"> {block.content}\n"
        elif isinstance(block, PreformattedBlock):
            pre = block.preformatted
            alt = str(pre.alt) if pre.alt is not None else ""
            return f"{PREFORMATTED_FENCE}{alt}\n{pre.text}\n{PREFORMATTED_FENCE}\n"
        elif isinstance(block, EmptyBlock):
            return "\n"
        logger.warning("Unknown block type: %s", type(block).__name__)
        return ""
