"""Render report — statistics about a rendered document."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Iterable

from mdiu.formats.base import with_lookahead
from mdiu.formats.list_state import ListState, next_state
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


@dataclass
class RenderReport:
    """Summary of one render run."""

    format_name: str = ""

    # Timing / size
    render_time_seconds: float = 0.0
    output_chars: int = 0

    # Block counts
    text_count: int = 0
    link_count: int = 0
    heading_count: int = 0
    list_item_count: int = 0
    quote_count: int = 0
    preformatted_count: int = 0
    empty_count: int = 0

    # Heading level distribution: {level: count}
    headings_by_level: dict[int, int] = field(default_factory=dict)

    # Runs of two or more consecutive links / list items
    link_runs: int = 0
    list_item_runs: int = 0
    isolated_links: int = 0
    isolated_list_items: int = 0

    # Preformatted blocks carrying alt text
    preformatted_with_alt: int = 0

    # Warnings collected during rendering
    warnings: list[str] = field(default_factory=list)

    @property
    def block_count(self) -> int:
        return (
            self.text_count
            + self.link_count
            + self.heading_count
            + self.list_item_count
            + self.quote_count
            + self.preformatted_count
            + self.empty_count
        )

    def to_json(self, indent: int = 2) -> str:
        """Serialize to JSON string."""
        return json.dumps(self._to_dict(), indent=indent)

    def _to_dict(self) -> dict:
        """Convert to a plain dict for JSON serialization."""
        return {
            "format": self.format_name,
            "render_seconds": round(self.render_time_seconds, 3),
            "output_chars": self.output_chars,
            "block_counts": {
                "total": self.block_count,
                "text": self.text_count,
                "links": self.link_count,
                "headings": self.heading_count,
                "list_items": self.list_item_count,
                "quotes": self.quote_count,
                "preformatted": self.preformatted_count,
                "empty": self.empty_count,
            },
            "headings_by_level": {
                str(k): v for k, v in sorted(self.headings_by_level.items())
            },
            "runs": {
                "links": self.link_runs,
                "list_items": self.list_item_runs,
                "isolated_links": self.isolated_links,
                "isolated_list_items": self.isolated_list_items,
            },
            "warnings": self.warnings,
        }

    @classmethod
    def from_blocks(cls, blocks: Iterable[Block], format_name: str = "") -> RenderReport:
        """Build a report by walking a block sequence once."""
        report = cls(format_name=format_name)
        link_state = ListState.NOT_IN_LIST
        item_state = ListState.NOT_IN_LIST

        for block, following in with_lookahead(blocks):
            if isinstance(block, LinkBlock):
                report.link_count += 1
                link_state = next_state(link_state, isinstance(following, LinkBlock))
                if link_state.opens:
                    report.link_runs += 1
                elif not link_state.is_member:
                    report.isolated_links += 1
            elif isinstance(block, ListItemBlock):
                report.list_item_count += 1
                item_state = next_state(item_state, isinstance(following, ListItemBlock))
                if item_state.opens:
                    report.list_item_runs += 1
                elif not item_state.is_member:
                    report.isolated_list_items += 1
            elif isinstance(block, HeadingBlock):
                report.heading_count += 1
                level = int(block.level)
                report.headings_by_level[level] = report.headings_by_level.get(level, 0) + 1
            elif isinstance(block, TextBlock):
                report.text_count += 1
            elif isinstance(block, QuoteBlock):
                report.quote_count += 1
            elif isinstance(block, PreformattedBlock):
                report.preformatted_count += 1
                if block.preformatted.alt is not None:
                    report.preformatted_with_alt += 1
            elif isinstance(block, EmptyBlock):
                report.empty_count += 1

        return report
