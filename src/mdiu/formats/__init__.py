"""Output formats."""

from mdiu.formats.base import Format
from mdiu.formats.factory import available_formats, format_for_path, get_format
from mdiu.formats.gemtext import GemtextFormat
from mdiu.formats.html import HtmlFormat
from mdiu.formats.list_state import ListState, next_state
from mdiu.formats.markdown import MarkdownFormat

__all__ = [
    "Format",
    "GemtextFormat",
    "HtmlFormat",
    "ListState",
    "MarkdownFormat",
    "available_formats",
    "format_for_path",
    "get_format",
    "next_state",
]
