"""Format factory: selects a renderer by name or file extension."""

from __future__ import annotations

from pathlib import Path

from mdiu.config import Config
from mdiu.exceptions import UnknownFormatError
from mdiu.formats.base import Format
from mdiu.formats.gemtext import GemtextFormat
from mdiu.formats.html import HtmlFormat
from mdiu.formats.markdown import MarkdownFormat

FORMATS: dict[str, type[Format]] = {
    GemtextFormat.name: GemtextFormat,
    HtmlFormat.name: HtmlFormat,
    MarkdownFormat.name: MarkdownFormat,
}

_ALIASES = {
    "gmi": GemtextFormat.name,
    "md": MarkdownFormat.name,
    "htm": HtmlFormat.name,
}


def available_formats() -> list[str]:
    """Return the names of all formats, in a stable order."""
    return sorted(FORMATS)


def get_format(name: str | Format, config: Config | None = None) -> Format:
    """Create a format instance.

    Args:
        name: Format name (``gemtext``, ``html``, ``markdown``), an alias
              (``gmi``, ``md``, ``htm``) or a file extension (``.gmi``).
              A Format instance is returned unchanged.
        config: Renderer configuration. Uses default if None.

    Returns:
        A Format implementation.

    Raises:
        UnknownFormatError: If the name is not recognised.
    """
    if isinstance(name, Format):
        return name

    key = name.strip().lower().lstrip(".")
    key = _ALIASES.get(key, key)
    try:
        format_cls = FORMATS[key]
    except KeyError:
        raise UnknownFormatError(
            f"Unknown format: '{name}'. Available: {', '.join(available_formats())}"
        ) from None
    return format_cls(config)


def format_for_path(path: Path, config: Config | None = None) -> Format:
    """Pick a format from the suffix of an output path."""
    suffix = Path(path).suffix
    if not suffix:
        raise UnknownFormatError(f"Cannot infer a format from '{path}': no file extension")
    return get_format(suffix, config)
