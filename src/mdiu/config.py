"""YAML-backed configuration for the renderers."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml

from mdiu.exceptions import ConfigError


@dataclass
class HtmlConfig:
    """HTML output options."""

    escape: bool = False  # escape &, <, > and quotes in text and URIs
    emit_pre_alt: bool = False  # alt text as a title attribute on <pre>


@dataclass
class MarkdownConfig:
    """Markdown output options."""

    code_indent: int = 4


@dataclass
class Config:
    """Top-level renderer configuration."""

    html: HtmlConfig = field(default_factory=HtmlConfig)
    markdown: MarkdownConfig = field(default_factory=MarkdownConfig)
    verbose: bool = False

    @classmethod
    def from_yaml(cls, path: Path) -> Config:
        """Load configuration from a YAML file."""
        try:
            text = path.read_text(encoding="utf-8")
            data = yaml.safe_load(text) or {}
        except FileNotFoundError:
            raise ConfigError(f"Config file not found: {path}")
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML in {path}: {exc}")

        return cls._from_dict(data)

    @classmethod
    def from_yaml_string(cls, text: str) -> Config:
        """Load configuration from a YAML string."""
        try:
            data = yaml.safe_load(text) or {}
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML: {exc}")
        return cls._from_dict(data)

    @classmethod
    def _from_dict(cls, data: dict) -> Config:
        if not isinstance(data, dict):
            raise ConfigError(f"Expected a mapping at top level, got {type(data).__name__}")

        html_data = data.get("html") or {}
        markdown_data = data.get("markdown") or {}

        config = cls(
            html=HtmlConfig(**{k: v for k, v in html_data.items() if k in HtmlConfig.__dataclass_fields__}),
            markdown=MarkdownConfig(
                **{k: v for k, v in markdown_data.items() if k in MarkdownConfig.__dataclass_fields__}
            ),
            verbose=data.get("verbose", False),
        )
        if not isinstance(config.markdown.code_indent, int) or config.markdown.code_indent < 0:
            raise ConfigError(
                f"markdown.code_indent must be a non-negative integer, got {config.markdown.code_indent!r}"
            )
        return config

    @classmethod
    def default(cls) -> Config:
        """Return the default configuration."""
        return cls()

    @classmethod
    def load(cls, path: Optional[Path] = None) -> Config:
        """Load config from path, or return defaults if path is None."""
        if path is None:
            return cls.default()
        return cls.from_yaml(path)
