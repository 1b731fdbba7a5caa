"""Pipeline orchestrator: load → validate → render → write.

Works on documents saved as JSON (see ``Document.to_json``) and provides
convenience methods for partial workflows (validate-only, render-to-string).
"""

from __future__ import annotations

import logging
import time
from pathlib import Path

from pydantic import ValidationError

from mdiu.config import Config
from mdiu.document import Document
from mdiu.exceptions import DocumentLoadError, OutputError
from mdiu.formats.base import Format
from mdiu.formats.factory import format_for_path, get_format
from mdiu.model.report import RenderReport

logger = logging.getLogger(__name__)


class Pipeline:
    """Orchestrates document JSON → rendered text conversion."""

    def __init__(self, config: Config | None = None):
        self.config = config or Config.default()
        self.last_report: RenderReport | None = None

    def load(self, path: Path) -> Document:
        """Load a document from a JSON file.

        Raises:
            DocumentLoadError: If the file is missing or is not a valid
                document.
            ContentError: If a block holds invalid content.
        """
        path = Path(path)
        logger.info("Loading document from %s", path)
        try:
            json_str = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            raise DocumentLoadError(f"Document file not found: {path}")
        except (OSError, UnicodeDecodeError) as exc:
            raise DocumentLoadError(f"Failed to read {path}: {exc}") from exc

        try:
            return Document.from_json(json_str)
        except ValidationError as exc:
            raise DocumentLoadError(f"Invalid document in {path}: {exc}") from exc

    def render(self, document: Document, fmt: str | Format = "gemtext") -> str:
        """Validate and render a document, recording a report.

        Args:
            document: The document to render.
            fmt: Format name, extension or instance.

        Returns:
            The rendered text.
        """
        renderer = get_format(fmt, self.config)
        blocks = document.build()

        t0 = time.monotonic()
        output = renderer.render(blocks)
        t1 = time.monotonic()

        report = RenderReport.from_blocks(blocks, format_name=renderer.name)
        report.render_time_seconds = t1 - t0
        report.output_chars = len(output)
        if (
            renderer.name == "html"
            and report.preformatted_with_alt
            and not self.config.html.emit_pre_alt
        ):
            report.warnings.append(
                f"Alt text of {report.preformatted_with_alt} preformatted block(s) "
                "is not included in HTML output"
            )
        for warning in report.warnings:
            logger.warning(warning)
        self.last_report = report

        logger.debug("Rendered %d blocks as %s", len(blocks), renderer.name)
        return output

    def convert(
        self,
        input_path: Path,
        output_path: Path,
        fmt: str | None = None,
        save_report: bool = False,
        report_path: Path | None = None,
    ) -> Path:
        """Full pipeline: document JSON → rendered file.

        Args:
            input_path: Input document JSON file.
            output_path: Output file.
            fmt: Format name. Defaults to the format matching the output
                 file's extension.
            save_report: Whether to save a render report JSON.
            report_path: Custom path for report JSON. Defaults to {output_stem}.report.json.

        Returns:
            Path to the rendered file.

        Raises:
            DocumentLoadError: If the input cannot be read.
            OutputError: If the output or report cannot be written.
        """
        input_path = Path(input_path)
        output_path = Path(output_path)

        document = self.load(input_path)
        renderer = get_format(fmt, self.config) if fmt else format_for_path(output_path, self.config)
        output = self.render(document, renderer)

        logger.info("Writing %s", output_path)
        try:
            output_path.write_text(output, encoding="utf-8")
        except OSError as exc:
            raise OutputError(f"Failed to write {output_path}: {exc}") from exc

        if save_report and self.last_report is not None:
            if report_path is None:
                report_path = output_path.with_suffix(".report.json")
            try:
                Path(report_path).write_text(self.last_report.to_json(), encoding="utf-8")
            except OSError as exc:
                raise OutputError(f"Failed to write {report_path}: {exc}") from exc
            logger.info("Saved report to %s", report_path)

        return output_path

    @staticmethod
    def save(document: Document, path: Path) -> Path:
        """Save a document to a JSON file.

        Returns:
            The path written to.
        """
        path = Path(path)
        logger.info("Saving document to %s", path)
        path.write_text(document.to_json(), encoding="utf-8")
        return path
