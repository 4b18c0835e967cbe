"""
Editing workspace around the neon engine.

A NeonWorkspace holds the original document, the current options and the
latest result, the way the browser front-end does:

- Every run starts from the original text, never from the previous output
- A fatal error keeps the original visible as ``processed_svg`` and stores a
  user-facing message in ``error``
- With ``process_async()`` only the newest request may publish its result;
  results of superseded requests are dropped

Example:
    >>> ws = NeonWorkspace()
    >>> _ = ws.load('<svg xmlns="http://www.w3.org/2000/svg"><rect width="4" height="4" fill="red"/></svg>')
    >>> _ = ws.set_options(color='#ffbf00')
    >>> 'data-neon-clone' in ws.processed_svg
    True
"""

from __future__ import annotations

import asyncio
import logging
import os
from typing import Any

from .exceptions import NeonError
from .export import package_export
from .ingest import read_svg_file
from .options import DEFAULT_OPTIONS, ExportOptions, NeonOptions, ProcessResult, get_preset
from .processor import process

logger = logging.getLogger(__name__)


class NeonWorkspace:
    """Original document, options and latest result of one editing session."""

    def __init__(self, options: NeonOptions | None = None):
        self.options: NeonOptions = options or DEFAULT_OPTIONS
        self.original_svg: str | None = None
        self.processed_svg: str | None = None
        self.warnings: list[str] = []
        self.error: str | None = None
        self.is_loading: bool = False
        self._generation = 0

    @property
    def has_content(self) -> bool:
        return self.original_svg is not None

    # =========================================================================
    # Document
    # =========================================================================

    def load(self, svg_text: str) -> ProcessResult | None:
        """Replace the original document and process it."""
        self.original_svg = svg_text
        self.error = None
        return self.process()

    def load_file(self, path: str | os.PathLike) -> ProcessResult | None:
        """Read an SVG file and process it."""
        try:
            svg_text = read_svg_file(path)
        except (OSError, NeonError) as e:
            self.error = f"Failed to read the file: {e}"
            logger.warning(self.error)
            return None
        return self.load(svg_text)

    def clear(self) -> None:
        """Drop the document and reset the options to their defaults."""
        self._generation += 1
        self.original_svg = None
        self.processed_svg = None
        self.warnings = []
        self.error = None
        self.is_loading = False
        self.options = DEFAULT_OPTIONS

    # =========================================================================
    # Options
    # =========================================================================

    def set_options(self, **changes: Any) -> ProcessResult | None:
        """Change options and reprocess the original document."""
        self.options = self.options.with_changes(**changes)
        return self.process()

    def apply_preset(self, name: str) -> ProcessResult | None:
        """Use the color of a named preset as glow color."""
        return self.set_options(color=get_preset(name).color)

    # =========================================================================
    # Processing
    # =========================================================================

    def _publish(self, source: str, options: NeonOptions) -> ProcessResult | None:
        self.error = None
        self.warnings = []
        try:
            result = process(source, options)
        except NeonError as e:
            self.error = f"Processing Error: {e}"
            self.processed_svg = source  # Show the original on error
            logger.warning(self.error)
            return None
        self.processed_svg = result.svg
        self.warnings = list(result.warnings)
        return result

    def process(self) -> ProcessResult | None:
        """Process the original document with the current options."""
        if self.original_svg is None:
            return None
        self._generation += 1
        return self._publish(self.original_svg, self.options)

    async def process_async(self) -> ProcessResult | None:
        """
        Process after yielding to the event loop once.

        The yield lets a loading indicator render before the synchronous
        engine runs. If another request was started meanwhile, this one's
        result is discarded and None is returned.
        """
        if self.original_svg is None:
            return None
        self._generation += 1
        generation = self._generation
        source, options = self.original_svg, self.options

        self.is_loading = True
        await asyncio.sleep(0)
        if generation != self._generation:
            logger.debug(f"Discarding superseded request {generation}")
            return None

        try:
            return self._publish(source, options)
        finally:
            self.is_loading = False

    # =========================================================================
    # Export
    # =========================================================================

    def export(self, options: ExportOptions | None = None, background: bytes | None = None) -> str | None:
        """
        Document for download.

        Without export options the processed document is returned as is.
        """
        if self.processed_svg is None:
            return None
        if options is None:
            return self.processed_svg
        return package_export(self.processed_svg, options, background)
