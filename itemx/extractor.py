"""High-level listing and extraction workflows."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from .catalog import build_catalog
from .classifier import LOSSY_KINDS
from .formatting import Formatter, create_formatter
from .locator import locate
from .logging import get_logger
from .models import (
    CatalogEntry,
    DeclarationNode,
    Extracted,
    ExtractionOutcome,
    ExtractionRequest,
    NotFound,
)
from .parsing import RustParser
from .rendering import render
from .source import read_source

_LOGGER = get_logger("extractor")

MACRO_WARNING = (
    "macro items are rendered from their token stream; "
    "the output might be mangled and may not parse as standalone source"
)


class ItemExtractor:
    """Lists and extracts top-level items from Rust source files.

    Each call reads and parses its input afresh; nothing is cached between
    calls.
    """

    def __init__(
        self,
        parser: Optional[RustParser] = None,
        formatter: Optional[Formatter] = None,
    ) -> None:
        self._parser = parser or RustParser()
        self._formatter = formatter or create_formatter()

    @property
    def formatter(self) -> Formatter:
        return self._formatter

    def load(self, path: Path | str) -> List[DeclarationNode]:
        """Read and parse ``path`` into its top-level declarations."""
        source = read_source(path)
        return self._parser.parse(source, origin=str(path))

    def list_items(self, path: Path | str) -> List[CatalogEntry]:
        return build_catalog(self.load(path))

    def catalog_source(self, source: str) -> List[CatalogEntry]:
        return build_catalog(self._parser.parse(source))

    def extract(self, path: Path | str, request: ExtractionRequest) -> ExtractionOutcome:
        """Locate ``request`` in ``path`` and render it on its own."""
        return self._extract_from(self.load(path), request)

    def extract_source(self, source: str, request: ExtractionRequest) -> ExtractionOutcome:
        return self._extract_from(self._parser.parse(source), request)

    def _extract_from(
        self, declarations: List[DeclarationNode], request: ExtractionRequest
    ) -> ExtractionOutcome:
        node = locate(declarations, request.kind, request.name)
        if node is None:
            _LOGGER.debug("No %s named '%s'", request.kind.label, request.name)
            return NotFound(request=request)
        _LOGGER.debug(
            "Found %s '%s' at lines %d-%d",
            request.kind.label,
            request.name,
            node.start_line,
            node.end_line,
        )
        text = render(node, self._formatter)
        warnings = (MACRO_WARNING,) if request.kind in LOSSY_KINDS else ()
        return Extracted(request=request, declaration=node, text=text, warnings=warnings)


__all__ = ["ItemExtractor", "MACRO_WARNING"]
