"""Formatter implementations and selection."""

from __future__ import annotations

from typing import Callable, Dict

from ..config import ConfigError, ExtractorConfig
from ..logging import get_logger
from .base import Formatter, RenderError
from .rustfmt import RustfmtFormatter
from .verbatim import VerbatimFormatter

_LOGGER = get_logger("formatting")

_BUILTIN_FACTORIES: Dict[str, Callable[[ExtractorConfig], Formatter]] = {
    "rustfmt": lambda config: RustfmtFormatter(config.rustfmt_path, edition=config.edition),
    "verbatim": lambda config: VerbatimFormatter(),
}


def create_formatter(config: ExtractorConfig | None = None) -> Formatter:
    """Return the formatter selected by ``config`` (rustfmt by default)."""
    config = config or ExtractorConfig()
    factory = _BUILTIN_FACTORIES.get(config.formatter)
    if factory is None:
        known = ", ".join(sorted(_BUILTIN_FACTORIES))
        raise ConfigError(f"Unknown formatter '{config.formatter}' (expected one of {known})")
    formatter = factory(config)
    _LOGGER.debug("Using %s formatter", formatter.name)
    return formatter


__all__ = [
    "Formatter",
    "RenderError",
    "RustfmtFormatter",
    "VerbatimFormatter",
    "create_formatter",
]
