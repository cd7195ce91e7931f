"""Base classes for source formatters."""

from abc import ABC, abstractmethod


class RenderError(RuntimeError):
    """Raised when a formatter cannot render the given source."""


class Formatter(ABC):
    """Contract for services that turn Rust source into formatted text."""

    name = "formatter"

    @abstractmethod
    def format(self, source: str) -> str:
        """Return deterministic, formatted text for ``source``."""
