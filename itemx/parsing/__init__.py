"""Source parsers producing top-level declaration nodes."""

from .rust import ParseError, RustParser

__all__ = ["ParseError", "RustParser"]
