"""Formatter that keeps the item's original layout."""

from __future__ import annotations

from .base import Formatter


class VerbatimFormatter(Formatter):
    """Emits source exactly as written, trimmed of surrounding blank lines.

    Used when rustfmt is unavailable. Line contents, including trailing
    whitespace inside multi-line literals, are left untouched.
    """

    name = "verbatim"

    def format(self, source: str) -> str:
        text = source.strip("\n")
        return f"{text}\n" if text.strip() else ""
