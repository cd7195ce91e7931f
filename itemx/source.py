"""Source file access for itemx."""

from __future__ import annotations

from pathlib import Path


class InputError(RuntimeError):
    """Raised when a source file cannot be read or parsed."""


def read_source(path: Path | str) -> str:
    """Return the UTF-8 text of ``path``."""
    source_path = Path(path)
    try:
        return source_path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise InputError(f"{source_path} is not valid UTF-8: {exc.reason}") from exc
    except OSError as exc:
        reason = exc.strerror or str(exc)
        raise InputError(f"Cannot read {source_path}: {reason}") from exc


__all__ = ["InputError", "read_source"]
