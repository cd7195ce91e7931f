"""Rendering of a single declaration as a standalone source file."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple

from .formatting import Formatter, RenderError
from .models import DeclarationNode


@dataclass(frozen=True)
class SyntheticFile:
    """A minimal source file assembled from already-parsed items."""

    items: Tuple[DeclarationNode, ...]
    attrs: Tuple[str, ...] = field(default_factory=tuple)
    shebang: Optional[str] = None

    def source(self) -> str:
        parts = []
        if self.shebang:
            parts.append(self.shebang)
        parts.extend(self.attrs)
        parts.extend(item.text.strip("\n") for item in self.items)
        return "\n".join(parts) + "\n"


def render(node: DeclarationNode, formatter: Formatter) -> str:
    """Return ``node`` formatted on its own, without any surrounding file context.

    Formatter failures propagate as ``RenderError``.
    """
    synthetic = SyntheticFile(items=(node,))
    text = formatter.format(synthetic.source())
    if not text.strip():
        raise RenderError(f"{formatter.name} produced no output for '{node.name}'")
    return text


__all__ = ["SyntheticFile", "render"]
