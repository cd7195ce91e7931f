"""Catalog of the classifiable items in a file."""

from __future__ import annotations

from typing import Iterable, List

from .classifier import classify
from .models import CatalogEntry, DeclarationNode


def build_catalog(declarations: Iterable[DeclarationNode]) -> List[CatalogEntry]:
    """Return one entry per classifiable declaration, in source order.

    Repeated ``(kind, name)`` pairs are kept as they appear.
    """
    entries: List[CatalogEntry] = []
    for node in declarations:
        info = classify(node)
        if info is None:
            continue
        kind, name = info
        entries.append(CatalogEntry(kind=kind, name=name))
    return entries


__all__ = ["build_catalog"]
