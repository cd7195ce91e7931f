"""Mapping from declaration variants to kind labels."""

from __future__ import annotations

from typing import Dict, Optional, Tuple

from .models import DeclarationNode, ItemKind, Variant

# One row per named variant. Keep this table total over the named variants
# and injective; ``Variant.OTHER`` is deliberately absent.
KIND_TABLE: Dict[Variant, ItemKind] = {
    Variant.FUNCTION: ItemKind.FUNCTION,
    Variant.STRUCT: ItemKind.STRUCT,
    Variant.ENUM: ItemKind.ENUM,
    Variant.TRAIT: ItemKind.TRAIT,
    Variant.CONST: ItemKind.CONST,
    Variant.EXTERN_CRATE: ItemKind.EXTERN_CRATE,
    Variant.STATIC: ItemKind.STATIC,
    Variant.TYPE: ItemKind.TYPE,
    Variant.UNION: ItemKind.UNION,
    Variant.MACRO: ItemKind.MACRO,
}

# Kinds whose rendered output may not parse back as standalone source.
LOSSY_KINDS = frozenset({ItemKind.MACRO})


def classify(node: DeclarationNode) -> Optional[Tuple[ItemKind, str]]:
    """Return ``(kind, identifier)`` for a named item, ``None`` otherwise.

    Anonymous macro invocations have no identifier and are never classified,
    so they can be neither listed nor extracted.
    """
    kind = KIND_TABLE.get(node.variant)
    if kind is None or not node.name:
        return None
    return kind, node.name


__all__ = ["KIND_TABLE", "LOSSY_KINDS", "classify"]
