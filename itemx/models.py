"""Core data models shared across itemx components."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple, Union


class InvalidRequestError(ValueError):
    """Raised when an extraction request names an unknown item kind."""


class Variant(Enum):
    """Top-level item shapes produced by the parser."""

    FUNCTION = "function"
    STRUCT = "struct"
    ENUM = "enum"
    TRAIT = "trait"
    CONST = "const"
    EXTERN_CRATE = "extern_crate"
    STATIC = "static"
    TYPE = "type"
    UNION = "union"
    MACRO = "macro"
    OTHER = "other"


class ItemKind(str, Enum):
    """Kind labels used for listing and matching items."""

    FUNCTION = "fn"
    STRUCT = "struct"
    ENUM = "enum"
    TRAIT = "trait"
    CONST = "const"
    EXTERN_CRATE = "extern crate"
    STATIC = "static"
    TYPE = "type"
    UNION = "union"
    MACRO = "macro"

    @property
    def label(self) -> str:
        return self.value

    @classmethod
    def from_label(cls, label: Union[str, "ItemKind"]) -> "ItemKind":
        """Return the kind for ``label``, accepting an existing member as-is."""
        if isinstance(label, ItemKind):
            return label
        try:
            return cls(label)
        except ValueError:
            known = ", ".join(f"'{kind.value}'" for kind in cls)
            raise InvalidRequestError(
                f"Unknown item kind '{label}' (expected one of {known})"
            ) from None


@dataclass(frozen=True)
class DeclarationNode:
    """One top-level item of a parsed source file.

    ``text`` holds the item's own source, including outer attributes and doc
    comments directly attached to it. The core only reads ``variant`` and
    ``name``; the text is carried along for rendering.
    """

    variant: Variant
    name: Optional[str]
    text: str
    node_type: str
    start_line: int
    end_line: int


@dataclass(frozen=True)
class CatalogEntry:
    """A classified item as shown in listings."""

    kind: ItemKind
    name: str

    def as_dict(self) -> dict[str, str]:
        return {"kind": self.kind.label, "name": self.name}


@dataclass(frozen=True)
class ExtractionRequest:
    """Kind and exact identifier of the item to extract."""

    kind: ItemKind
    name: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "kind", ItemKind.from_label(self.kind))
        if not self.name:
            raise InvalidRequestError("Item name must not be empty")


@dataclass(frozen=True)
class Extracted:
    """Successful extraction of a single item."""

    request: ExtractionRequest
    declaration: DeclarationNode
    text: str
    warnings: Tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class NotFound:
    """No item matched the request's kind and name."""

    request: ExtractionRequest


ExtractionOutcome = Union[Extracted, NotFound]


__all__ = [
    "CatalogEntry",
    "DeclarationNode",
    "Extracted",
    "ExtractionOutcome",
    "ExtractionRequest",
    "InvalidRequestError",
    "ItemKind",
    "NotFound",
    "Variant",
]
