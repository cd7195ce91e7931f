"""List and extract top-level items from Rust source files."""

from .catalog import build_catalog
from .classifier import classify
from .extractor import ItemExtractor
from .locator import locate
from .models import (
    CatalogEntry,
    DeclarationNode,
    Extracted,
    ExtractionRequest,
    ItemKind,
    NotFound,
    Variant,
)
from .rendering import render

__version__ = "0.1.0"

__all__ = [
    "CatalogEntry",
    "DeclarationNode",
    "Extracted",
    "ExtractionRequest",
    "ItemExtractor",
    "ItemKind",
    "NotFound",
    "Variant",
    "build_catalog",
    "classify",
    "locate",
    "render",
]
