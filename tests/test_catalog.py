"""Tests for catalog construction."""

from __future__ import annotations

from itemx.catalog import build_catalog
from itemx.models import CatalogEntry, ItemKind
from tests._fixtures.source_builder import SourceBuilder


def test_catalog_lists_items_in_source_order(source_builder: SourceBuilder) -> None:
    declarations = source_builder.parse(
        """
        fn add(a: T, b: T) -> T { a + b }
        struct Point { x: T, y: T }
        """
    )

    assert build_catalog(declarations) == [
        CatalogEntry(ItemKind.FUNCTION, "add"),
        CatalogEntry(ItemKind.STRUCT, "Point"),
    ]


def test_catalog_keeps_duplicates_and_skips_unnamed_items(
    source_builder: SourceBuilder,
) -> None:
    declarations = source_builder.parse(
        """
        use std::io;
        fn run() {}
        const LIMIT: usize = 3;
        impl Runner {}
        fn run() {}
        println! { "top level" }
        struct run;
        """
    )

    catalog = build_catalog(declarations)

    assert [(entry.kind.label, entry.name) for entry in catalog] == [
        ("fn", "run"),
        ("const", "LIMIT"),
        ("fn", "run"),
        ("struct", "run"),
    ]


def test_catalog_of_empty_sequence_is_empty() -> None:
    assert build_catalog([]) == []
