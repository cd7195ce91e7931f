"""Tests for listing and warning presentation."""

from __future__ import annotations

import io
import json

import pytest
import yaml

from itemx.models import CatalogEntry, ItemKind
from itemx.output import write_item, write_listing, write_warnings

ENTRIES = [
    CatalogEntry(ItemKind.FUNCTION, "add"),
    CatalogEntry(ItemKind.EXTERN_CRATE, "alloc"),
]


def test_text_listing_right_aligns_kinds() -> None:
    stream = io.StringIO()

    write_listing(ENTRIES, stream=stream, color=False)

    assert stream.getvalue() == (
        "Listing items:\n"
        "          fn add\n"
        "extern crate alloc\n"
    )


def test_text_listing_uses_colour_when_forced() -> None:
    stream = io.StringIO()

    write_listing(ENTRIES, stream=stream, color=True)

    output = stream.getvalue()
    assert "\x1b[" in output
    assert "add" in output


def test_json_listing() -> None:
    stream = io.StringIO()

    write_listing(ENTRIES, fmt="json", stream=stream)

    assert json.loads(stream.getvalue()) == [
        {"kind": "fn", "name": "add"},
        {"kind": "extern crate", "name": "alloc"},
    ]


def test_yaml_listing_preserves_order() -> None:
    stream = io.StringIO()

    write_listing(ENTRIES, fmt="yaml", stream=stream)

    assert yaml.safe_load(stream.getvalue()) == [
        {"kind": "fn", "name": "add"},
        {"kind": "extern crate", "name": "alloc"},
    ]
    assert stream.getvalue().index("add") < stream.getvalue().index("alloc")


def test_unknown_listing_format_is_rejected() -> None:
    with pytest.raises(ValueError, match="Unknown listing format"):
        write_listing(ENTRIES, fmt="csv", stream=io.StringIO())


def test_write_item_does_not_wrap_text() -> None:
    stream = io.StringIO()
    text = "fn f() {\n    " + "x" * 200 + "\n}\n"

    write_item(text, stream=stream)

    assert stream.getvalue() == text


def test_warnings_are_prefixed() -> None:
    stream = io.StringIO()

    write_warnings(["output might be mangled"], stream=stream, color=False)

    assert stream.getvalue() == "warning: output might be mangled\n"
