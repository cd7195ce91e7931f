"""Tests for itemx.models."""

from __future__ import annotations

import pytest

from itemx.models import CatalogEntry, ExtractionRequest, InvalidRequestError, ItemKind


def test_item_kind_round_trips_labels() -> None:
    for kind in ItemKind:
        assert ItemKind.from_label(kind.label) is kind
        assert ItemKind.from_label(kind) is kind


def test_item_kind_rejects_unknown_labels() -> None:
    with pytest.raises(InvalidRequestError, match="Unknown item kind 'class'"):
        ItemKind.from_label("class")
    with pytest.raises(InvalidRequestError):
        ItemKind.from_label("FN")


def test_extraction_request_normalises_kind() -> None:
    request = ExtractionRequest(kind="extern crate", name="alloc")
    assert request.kind is ItemKind.EXTERN_CRATE


def test_extraction_request_requires_a_name() -> None:
    with pytest.raises(InvalidRequestError):
        ExtractionRequest(kind=ItemKind.FUNCTION, name="")


def test_catalog_entry_as_dict_uses_label() -> None:
    entry = CatalogEntry(ItemKind.EXTERN_CRATE, "alloc")
    assert entry.as_dict() == {"kind": "extern crate", "name": "alloc"}
