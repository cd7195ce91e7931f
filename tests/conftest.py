from __future__ import annotations

from pathlib import Path

import pytest

from itemx.extractor import ItemExtractor
from itemx.formatting import VerbatimFormatter
from tests._fixtures.source_builder import SourceBuilder


@pytest.fixture
def source_builder(tmp_path: Path) -> SourceBuilder:
    """Provide a reusable Rust source builder rooted at the pytest tmp_path."""
    return SourceBuilder(tmp_path)


@pytest.fixture
def extractor() -> ItemExtractor:
    """Extractor that keeps item layout as written, so no rustfmt is needed."""
    return ItemExtractor(formatter=VerbatimFormatter())


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("ITEMX_FORMATTER", "ITEMX_RUSTFMT", "ITEMX_EDITION", "NO_COLOR"):
        monkeypatch.delenv(name, raising=False)
