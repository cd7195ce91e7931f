"""Tests for formatter adapters and selection."""

from __future__ import annotations

import shutil
import subprocess

import pytest

from itemx.config import ConfigError, ExtractorConfig
from itemx.formatting import (
    RenderError,
    RustfmtFormatter,
    VerbatimFormatter,
    create_formatter,
)


def test_rustfmt_formatter_pipes_source_through_runner() -> None:
    calls: list[tuple[list[str], str]] = []

    def runner(args, *, input_text):  # type: ignore[no-untyped-def]
        calls.append((list(args), input_text))
        return "struct Point {\n    x: i32,\n}\n"

    formatter = RustfmtFormatter("/opt/rust/bin/rustfmt", edition="2018", runner=runner)
    text = formatter.format("struct Point{x:i32}\n")

    assert text == "struct Point {\n    x: i32,\n}\n"
    assert calls == [(["/opt/rust/bin/rustfmt", "--edition", "2018"], "struct Point{x:i32}\n")]


def test_rustfmt_formatter_reports_rustfmt_errors() -> None:
    def runner(args, *, input_text):  # type: ignore[no-untyped-def]
        raise subprocess.CalledProcessError(
            1, list(args), output="", stderr="error: expected item, found `}`\n"
        )

    formatter = RustfmtFormatter(runner=runner)

    with pytest.raises(RenderError, match="expected item, found"):
        formatter.format("}\n")


def test_rustfmt_formatter_reports_exit_status_without_stderr() -> None:
    def runner(args, *, input_text):  # type: ignore[no-untyped-def]
        raise subprocess.CalledProcessError(3, list(args), output="", stderr="")

    with pytest.raises(RenderError, match="exit status 3"):
        RustfmtFormatter(runner=runner).format("fn f() {}\n")


def test_rustfmt_formatter_reports_missing_executable() -> None:
    def runner(args, *, input_text):  # type: ignore[no-untyped-def]
        raise FileNotFoundError(2, "No such file or directory", args[0])

    with pytest.raises(RenderError, match="'not-rustfmt' not found"):
        RustfmtFormatter("not-rustfmt", runner=runner).format("fn f() {}\n")


def test_verbatim_formatter_trims_surrounding_blank_lines_only() -> None:
    formatter = VerbatimFormatter()

    assert formatter.format("\nfn f() {\n    g();\n}\n\n\n") == "fn f() {\n    g();\n}\n"
    literal = 'const S: &str = "a  \n   \nb";\n'
    assert formatter.format(literal) == literal
    assert formatter.format("   \n") == ""


def test_create_formatter_uses_config() -> None:
    rustfmt = create_formatter(ExtractorConfig(rustfmt_path="my-rustfmt", edition="2024"))
    assert isinstance(rustfmt, RustfmtFormatter)
    assert rustfmt.command == ["my-rustfmt", "--edition", "2024"]

    verbatim = create_formatter(ExtractorConfig(formatter="verbatim"))
    assert isinstance(verbatim, VerbatimFormatter)


def test_create_formatter_rejects_unknown_names() -> None:
    with pytest.raises(ConfigError, match="Unknown formatter 'prettyplease'"):
        create_formatter(ExtractorConfig(formatter="prettyplease"))


@pytest.mark.skipif(shutil.which("rustfmt") is None, reason="rustfmt not installed")
def test_rustfmt_formatter_formats_real_source() -> None:
    text = RustfmtFormatter().format("fn add(a: u32, b: u32) -> u32 { a + b }\n")

    assert text == "fn add(a: u32, b: u32) -> u32 {\n    a + b\n}\n"
