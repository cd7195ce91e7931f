"""Presentation of listings, extracted items and warnings."""

from __future__ import annotations

import json
import sys
from typing import Iterable, Optional, Sequence, TextIO

import yaml
from rich.console import Console
from rich.text import Text

from .models import CatalogEntry

LIST_FORMATS = ("text", "json", "yaml")
KIND_COLUMN_WIDTH = 12


def make_console(stream: TextIO, color: Optional[bool] = None) -> Console:
    """Return a console writing to ``stream``; ``color=None`` auto-detects a TTY."""
    if color is False:
        return Console(file=stream, color_system=None, highlight=False, soft_wrap=True)
    if color:
        return Console(
            file=stream,
            force_terminal=True,
            color_system="standard",
            highlight=False,
            soft_wrap=True,
        )
    return Console(file=stream, highlight=False, soft_wrap=True)


def write_listing(
    entries: Sequence[CatalogEntry],
    *,
    fmt: str = "text",
    stream: TextIO | None = None,
    color: Optional[bool] = None,
) -> None:
    """Write the catalog in one of ``LIST_FORMATS``."""
    out = stream or sys.stdout
    if fmt == "json":
        out.write(json.dumps([entry.as_dict() for entry in entries], indent=2) + "\n")
    elif fmt == "yaml":
        out.write(yaml.safe_dump([entry.as_dict() for entry in entries], sort_keys=False))
    elif fmt == "text":
        console = make_console(out, color)
        console.print("Listing items:")
        for entry in entries:
            line = Text()
            line.append(f"{entry.kind.label:>{KIND_COLUMN_WIDTH}}", style="bold green")
            line.append(" ")
            line.append(entry.name, style="magenta")
            console.print(line)
    else:
        raise ValueError(f"Unknown listing format '{fmt}'")


def write_item(text: str, stream: TextIO | None = None) -> None:
    """Write rendered item text exactly as produced."""
    (stream or sys.stdout).write(text)


def write_warnings(
    warnings: Iterable[str],
    *,
    stream: TextIO | None = None,
    color: Optional[bool] = None,
) -> None:
    console = make_console(stream or sys.stderr, color)
    for warning in warnings:
        line = Text("warning: ", style="bold yellow")
        line.append(warning)
        console.print(line)


__all__ = [
    "KIND_COLUMN_WIDTH",
    "LIST_FORMATS",
    "make_console",
    "write_item",
    "write_listing",
    "write_warnings",
]
