"""CLI entrypoint for itemx."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Sequence, Tuple

from .config import EDITIONS, FORMATTERS, ConfigError, load_config
from .extractor import ItemExtractor
from .formatting import RenderError, create_formatter
from .logging import configure_logging
from .models import ExtractionRequest, InvalidRequestError, ItemKind, NotFound
from .output import LIST_FORMATS, write_item, write_listing, write_warnings
from .source import InputError

EXIT_FAILURE = 1
EXIT_USAGE = 2
EXIT_NOT_FOUND = 2

# (command, aliases, kind, help)
_KIND_COMMANDS: Sequence[Tuple[str, Tuple[str, ...], ItemKind, str]] = (
    ("function", ("fn", "f"), ItemKind.FUNCTION, "Extract a function."),
    ("struct", ("s",), ItemKind.STRUCT, "Extract a struct."),
    ("enum", ("e",), ItemKind.ENUM, "Extract an enum."),
    ("trait", ("t",), ItemKind.TRAIT, "Extract a trait."),
    ("const", ("c",), ItemKind.CONST, "Extract a constant."),
    ("extern-crate", (), ItemKind.EXTERN_CRATE, "Extract an `extern crate` declaration."),
    ("static", (), ItemKind.STATIC, "Extract a static."),
    ("type", (), ItemKind.TYPE, "Extract a type alias."),
    ("union", (), ItemKind.UNION, "Extract a union."),
    ("macro", (), ItemKind.MACRO, "Extract a macro_rules! definition. Note: output might be mangled."),
)


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Enable debug logging on stderr.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="itemx",
        description="List or extract top-level items from a Rust source file.",
    )
    _add_verbose_option(parser)
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Write debug log records to this file.",
    )
    parser.add_argument(
        "--formatter",
        choices=FORMATTERS,
        default=None,
        help="Formatter used for extracted items (default: rustfmt, or $ITEMX_FORMATTER).",
    )
    parser.add_argument(
        "--rustfmt",
        dest="rustfmt_path",
        default=None,
        help="Path to the rustfmt executable (default: rustfmt, or $ITEMX_RUSTFMT).",
    )
    parser.add_argument(
        "--edition",
        choices=EDITIONS,
        default=None,
        help="Rust edition passed to rustfmt (default: 2021, or $ITEMX_EDITION).",
    )
    parser.add_argument(
        "--color",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Force coloured listings on or off (default: auto-detect).",
    )
    parser.add_argument("file", type=Path, help="Rust source file to read.")

    subparsers = parser.add_subparsers(dest="command", required=True, metavar="COMMAND")

    list_parser = subparsers.add_parser("list", help="List the items in the file.")
    _add_verbose_option(list_parser, suppress_default=True)
    list_parser.add_argument(
        "--format",
        choices=LIST_FORMATS,
        default="text",
        help="Listing format (default: text).",
    )
    list_parser.set_defaults(kind=None)

    for command, aliases, kind, help_text in _KIND_COMMANDS:
        item_parser = subparsers.add_parser(command, aliases=list(aliases), help=help_text)
        _add_verbose_option(item_parser, suppress_default=True)
        item_parser.add_argument("name", help="Exact, case-sensitive item name.")
        item_parser.set_defaults(kind=kind)

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for itemx."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)

    try:
        config = load_config(
            formatter=args.formatter,
            rustfmt_path=args.rustfmt_path,
            edition=args.edition,
            color=args.color,
        )
        formatter = create_formatter(config)
    except ConfigError as exc:
        parser.exit(EXIT_USAGE, f"itemx: {exc}\n")

    extractor = ItemExtractor(formatter=formatter)

    if args.kind is None:
        try:
            entries = extractor.list_items(args.file)
        except InputError as exc:
            parser.exit(EXIT_FAILURE, f"itemx: {exc}\n")
        write_listing(entries, fmt=args.format, color=config.color)
        return

    try:
        request = ExtractionRequest(kind=args.kind, name=args.name)
    except InvalidRequestError as exc:
        parser.exit(EXIT_USAGE, f"itemx: {exc}\n")

    try:
        outcome = extractor.extract(args.file, request)
    except InputError as exc:
        parser.exit(EXIT_FAILURE, f"itemx: {exc}\n")
    except RenderError as exc:
        parser.exit(
            EXIT_FAILURE,
            f"itemx: cannot render {request.kind.label} '{request.name}': {exc}\n",
        )

    if isinstance(outcome, NotFound):
        parser.exit(
            EXIT_NOT_FOUND,
            f"itemx: no {request.kind.label} named '{request.name}' in {args.file}\n",
        )
    write_item(outcome.text)
    write_warnings(outcome.warnings, color=config.color)


if __name__ == "__main__":
    main(sys.argv[1:])
