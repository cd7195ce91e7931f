"""Lookup of a single declaration by kind and identifier."""

from __future__ import annotations

import logging
from typing import Optional, Sequence, Union

from .classifier import classify
from .logging import get_logger
from .models import DeclarationNode, ItemKind

_LOGGER = get_logger("locator")


def locate(
    declarations: Sequence[DeclarationNode],
    kind: Union[ItemKind, str],
    name: str,
) -> Optional[DeclarationNode]:
    """Return the first declaration classified as ``(kind, name)``.

    Later declarations with the same kind and name are ignored. ``None`` is
    returned both when the name is absent and when it exists under another
    kind.
    """
    wanted = (ItemKind.from_label(kind), name)
    for index, node in enumerate(declarations):
        if classify(node) == wanted:
            if _LOGGER.isEnabledFor(logging.DEBUG):
                _log_shadowed(declarations[index + 1 :], node, wanted)
            return node
    return None


def _log_shadowed(rest, chosen, wanted) -> None:  # type: ignore[no-untyped-def]
    for node in rest:
        if classify(node) == wanted:
            _LOGGER.debug(
                "Ignoring %s '%s' at line %d; using the one at line %d",
                wanted[0].label,
                wanted[1],
                node.start_line,
                chosen.start_line,
            )


__all__ = ["locate"]
