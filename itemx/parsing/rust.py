"""Tree-sitter powered parser for Rust source files."""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

import tree_sitter_rust
from tree_sitter import Language, Node, Parser

from ..logging import get_logger
from ..models import DeclarationNode, Variant
from ..source import InputError

_LOGGER = get_logger("parsing")

# Item node types that carry their identifier in the ``name`` field.
_NAMED_ITEMS = {
    "function_item": Variant.FUNCTION,
    "struct_item": Variant.STRUCT,
    "enum_item": Variant.ENUM,
    "trait_item": Variant.TRAIT,
    "const_item": Variant.CONST,
    "extern_crate_declaration": Variant.EXTERN_CRATE,
    "static_item": Variant.STATIC,
    "type_item": Variant.TYPE,
    "union_item": Variant.UNION,
    "macro_definition": Variant.MACRO,
}

# Root children that belong to an item or to the file header rather than
# being items of their own.
_NON_ITEMS = {
    "attribute_item",
    "inner_attribute_item",
    "line_comment",
    "block_comment",
    "shebang",
}

_OUTER, _INNER, _PLAIN = "outer", "inner", "plain"


class ParseError(InputError):
    """Raised when the source text is not syntactically valid Rust."""

    def __init__(
        self, message: str, *, line: int, column: int, origin: str | None = None
    ) -> None:
        self.line = line
        self.column = column
        self.origin = origin
        location = f"{origin}:{line}:{column}" if origin else f"line {line}, column {column}"
        super().__init__(f"{location}: {message}")


class RustParser:
    """Splits Rust source into top-level declaration nodes."""

    def __init__(self) -> None:
        self._parser = Parser(Language(tree_sitter_rust.language()))

    def parse(self, source: str, *, origin: str | None = None) -> List[DeclarationNode]:
        """Parse ``source`` and return its top-level items in source order.

        Raises ``ParseError`` when the tree contains syntax errors.
        """
        source_bytes = source.encode("utf-8")
        tree = self._parser.parse(source_bytes)
        root = tree.root_node
        if root.has_error:
            raise _diagnose(root, source_bytes, origin)

        children = root.children
        declarations: List[DeclarationNode] = []
        for index, child in enumerate(children):
            if child.type in _NON_ITEMS:
                continue
            variant, name = _identify(child, source_bytes)
            start = _attached_start(children, index, source_bytes)
            declarations.append(
                DeclarationNode(
                    variant=variant,
                    name=name,
                    text=_item_text(start, child, source_bytes),
                    node_type=child.type,
                    start_line=start.start_point[0] + 1,
                    end_line=child.end_point[0] + 1,
                )
            )
        _LOGGER.debug(
            "Parsed %d top-level items from %s", len(declarations), origin or "<source>"
        )
        return declarations


def _identify(node: Node, source_bytes: bytes) -> Tuple[Variant, Optional[str]]:
    variant = _NAMED_ITEMS.get(node.type)
    if variant is not None:
        name_node = node.child_by_field_name("name")
        name = _node_text(name_node, source_bytes) if name_node is not None else ""
        return variant, name or None
    if _is_macro_invocation(node):
        return Variant.MACRO, None
    return Variant.OTHER, None


def _is_macro_invocation(node: Node) -> bool:
    if node.type == "macro_invocation":
        return True
    if node.type == "expression_statement":
        named = node.named_children
        return len(named) == 1 and named[0].type == "macro_invocation"
    return False


def _attached_start(children: Sequence[Node], index: int, source_bytes: bytes) -> Node:
    """Return the first outer attribute or doc comment attached to ``children[index]``."""
    start = children[index]
    position = index - 1
    while position >= 0:
        sibling = children[position]
        if sibling.type == "attribute_item":
            start = sibling
        elif sibling.type in {"line_comment", "block_comment"}:
            style = _comment_style(sibling, source_bytes)
            if style == _INNER:
                break
            if style == _OUTER:
                start = sibling
        else:
            break
        position -= 1
    return start


def _comment_style(node: Node, source_bytes: bytes) -> str:
    text = _node_text(node, source_bytes)
    if node.type == "line_comment":
        if text.startswith("///") and not text.startswith("////"):
            return _OUTER
        if text.startswith("//!"):
            return _INNER
    else:
        if text.startswith("/**") and not text.startswith("/***") and text != "/**/":
            return _OUTER
        if text.startswith("/*!"):
            return _INNER
    return _PLAIN


def _item_text(start: Node, end: Node, source_bytes: bytes) -> str:
    # Exact source slice; multi-line literals must come back unchanged.
    return source_bytes[start.start_byte : end.end_byte].decode("utf-8")


def _diagnose(root: Node, source_bytes: bytes, origin: str | None) -> ParseError:
    node = _first_error(root) or root
    line, column = node.start_point[0] + 1, node.start_point[1] + 1
    if node.is_missing:
        message = f"expected '{node.type}'"
    else:
        snippet = " ".join(_node_text(node, source_bytes).split())
        if len(snippet) > 40:
            snippet = snippet[:40] + "..."
        message = f"unexpected '{snippet}'" if snippet else "syntax error"
    return ParseError(message, line=line, column=column, origin=origin)


def _first_error(root: Node) -> Optional[Node]:
    stack = [root]
    while stack:
        node = stack.pop()
        if node.is_error or node.is_missing:
            return node
        if node.has_error:
            stack.extend(reversed(node.children))
    return None


def _node_text(node: Node, source_bytes: bytes) -> str:
    return source_bytes[node.start_byte : node.end_byte].decode("utf-8", errors="ignore")


__all__ = ["ParseError", "RustParser"]
