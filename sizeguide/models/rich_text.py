"""
Rich-text document tree.

Metaobject rich-text fields are serialized as a JSON tree::

    {"type": "root", "children": [
        {"type": "paragraph", "children": [{"type": "text", "value": "42in", "bold": true}]}
    ]}

The tree comes from merchant-edited data and is treated as untrusted: every
variant is decoded through ``decode_node`` which never raises, maps unknown
tags to ``UnknownNode`` and stops descending past ``MAX_NODE_DEPTH``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Tuple, Union

MAX_NODE_DEPTH = 32


@dataclass(frozen=True, slots=True)
class Text:
    value: str = ""
    bold: bool = False
    italic: bool = False


@dataclass(frozen=True, slots=True)
class Paragraph:
    children: Tuple["DocumentNode", ...] = ()


@dataclass(frozen=True, slots=True)
class Heading:
    # Raw level as found in the document; clamped at render time
    level: int | None = None
    children: Tuple["DocumentNode", ...] = ()


@dataclass(frozen=True, slots=True)
class ListNode:
    ordered: bool = False
    children: Tuple["DocumentNode", ...] = ()


@dataclass(frozen=True, slots=True)
class ListItem:
    children: Tuple["DocumentNode", ...] = ()


@dataclass(frozen=True, slots=True)
class Table:
    children: Tuple["DocumentNode", ...] = ()


@dataclass(frozen=True, slots=True)
class TableRow:
    children: Tuple["DocumentNode", ...] = ()


@dataclass(frozen=True, slots=True)
class TableCell:
    children: Tuple["DocumentNode", ...] = ()


@dataclass(frozen=True, slots=True)
class Root:
    children: Tuple["DocumentNode", ...] = ()


@dataclass(frozen=True, slots=True)
class UnknownNode:
    """A tag this version does not understand; renders to nothing."""

    type: str = ""


DocumentNode = Union[
    Root, Paragraph, Heading, ListNode, ListItem, Table, TableRow, TableCell, Text, UnknownNode
]

_CONTAINERS = {
    "root": Root,
    "paragraph": Paragraph,
    "list-item": ListItem,
    "table": Table,
    "table-row": TableRow,
    "table-cell": TableCell,
}


def _text_value(raw: Any) -> str:
    if isinstance(raw, str):
        return raw
    if isinstance(raw, (int, float)) and not isinstance(raw, bool):
        return str(raw)
    return ""


def _heading_level(raw: Any) -> int | None:
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float) and raw.is_integer():
        return int(raw)
    return None


def _decode_children(raw: Mapping[str, Any], depth: int) -> Tuple[DocumentNode, ...]:
    children = raw.get("children")
    if not isinstance(children, list) or depth >= MAX_NODE_DEPTH:
        return ()
    return tuple(decode_node(child, depth + 1) for child in children)


def decode_node(raw: Any, depth: int = 0) -> DocumentNode:
    """Convert a decoded JSON value into a DocumentNode. Total: never raises."""
    if not isinstance(raw, Mapping):
        return UnknownNode()

    node_type = raw.get("type")
    if not isinstance(node_type, str):
        return UnknownNode()

    if node_type == "text":
        return Text(
            value=_text_value(raw.get("value")),
            bold=bool(raw.get("bold")),
            italic=bool(raw.get("italic")),
        )

    if node_type == "heading":
        return Heading(level=_heading_level(raw.get("level")), children=_decode_children(raw, depth))

    if node_type == "list":
        return ListNode(ordered=raw.get("listType") == "ordered", children=_decode_children(raw, depth))

    container = _CONTAINERS.get(node_type)
    if container is None:
        return UnknownNode(type=node_type)
    return container(children=_decode_children(raw, depth))


def is_document_root(value: Any) -> bool:
    """True for a decoded value shaped like ``{"type": "root", "children": [...]}``."""
    return isinstance(value, Mapping) and value.get("type") == "root" and isinstance(value.get("children"), list)
