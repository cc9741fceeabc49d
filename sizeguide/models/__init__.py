"""
Data models for the size guide drawer.

- rich_text: the DocumentNode tagged union and its total decoder
- field_set: parsed metaobject fields and the RichTextMarkup marker
"""

from .field_set import FieldSet, RichTextMarkup, freeze_fields
from .rich_text import (
    MAX_NODE_DEPTH,
    DocumentNode,
    Heading,
    ListItem,
    ListNode,
    Paragraph,
    Root,
    Table,
    TableCell,
    TableRow,
    Text,
    UnknownNode,
    decode_node,
    is_document_root,
)

__all__ = [
    "FieldSet",
    "RichTextMarkup",
    "freeze_fields",
    "MAX_NODE_DEPTH",
    "DocumentNode",
    "Heading",
    "ListItem",
    "ListNode",
    "Paragraph",
    "Root",
    "Table",
    "TableCell",
    "TableRow",
    "Text",
    "UnknownNode",
    "decode_node",
    "is_document_root",
]
