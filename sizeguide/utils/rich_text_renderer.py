"""
Render rich-text document trees into HTML.

Every text value is HTML-escaped before it is emitted, so a field value can
never inject markup. Rendering is total: unknown tags and missing children
produce an empty string instead of an error.

Formatting order: italic is applied first, then bold, so bold+italic text
renders as ``<strong><em>value</em></strong>``.

Known limitation: list items only render their direct text children; nested
lists or other structures inside an item are dropped.
"""

from __future__ import annotations

import html
from typing import Any, Callable, Dict, Iterable, List

from ..models.rich_text import (
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
    decode_node,
)

DEFAULT_HEADING_LEVEL = 2


def escape_html(value: Any) -> str:
    """Escape ``value`` for safe inclusion in HTML text or attribute context."""
    return html.escape("" if value is None else str(value), quote=True)


def render_text(node: Text) -> str:
    text = escape_html(node.value)
    if node.italic:
        text = f"<em>{text}</em>"
    if node.bold:
        text = f"<strong>{text}</strong>"
    return text


def render_inline(node: DocumentNode) -> str:
    """Inline renderer: only text nodes (with bold/italic) produce output."""
    if isinstance(node, Text):
        return render_text(node)
    return ""


def _text_children(children: Iterable[DocumentNode]) -> str:
    return "".join(render_text(child) for child in children if isinstance(child, Text))


def clamp_heading_level(level: Any) -> int:
    if isinstance(level, int) and not isinstance(level, bool) and 1 <= level <= 6:
        return level
    return DEFAULT_HEADING_LEVEL


def render_paragraph(node: Paragraph) -> str:
    if not node.children:
        return ""
    return f"<p>{_text_children(node.children)}</p>"


def render_heading(node: Heading) -> str:
    if not node.children:
        return ""
    level = clamp_heading_level(node.level)
    return f"<h{level}>{_text_children(node.children)}</h{level}>"


def render_list(node: ListNode) -> str:
    tag = "ol" if node.ordered else "ul"
    items = "".join(render_list_item(child) for child in node.children if isinstance(child, ListItem))
    if not items:
        return ""
    return f"<{tag}>{items}</{tag}>"


def _render_cell(cell: TableCell, cell_tag: str) -> str:
    if not cell.children:
        return ""
    content = "".join(render_inline(child) for child in cell.children)
    return f"<{cell_tag}>{content}</{cell_tag}>"


def _render_cells(row: TableRow, cell_tag: str) -> str:
    return "".join(_render_cell(cell, cell_tag) for cell in row.children if isinstance(cell, TableCell))


def render_table(node: Table) -> str:
    """The first table-row with renderable cells is the header row."""
    rows = [row for row in node.children if isinstance(row, TableRow) and _render_cells(row, "td")]
    if not rows:
        return ""

    header, body = rows[0], rows[1:]
    parts = [
        "<table>",
        f"<thead><tr>{_render_cells(header, 'th')}</tr></thead>",
        "<tbody>",
    ]
    parts.extend(f"<tr>{_render_cells(row, 'td')}</tr>" for row in body)
    parts.append("</tbody></table>")
    return "".join(parts)


def render_list_item(node: ListItem) -> str:
    if not node.children:
        return ""
    return f"<li>{_text_children(node.children)}</li>"


def render_table_row(node: TableRow) -> str:
    cells = _render_cells(node, "td")
    return f"<tr>{cells}</tr>" if cells else ""


def render_table_cell(node: TableCell) -> str:
    return _render_cell(node, "td")


# Block-level nodes allowed directly under the document root
_BLOCK_RENDERERS: Dict[type, Callable[[Any], str]] = {
    Paragraph: render_paragraph,
    Heading: render_heading,
    ListNode: render_list,
    Table: render_table,
}

_RENDERERS: Dict[type, Callable[[Any], str]] = {
    **_BLOCK_RENDERERS,
    Text: render_text,
    ListItem: render_list_item,
    TableRow: render_table_row,
    TableCell: render_table_cell,
}


def render_root(node: Root) -> str:
    parts: List[str] = []
    for child in node.children:
        renderer = _BLOCK_RENDERERS.get(type(child))
        if renderer is not None:
            parts.append(renderer(child))
    return "".join(parts)


_RENDERERS[Root] = render_root


def render(node: Any) -> str:
    """
    Render a document node (or a raw decoded JSON mapping) to HTML.

    Args:
        node: a DocumentNode, or the decoded JSON of one

    Returns:
        HTML markup; empty string for unknown or empty structures
    """
    if not isinstance(node, tuple(_RENDERERS)):
        node = decode_node(node)
    renderer = _RENDERERS.get(type(node))
    if renderer is None:
        return ""
    return renderer(node)
