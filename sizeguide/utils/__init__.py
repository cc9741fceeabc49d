"""Pure rendering and parsing helpers (no Qt imports)."""

from .content_markup import content_markup, empty_markup, error_markup, loading_markup
from .field_parser import parse_field_value, parse_fields
from .rich_text_renderer import escape_html, render

__all__ = [
    "content_markup",
    "empty_markup",
    "error_markup",
    "loading_markup",
    "parse_field_value",
    "parse_fields",
    "escape_html",
    "render",
]
