"""HTML written into the drawer's content region for each render state."""

from __future__ import annotations

from typing import Any, Mapping

from ..config import DEFAULT_TITLE
from ..models.field_set import RichTextMarkup
from .rich_text_renderer import escape_html

LOADING_TEXT = "Loading size guide..."
ERROR_TITLE = "Unable to load size guide"


def loading_markup() -> str:
    return (
        '<div class="size-guide-drawer__loading">'
        '<div class="loading-spinner"></div>'
        f"<p>{LOADING_TEXT}</p>"
        "</div>"
    )


def empty_markup(message: str) -> str:
    return f'<div class="size-guide-drawer__empty"><p>{escape_html(message)}</p></div>'


def error_markup(message: str) -> str:
    return (
        '<div class="size-guide-drawer__error">'
        f'<h3 class="size-guide-drawer__error-title">{ERROR_TITLE}</h3>'
        f'<p class="size-guide-drawer__error-message">{escape_html(message)}</p>'
        "</div>"
    )


def _body_markup(body: Any) -> str:
    # Renderer output is already escaped; anything else is merchant text
    if isinstance(body, RichTextMarkup):
        return str(body)
    if isinstance(body, str):
        return "<br>".join(escape_html(line) for line in body.splitlines())
    return ""


def content_markup(fields: Mapping[str, Any], default_title: str = DEFAULT_TITLE) -> str:
    title = fields.get("title")
    if not isinstance(title, str) or not title:
        title = default_title
    return (
        '<div class="size-guide-drawer__data">'
        f"<h3>{escape_html(title)}</h3>"
        f'<div class="size-guide-drawer__data-body">{_body_markup(fields.get("body"))}</div>'
        "</div>"
    )
