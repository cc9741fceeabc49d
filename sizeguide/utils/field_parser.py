"""
Metaobject field parsing.

Field values are heterogeneous: single-line text arrives as a plain string,
rich text arrives as a serialized JSON document. Each value is classified on
its own and a malformed value never fails the whole fetch.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any, Dict, Iterable, Tuple

from ..config import DEFAULT_REDACTION_CONFIG
from ..logging.safe_logger import get_safe_logger
from ..models.field_set import FieldSet, RichTextMarkup, freeze_fields
from ..models.rich_text import decode_node, is_document_root
from ..services.errors import DecodeError
from .rich_text_renderer import render

logger = get_safe_logger(__name__, cfg=DEFAULT_REDACTION_CONFIG)

DOCUMENT_MARKER = "{"


def _key_value(field: Any) -> Tuple[Any, Any]:
    if isinstance(field, Mapping):
        return field.get("key"), field.get("value")
    return getattr(field, "key", None), getattr(field, "value", None)


def looks_like_document(value: str) -> bool:
    return value.strip().startswith(DOCUMENT_MARKER)


def parse_field_value(key: str, value: Any) -> Any:
    """Classify and convert one raw field value."""
    if not isinstance(value, str) or not looks_like_document(value):
        return value

    try:
        decoded = json.loads(value)
    except (ValueError, RecursionError) as exc:
        error = DecodeError(key, exc.__class__.__name__)
        logger.debug("{} - keeping raw value", error)
        return value

    if is_document_root(decoded):
        return RichTextMarkup(render(decode_node(decoded)))
    return decoded


def parse_fields(fields: Iterable[Any]) -> FieldSet:
    """
    Build a FieldSet from an ordered sequence of ``{key, value}`` fields.

    Args:
        fields: dicts or objects exposing ``key`` and ``value``

    Returns:
        Read-only mapping key -> RichTextMarkup | str | decoded JSON value
    """
    parsed: Dict[str, Any] = {}
    for field in fields or ():
        key, value = _key_value(field)
        if not isinstance(key, str):
            continue
        parsed[key] = parse_field_value(key, value)
    return freeze_fields(parsed)
