"""Parsed metaobject fields."""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping


class RichTextMarkup(str):
    """Markup produced by the rich-text renderer; already escaped, safe to embed."""

    __slots__ = ()


FieldSet = Mapping[str, Any]


def freeze_fields(values: Mapping[str, Any]) -> FieldSet:
    """Return a read-only view over a copy of ``values``."""
    return MappingProxyType(dict(values))
