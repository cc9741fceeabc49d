"""Pydantic schemas for the Storefront API payloads."""

from .storefront_schema import Metaobject, MetaobjectField, StorefrontResponse

__all__ = ["Metaobject", "MetaobjectField", "StorefrontResponse"]
