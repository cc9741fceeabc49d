"""Size guide drawer: Storefront metaobject fetch, rich-text rendering and Qt drawer."""

__version__ = "1.0.0"
