"""
Service abstractions used by the drawer.

Each service hides side-effectful behaviour (network, page state) behind a
simple interface so the panel controller can remain pure-Python and
test-friendly.
"""

from .errors import ConfigurationError, DataError, DecodeError, SizeGuideError, TransportError
from .scroll_lock import PAGE_SCROLL_LOCK, ScrollLock
from .storefront_client import StorefrontClient

__all__ = [
    "ConfigurationError",
    "DataError",
    "DecodeError",
    "SizeGuideError",
    "TransportError",
    "PAGE_SCROLL_LOCK",
    "ScrollLock",
    "StorefrontClient",
]
