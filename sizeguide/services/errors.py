"""Error taxonomy for the size guide fetch path."""

from __future__ import annotations


class SizeGuideError(RuntimeError):
    """Base class; ``str(error)`` is the message shown in the error state."""


class ConfigurationError(SizeGuideError):
    """Storefront connection parameters are missing."""


class TransportError(SizeGuideError):
    """Network failure or non-success HTTP status."""


class DataError(SizeGuideError):
    """Malformed response payload or GraphQL-level errors."""


class DecodeError(SizeGuideError):
    """A single field value failed structured decoding; recovered by the parser."""

    def __init__(self, key: str, reason: str):
        super().__init__(f"Field '{key}' could not be decoded: {reason}")
        self.key = key
        self.reason = reason
