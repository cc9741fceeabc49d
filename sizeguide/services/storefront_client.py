"""
Storefront API client
=====================

Fetches metaobjects through the public, read-only Storefront GraphQL API.

Only a Storefront access token is ever used here; it is scoped to public
metaobject data and is masked in every log line. Admin API credentials must
never be configured for this client.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import requests
from pydantic import ValidationError

from ..config import DEFAULT_REDACTION_CONFIG, StorefrontConfig
from ..logging.safe_logger import get_safe_logger
from ..schemas.storefront_schema import Metaobject, StorefrontResponse
from .errors import ConfigurationError, DataError, TransportError

METAOBJECT_QUERY = """
query GetMetaobjects($type: String!, $first: Int!) {
  metaobjects(type: $type, first: $first) {
    edges {
      node {
        handle
        fields {
          key
          value
        }
      }
    }
  }
}
"""

TOKEN_HEADER = "X-Shopify-Storefront-Access-Token"


class StorefrontClient:
    def __init__(self, config: StorefrontConfig, session: Optional[requests.Session] = None) -> None:
        self.config = config
        self.session = session or requests.Session()
        self._logger = get_safe_logger(
            __name__, cfg=DEFAULT_REDACTION_CONFIG.with_secret(config.storefront_token)
        )

    def build_payload(self, document_type: str, limit: int) -> Dict[str, Any]:
        return {
            "query": METAOBJECT_QUERY,
            "variables": {"type": document_type, "first": int(limit)},
        }

    def fetch_metaobjects(self, document_type: str, limit: int = 1) -> List[Metaobject]:
        """
        Fetch up to ``limit`` metaobjects of ``document_type``.

        Raises:
            ConfigurationError: shop domain or token missing
            TransportError: network failure or non-success status
            DataError: undecodable payload or GraphQL errors
        """
        if not self.config.is_configured():
            raise ConfigurationError("Storefront API credentials not configured")

        self._logger.debug(
            "Fetching metaobjects type={} limit={} from {}",
            document_type,
            limit,
            self.config.shop_domain,
        )
        try:
            response = self.session.post(
                self.config.endpoint,
                json=self.build_payload(document_type, limit),
                headers={
                    "Content-Type": "application/json",
                    TOKEN_HEADER: self.config.storefront_token,
                },
                timeout=self.config.timeout_s,
            )
        except requests.RequestException as exc:
            self._logger.warning("Storefront request failed: {}", exc)
            raise TransportError(str(exc)) from exc

        if not response.ok:
            raise TransportError(f"HTTP error! status: {response.status_code}")

        try:
            payload = response.json()
        except ValueError as exc:
            raise DataError("Invalid JSON in Storefront response") from exc

        if not isinstance(payload, dict):
            raise DataError("Unexpected Storefront response payload")

        try:
            parsed = StorefrontResponse.model_validate(payload)
        except ValidationError as exc:
            raise DataError(f"Malformed Storefront response: {exc.error_count()} validation error(s)") from exc

        if parsed.errors:
            raise DataError(parsed.errors[0].message)

        documents = parsed.documents()
        self._logger.info("Storefront returned {} metaobject(s) of type {}", len(documents), document_type)
        return documents
