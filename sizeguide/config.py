# Configuration du tiroir "Size Guide" et de l'accès Storefront
from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict

import yaml

DEFAULT_API_VERSION = "2024-01"
DEFAULT_DOCUMENT_TYPE = "size_guide"
DEFAULT_EMPTY_MESSAGE = "No size guide available."
DEFAULT_TITLE = "Size Guide"


def _env_flag(name: str, default: str = "true") -> bool:
    return os.environ.get(name, default).lower() == "true"


def _env_timeout(name: str) -> float | None:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return None
    try:
        value = float(raw)
    except ValueError:
        return None
    return value if value > 0 else None


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


@dataclass(frozen=True)
class StorefrontConfig:
    """Connection parameters for the public Storefront GraphQL endpoint."""

    shop_domain: str = ""
    storefront_token: str = ""
    api_version: str = DEFAULT_API_VERSION

    # None keeps the request unbounded, as the theme script did
    timeout_s: float | None = None

    @classmethod
    def from_env(cls) -> "StorefrontConfig":
        """Build the configuration from SHOPIFY_* environment variables."""
        return cls(
            shop_domain=os.environ.get("SHOPIFY_SHOP_DOMAIN", "").strip(),
            storefront_token=os.environ.get("SHOPIFY_STOREFRONT_TOKEN", "").strip(),
            api_version=os.environ.get("SHOPIFY_STOREFRONT_API_VERSION", DEFAULT_API_VERSION).strip()
            or DEFAULT_API_VERSION,
            timeout_s=_env_timeout("SHOPIFY_STOREFRONT_TIMEOUT"),
        )

    def is_configured(self) -> bool:
        return bool(self.shop_domain and self.storefront_token)

    @property
    def endpoint(self) -> str:
        return f"https://{self.shop_domain}/api/{self.api_version}/graphql.json"


def _read_settings_file(path: Path) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as fh:
        data = yaml.safe_load(fh) or {}
    if not isinstance(data, dict):
        return {}
    section = data.get("storefront")
    return section if isinstance(section, dict) else {}


def load_storefront_config(settings_path: str | Path | None = None) -> StorefrontConfig:
    """
    Resolve Storefront credentials.

    Environment variables win; any value they leave empty is looked up in the
    optional YAML settings file (``storefront:`` section). A missing file is
    not an error: the caller gets an unconfigured StorefrontConfig and the
    fetch reports it.
    """
    config = StorefrontConfig.from_env()
    if settings_path is None:
        return config

    path = Path(settings_path)
    if not path.exists():
        return config

    section = _read_settings_file(path)

    api_version = config.api_version
    if not os.environ.get("SHOPIFY_STOREFRONT_API_VERSION") and section.get("api_version"):
        api_version = str(section["api_version"]).strip()

    timeout_s = config.timeout_s
    file_timeout = section.get("timeout_s")
    if timeout_s is None and isinstance(file_timeout, (int, float)) and file_timeout > 0:
        timeout_s = float(file_timeout)

    return replace(
        config,
        shop_domain=config.shop_domain or str(section.get("shop_domain") or "").strip(),
        storefront_token=config.storefront_token or str(section.get("token") or "").strip(),
        api_version=api_version,
        timeout_s=timeout_s,
    )


@dataclass(frozen=True)
class PanelConfig:
    """Behavioural defaults shared by every drawer instance."""

    document_type: str = DEFAULT_DOCUMENT_TYPE
    empty_message: str = DEFAULT_EMPTY_MESSAGE
    default_title: str = DEFAULT_TITLE
    fetch_limit: int = 1

    # Délais alignés sur les animations d'entrée/sortie
    focus_delay_ms: int = 100
    hide_delay_ms: int = 300

    @classmethod
    def from_env(cls) -> "PanelConfig":
        return cls(
            focus_delay_ms=_env_int("SIZEGUIDE_FOCUS_DELAY_MS", 100),
            hide_delay_ms=_env_int("SIZEGUIDE_HIDE_DELAY_MS", 300),
        )


@dataclass
class RedactionConfig:
    """Which secrets must never reach log output."""

    ENFORCED: bool = True

    # Remplacement affiché à la place d'un secret
    PLACEHOLDER: str = "[REDACTED]"

    # Secrets littéraux connus (jeton Storefront)
    SECRETS: tuple[str, ...] = ()

    @classmethod
    def from_env(cls) -> "RedactionConfig":
        token = os.environ.get("SHOPIFY_STOREFRONT_TOKEN", "").strip()
        return cls(
            ENFORCED=_env_flag("SIZEGUIDE_REDACT_SECRETS"),
            SECRETS=(token,) if token else (),
        )

    def should_redact(self) -> bool:
        return self.ENFORCED

    def with_secret(self, secret: str) -> "RedactionConfig":
        """Return a copy that also masks ``secret``."""
        if not secret or secret in self.SECRETS:
            return self
        return replace(self, SECRETS=self.SECRETS + (secret,))


# Instances globales par défaut
DEFAULT_REDACTION_CONFIG = RedactionConfig.from_env()
DEFAULT_PANEL_CONFIG = PanelConfig.from_env()
