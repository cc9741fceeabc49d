from sizeguide.config import (
    DEFAULT_API_VERSION,
    PanelConfig,
    RedactionConfig,
    StorefrontConfig,
    load_storefront_config,
)

ENV_KEYS = (
    "SHOPIFY_SHOP_DOMAIN",
    "SHOPIFY_STOREFRONT_TOKEN",
    "SHOPIFY_STOREFRONT_API_VERSION",
    "SHOPIFY_STOREFRONT_TIMEOUT",
)


def clear_env(monkeypatch):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


class TestStorefrontConfig:
    def test_from_env(self, monkeypatch):
        clear_env(monkeypatch)
        monkeypatch.setenv("SHOPIFY_SHOP_DOMAIN", "shop.example.com")
        monkeypatch.setenv("SHOPIFY_STOREFRONT_TOKEN", "tok")
        monkeypatch.setenv("SHOPIFY_STOREFRONT_TIMEOUT", "2.5")
        config = StorefrontConfig.from_env()
        assert config.is_configured()
        assert config.api_version == DEFAULT_API_VERSION
        assert config.timeout_s == 2.5
        assert config.endpoint == "https://shop.example.com/api/2024-01/graphql.json"

    def test_defaults_unconfigured(self, monkeypatch):
        clear_env(monkeypatch)
        config = StorefrontConfig.from_env()
        assert not config.is_configured()
        assert config.timeout_s is None

    def test_invalid_timeout_ignored(self, monkeypatch):
        clear_env(monkeypatch)
        monkeypatch.setenv("SHOPIFY_STOREFRONT_TIMEOUT", "soon")
        assert StorefrontConfig.from_env().timeout_s is None

    def test_invalid_delays_fall_back_to_defaults(self, monkeypatch):
        monkeypatch.setenv("SIZEGUIDE_FOCUS_DELAY_MS", "fast")
        monkeypatch.setenv("SIZEGUIDE_HIDE_DELAY_MS", "")
        config = PanelConfig.from_env()
        assert (config.focus_delay_ms, config.hide_delay_ms) == (100, 300)


class TestLoadStorefrontConfig:
    def test_yaml_fallback(self, monkeypatch, tmp_path):
        clear_env(monkeypatch)
        settings = tmp_path / "settings.yaml"
        settings.write_text(
            "storefront:\n  shop_domain: yaml.example.com\n  token: yaml-token\n  api_version: '2024-04'\n  timeout_s: 5\n",
            encoding="utf-8",
        )
        config = load_storefront_config(settings)
        assert config.shop_domain == "yaml.example.com"
        assert config.storefront_token == "yaml-token"
        assert config.api_version == "2024-04"
        assert config.timeout_s == 5.0

    def test_env_wins_over_yaml(self, monkeypatch, tmp_path):
        clear_env(monkeypatch)
        monkeypatch.setenv("SHOPIFY_SHOP_DOMAIN", "env.example.com")
        settings = tmp_path / "settings.yaml"
        settings.write_text("storefront:\n  shop_domain: yaml.example.com\n  token: yaml-token\n", encoding="utf-8")
        config = load_storefront_config(settings)
        assert config.shop_domain == "env.example.com"
        assert config.storefront_token == "yaml-token"

    def test_missing_file(self, monkeypatch, tmp_path):
        clear_env(monkeypatch)
        config = load_storefront_config(tmp_path / "absent.yaml")
        assert not config.is_configured()


class TestPanelAndRedactionConfig:
    def test_panel_defaults(self):
        config = PanelConfig()
        assert config.document_type == "size_guide"
        assert config.empty_message == "No size guide available."
        assert (config.focus_delay_ms, config.hide_delay_ms, config.fetch_limit) == (100, 300, 1)

    def test_panel_env_overrides(self, monkeypatch):
        monkeypatch.setenv("SIZEGUIDE_FOCUS_DELAY_MS", "10")
        monkeypatch.setenv("SIZEGUIDE_HIDE_DELAY_MS", "20")
        config = PanelConfig.from_env()
        assert (config.focus_delay_ms, config.hide_delay_ms) == (10, 20)

    def test_redaction_from_env(self, monkeypatch):
        monkeypatch.setenv("SIZEGUIDE_REDACT_SECRETS", "false")
        monkeypatch.setenv("SHOPIFY_STOREFRONT_TOKEN", "tok")
        cfg = RedactionConfig.from_env()
        assert not cfg.should_redact()
        assert cfg.SECRETS == ("tok",)

    def test_with_secret(self):
        cfg = RedactionConfig().with_secret("abc")
        assert cfg.SECRETS == ("abc",)
        assert cfg.with_secret("abc") is cfg
