import logging

from sizeguide.config import RedactionConfig
from sizeguide.logging.safe_logger import get_safe_logger, redact_secrets


class TestRedaction:
    def test_literal_secret_masked(self):
        cfg = RedactionConfig(SECRETS=("tok-123",))
        assert redact_secrets("token tok-123 used", cfg) == "token [REDACTED] used"

    def test_header_value_masked(self):
        cfg = RedactionConfig()
        text = "headers={'X-Shopify-Storefront-Access-Token': 'abc'}"
        assert "abc" not in redact_secrets(text, cfg)

    def test_disabled(self):
        cfg = RedactionConfig(ENFORCED=False, SECRETS=("tok",))
        assert redact_secrets("tok", cfg) == "tok"


class TestSafeLoggerAdapter:
    def test_brace_placeholders_formatted_and_redacted(self, caplog):
        cfg = RedactionConfig(SECRETS=("tok-123",))
        logger = get_safe_logger("sizeguide.tests.safe", cfg=cfg)
        caplog.set_level(logging.INFO, logger="sizeguide.tests.safe")
        logger.info("Fetching {} with {}", "size_guide", "tok-123")
        assert "Fetching size_guide with [REDACTED]" in caplog.text

    def test_percent_args_redacted(self, caplog):
        cfg = RedactionConfig(SECRETS=("tok-123",))
        logger = get_safe_logger("sizeguide.tests.percent", cfg=cfg)
        caplog.set_level(logging.INFO, logger="sizeguide.tests.percent")
        logger.warning("token=%s", "tok-123")
        assert "token=[REDACTED]" in caplog.text
