# Logger sécurisé: masque le jeton Storefront et les en-têtes d'accès
import logging
import re
from typing import Any, Dict

from .handlers import create_console_handler
from ..config import DEFAULT_REDACTION_CONFIG, RedactionConfig

_TOKEN_HEADER_PATTERN = re.compile(
    r"(X-Shopify-Storefront-Access-Token['\"]?\s*[:=]\s*['\"]?)([^'\",\s}]+)",
    re.IGNORECASE,
)


def redact_secrets(text: str, cfg: RedactionConfig) -> str:
    """Replace every configured secret and access-token header value."""
    if not cfg.should_redact() or not text:
        return text
    redacted = _TOKEN_HEADER_PATTERN.sub(lambda m: m.group(1) + cfg.PLACEHOLDER, text)
    for secret in cfg.SECRETS:
        if secret:
            redacted = redacted.replace(secret, cfg.PLACEHOLDER)
    return redacted


class SafeLoggerAdapter(logging.LoggerAdapter):
    """Adaptateur de logger qui masque automatiquement les secrets."""

    def __init__(self, logger: logging.Logger, extra: Dict[str, Any] = None, cfg: RedactionConfig = None):
        super().__init__(logger, extra or {})
        self.cfg = cfg or DEFAULT_REDACTION_CONFIG

    def process(self, msg, kwargs):
        if 'extra' in kwargs and isinstance(kwargs['extra'], dict):
            kwargs['extra'] = self._sanitize_extra(kwargs['extra'])
        return msg, kwargs

    def _sanitize_extra(self, extra: Dict[str, Any]) -> Dict[str, Any]:
        if not self.cfg.should_redact():
            return extra
        return {
            key: redact_secrets(value, self.cfg) if isinstance(value, str) else value
            for key, value in extra.items()
        }

    def _render(self, msg, args):
        """Format loguru-style ``{}`` placeholders, then redact the result.

        Returns the final message and the positional args still to be applied
        by the standard ``%`` formatting.
        """
        if args and isinstance(msg, str) and '{}' in msg:
            try:
                formatted = msg.format(*args)
            except (IndexError, KeyError, ValueError):
                formatted = msg
            return redact_secrets(formatted, self.cfg), ()

        if isinstance(msg, str):
            msg = redact_secrets(msg, self.cfg)
        safe_args = tuple(
            redact_secrets(arg, self.cfg) if isinstance(arg, str) else arg
            for arg in args
        )
        return msg, safe_args

    def debug(self, msg, *args, **kwargs):
        msg, args = self._render(msg, args)
        super().debug(msg, *args, **kwargs)

    def info(self, msg, *args, **kwargs):
        msg, args = self._render(msg, args)
        super().info(msg, *args, **kwargs)

    def warning(self, msg, *args, **kwargs):
        msg, args = self._render(msg, args)
        super().warning(msg, *args, **kwargs)

    def error(self, msg, *args, **kwargs):
        msg, args = self._render(msg, args)
        super().error(msg, *args, **kwargs)

    def exception(self, msg, *args, exc_info=True, **kwargs):
        msg, args = self._render(msg, args)
        super().exception(msg, *args, exc_info=exc_info, **kwargs)


def get_safe_logger(name: str, cfg: RedactionConfig = None) -> SafeLoggerAdapter:
    """Crée un logger qui masque les secrets Storefront.

    Args:
        name: Nom du logger (généralement __name__)
        cfg: Configuration de masquage (config par défaut si None)

    Returns:
        Logger sécurisé
    """
    base_logger = logging.getLogger(name)

    # Root handlers are installed by main.py; only fall back when nothing is configured
    root_logger = logging.getLogger()
    if not root_logger.handlers and not base_logger.handlers and base_logger.parent is logging.root:
        base_logger.setLevel(logging.INFO)
        base_logger.addHandler(create_console_handler(level=logging.INFO))

    return SafeLoggerAdapter(base_logger, cfg=cfg or DEFAULT_REDACTION_CONFIG)


def configure_logging_with_redaction(
    level: int = logging.INFO,
    format_string: str = None,
    cfg: RedactionConfig = None,
):
    """Configure le logging global avec masquage des secrets."""
    if format_string is None:
        format_string = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

    logging.basicConfig(level=level, format=format_string, datefmt='%Y-%m-%d %H:%M:%S')

    config = cfg or DEFAULT_REDACTION_CONFIG
    logger = get_safe_logger(__name__, cfg=config)
    if config.should_redact():
        logger.info("Secret redaction enabled for log output")
    else:
        logger.warning("Secret redaction disabled - storefront tokens may appear in logs")
