import logging
import os

from pythonjsonlogger.json import JsonFormatter

from formatters.base import LinkStyle
from formatters.feature_event import FeatureEventFormatter


class Config:
    """Application configuration."""

    # Base URL of the feature toggle UI used for deep links
    UNLEASH_URL = os.environ.get("UNLEASH_URL", "")

    # Link syntax for generated text: "slack" or "md"
    FEATURE_EVENT_LINK_STYLE = os.environ.get("FEATURE_EVENT_LINK_STYLE", "md")

    DEBUG = os.getenv("DEBUG", "false").lower() == "true"


def configure_logging(debug: bool | None = None) -> logging.Logger:
    """Attach a JSON stream handler to the root logger.

    Args:
        debug: Enable debug logging. Defaults to Config.DEBUG.

    Returns:
        The configured root logger.
    """
    if debug is None:
        debug = Config.DEBUG

    logger = logging.getLogger()
    if not any(isinstance(h.formatter, JsonFormatter) for h in logger.handlers):
        log_handler = logging.StreamHandler()
        log_handler.setFormatter(JsonFormatter())
        logger.addHandler(log_handler)

    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    return logger


def create_formatter(
    base_url: str | None = None,
    link_style: LinkStyle | str | None = None,
) -> FeatureEventFormatter:
    """Create a feature event formatter from arguments or configuration.

    Args:
        base_url: Base URL for feature links. Defaults to Config.UNLEASH_URL.
        link_style: Link style member or name. Defaults to
            Config.FEATURE_EVENT_LINK_STYLE.

    Returns:
        Configured FeatureEventFormatter.

    Raises:
        ValueError: If no base URL is configured.
        InvalidLinkStyle: If the link style name is unknown.
    """
    if base_url is None:
        base_url = Config.UNLEASH_URL
    if link_style is None:
        link_style = Config.FEATURE_EVENT_LINK_STYLE

    if not base_url:
        raise ValueError("Missing required configuration: UNLEASH_URL")

    return FeatureEventFormatter(base_url.rstrip("/"), LinkStyle.parse(link_style))
