"""Tests for configuration, logging setup and the formatter factory."""

import logging

import pytest
from config import Config, configure_logging, create_formatter
from events.exceptions import FeatureEventError, InvalidLinkStyle
from formatters.base import LinkStyle
from pythonjsonlogger.json import JsonFormatter


class TestLinkStyleParse:
    @pytest.mark.parametrize(
        "name,expected",
        [
            ("slack", LinkStyle.SLACK),
            ("SLACK", LinkStyle.SLACK),
            ("md", LinkStyle.MD),
            ("markdown", LinkStyle.MD),
            (LinkStyle.SLACK, LinkStyle.SLACK),
        ],
    )
    def test_known_styles(self, name, expected: LinkStyle) -> None:
        assert LinkStyle.parse(name) is expected

    def test_unknown_style(self) -> None:
        with pytest.raises(InvalidLinkStyle) as exc_info:
            LinkStyle.parse("html")
        assert exc_info.value.error_code == "INVALID_LINK_STYLE"
        assert isinstance(exc_info.value, FeatureEventError)
        assert "html" in exc_info.value.message


class TestCreateFormatter:
    def test_explicit_arguments(self) -> None:
        formatter = create_formatter("https://unleash.example.com/", "slack")
        assert formatter.base_url == "https://unleash.example.com"
        assert formatter.link_style is LinkStyle.SLACK

    def test_falls_back_to_config(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(Config, "UNLEASH_URL", "https://flags.example.com")
        monkeypatch.setattr(Config, "FEATURE_EVENT_LINK_STYLE", "md")
        formatter = create_formatter()
        assert formatter.base_url == "https://flags.example.com"
        assert formatter.link_style is LinkStyle.MD

    def test_missing_base_url(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(Config, "UNLEASH_URL", "")
        with pytest.raises(ValueError, match="UNLEASH_URL"):
            create_formatter()

    def test_invalid_link_style(self) -> None:
        with pytest.raises(InvalidLinkStyle):
            create_formatter("https://u", "html")


class TestConfigureLogging:
    @pytest.fixture(autouse=True)
    def restore_root_logger(self):
        root = logging.getLogger()
        handlers = list(root.handlers)
        level = root.level
        yield
        root.handlers = handlers
        root.setLevel(level)

    def test_installs_json_handler_once(self) -> None:
        configure_logging(debug=False)
        logger = configure_logging(debug=False)
        json_handlers = [
            h for h in logger.handlers if isinstance(h.formatter, JsonFormatter)
        ]
        assert len(json_handlers) == 1
        assert logger.level == logging.INFO

    def test_debug_level(self) -> None:
        logger = configure_logging(debug=True)
        assert logger.level == logging.DEBUG
