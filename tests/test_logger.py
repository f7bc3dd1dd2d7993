"""
Tests for the shared logger setup.
"""

import logging

import pytest

from querytrack.utils.logger import ColoredFormatter, Colors, set_level, setup_logger


@pytest.fixture
def restore_level():
    yield
    set_level("INFO")


def _record(level):
    return logging.LogRecord("querytrack.test", level, __file__, 1, "message", None, None)


class TestSetLevel:
    def test_applies_to_existing_module_loggers(self, restore_level):
        module_logger = setup_logger("querytrack.store.record_store")

        set_level("DEBUG")

        assert module_logger.level == logging.DEBUG
        assert logging.getLogger().level == logging.DEBUG

    def test_quiets_module_loggers(self, restore_level):
        module_logger = setup_logger("querytrack.report.aggregator")

        set_level("warning")

        assert not module_logger.isEnabledFor(logging.INFO)
        assert module_logger.isEnabledFor(logging.WARNING)


class TestColoredFormatter:
    def test_levels_map_to_color_names(self):
        for name in ColoredFormatter.LEVEL_COLORS.values():
            assert hasattr(Colors, name)

    def test_tint_follows_current_colors(self, monkeypatch):
        monkeypatch.setattr(Colors, "YELLOW", "<y>")
        monkeypatch.setattr(Colors, "RESET", "</>")

        line = ColoredFormatter("%(message)s").format(_record(logging.WARNING))

        assert line == "<y>message</>"

    def test_disabled_colors_leave_plain_text(self, monkeypatch):
        for name in ("GREY", "RESET"):
            monkeypatch.setattr(Colors, name, "")

        assert ColoredFormatter("%(message)s").format(_record(logging.INFO)) == "message"
