"""Tests for commands/rule_options.py."""

from __future__ import annotations

import pytest

from flequit_recurrence.commands.decorators import AppError
from flequit_recurrence.commands.rule_options import resolve_output
from flequit_recurrence.services.config_service import get_config_service
from flequit_recurrence.utils.ui import formatters


@pytest.fixture(autouse=True)
def restore_color():
    original = formatters.console.no_color
    yield
    formatters.console.no_color = original


class TestResolveOutput:
    def test_defaults_from_settings(self):
        assert resolve_output(None) == ("pretty", "%Y-%m-%d %H:%M (%a)")

    def test_flag_wins(self):
        assert resolve_output("JSON")[0] == "json"

    def test_unknown_format(self):
        with pytest.raises(AppError, match="Unknown output format"):
            resolve_output("xml")

    def test_color_follows_setting_both_ways(self):
        service = get_config_service()

        service.set("output.color", False)
        resolve_output(None)
        assert formatters.console.no_color is True

        service.set("output.color", True)
        resolve_output(None)
        assert formatters.console.no_color is False
