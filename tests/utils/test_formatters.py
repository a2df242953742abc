"""Tests for output formatters."""

import json
from datetime import datetime

import yaml

from flequit_recurrence.utils.ui.formatters import format_occurrences, format_output

DATES = [datetime(2024, 1, 4, 9), datetime(2024, 1, 8, 9)]


def test_json_occurrences(capsys):
    format_occurrences(DATES, "%Y-%m-%d", "json")
    assert json.loads(capsys.readouterr().out) == ["2024-01-04T09:00:00", "2024-01-08T09:00:00"]


def test_yaml_occurrences(capsys):
    format_occurrences(DATES, "%Y-%m-%d", "yaml")
    assert yaml.safe_load(capsys.readouterr().out) == [
        "2024-01-04T09:00:00",
        "2024-01-08T09:00:00",
    ]


def test_pretty_occurrences_use_date_format(capsys):
    format_occurrences(DATES, "%d.%m.%Y", "pretty")
    out = capsys.readouterr().out
    assert "04.01.2024" in out
    assert "08.01.2024" in out


def test_no_occurrences(capsys):
    format_occurrences([], "%Y-%m-%d", "table")
    assert "No further occurrences" in capsys.readouterr().out


def test_empty_json_list(capsys):
    format_occurrences([], "%Y-%m-%d", "json")
    assert json.loads(capsys.readouterr().out) == []


def test_format_output_json_dict(capsys):
    format_output({"title": "x", "count": 2}, "json")
    assert json.loads(capsys.readouterr().out) == {"title": "x", "count": 2}
