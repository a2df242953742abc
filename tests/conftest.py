"""Shared test fixtures and configuration.

Keeps the logger and the settings file inside *tmp_path* so no test touches
the real platformdirs locations.
"""

from __future__ import annotations

import logging
from unittest.mock import patch

import pytest

from flequit_recurrence.models.recurrence import RecurrenceRule


# ---------------------------------------------------------------------------
# Isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def isolated_logger(tmp_path):
    """Point the application log file at tmp_path and reset the singleton."""
    import flequit_recurrence.utils.logger as logger_mod

    logger_mod._logger = None
    logging.getLogger("flequit_recurrence").handlers.clear()
    log_dir = tmp_path / "logs"
    with patch("flequit_recurrence.utils.logger.user_log_dir", return_value=str(log_dir)):
        yield log_dir
    for handler in logging.getLogger("flequit_recurrence").handlers:
        handler.close()
    logging.getLogger("flequit_recurrence").handlers.clear()
    logger_mod._logger = None


@pytest.fixture(autouse=True)
def isolated_config(tmp_path):
    """Keep config.json in tmp_path and give each test a fresh ConfigService."""
    from flequit_recurrence.services.config_service import get_config_service

    config_dir = tmp_path / "config"
    get_config_service.cache_clear()
    with patch(
        "flequit_recurrence.services.config_service.user_config_dir",
        return_value=str(config_dir),
    ):
        yield config_dir
    get_config_service.cache_clear()


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


@pytest.fixture()
def make_rule():
    """Factory building a RecurrenceRule from keyword arguments."""

    def _make(**fields) -> RecurrenceRule:
        return RecurrenceRule.model_validate(fields)

    return _make

