# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.

"""Unit tests for the config_logging.py module."""

import logging
from typing import Any

import pytest

from siteicons.config import settings
from siteicons.config_logging import GCPCompatibleJSONFormatter, configure_logging


@pytest.fixture(autouse=True)
def restore_logging_format():
    """Restore the configured log format after each test."""
    old_format = settings.logging.format
    yield
    settings.logging.format = old_format
    configure_logging()


def test_configure_logging_invalid_format() -> None:
    """Test that configure_logging will raise a ValueError when encountering unknown log
    formats.
    """
    settings.logging.format = "invalid"

    with pytest.raises(ValueError) as excinfo:
        configure_logging()

    assert "Invalid log format:" in str(excinfo)


def test_configure_logging_mozlog_production() -> None:
    """Test that configure_logging will raise a ValueError when using a format other
    than 'mozlog' in production.
    """
    with settings.using_env("production"):
        old_format = settings.logging.format
        settings.logging.format = "pretty"

        with pytest.raises(ValueError) as excinfo:
            configure_logging()

        assert "Log format must be 'mozlog' in production" in str(excinfo)

        settings.logging.format = old_format


def test_configure_log_handler_assigned_mozlog() -> None:
    """Test that the log handler is assigned as expected when the configured format is 'mozlog'"""
    settings.logging.format = "mozlog"
    configure_logging()

    log_manager: Any = logging.root.manager
    handler_name: Any = log_manager.loggerDict["siteicons"].handlers[0].name
    assert handler_name == "console-mozlog"


def test_configure_log_handler_assigned_pretty() -> None:
    """Test that the log handler is assigned as expected when the configured format is 'pretty'"""
    settings.logging.format = "pretty"
    configure_logging()

    log_manager: Any = logging.root.manager
    handler_name: Any = log_manager.loggerDict["siteicons"].handlers[0].name
    assert handler_name == "console-pretty"


def test_gcp_formatter_adds_severity() -> None:
    """Test that the JSON formatter writes the GCP severity of a record."""
    formatter = GCPCompatibleJSONFormatter(logger_name="siteicons")
    record = logging.LogRecord(
        name="siteicons.scraper",
        level=logging.WARNING,
        pathname=__file__,
        lineno=1,
        msg="Dropping icon candidate",
        args=(),
        exc_info=None,
    )

    out = formatter.convert_record(record)

    assert out["severity"] == 400
