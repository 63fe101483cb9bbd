"""Unit tests for logging configuration."""

import json
import logging
import sys
from decimal import Decimal
from uuid import uuid4

import pytest

from domain.errors import BudgetError, BudgetErrors
from infrastructure.config import ROOT_LOGGER_NAME, get_logger, setup_logger
from infrastructure.config.logger import JSONFormatter, TextFormatter


def _record(message="hello", level=logging.INFO, exc_info=None):
    return logging.LogRecord(
        name="budgeting.test", level=level, pathname=__file__, lineno=10,
        msg=message, args=(), exc_info=exc_info,
    )


class TestGetLogger:
    """Test logger naming."""

    def test_children_live_under_root(self):
        """Test that names are prefixed with the application root."""
        assert get_logger("SpendUseCase").name == f"{ROOT_LOGGER_NAME}.SpendUseCase"

    def test_prefixed_names_are_kept(self):
        """Test that already prefixed names are not doubled."""
        assert get_logger(f"{ROOT_LOGGER_NAME}.db").name == f"{ROOT_LOGGER_NAME}.db"
        assert get_logger().name == ROOT_LOGGER_NAME


class TestSetupLogger:
    """Test logger setup."""

    def test_json_format(self):
        """Test that json format installs a single JSON handler."""
        logger = setup_logger(name="budgeting-test-json", level="debug", log_format="json")
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0].formatter, JSONFormatter)
        assert logger.propagate is False

    def test_setup_twice_replaces_handlers(self):
        """Test that repeated setup does not stack handlers."""
        setup_logger(name="budgeting-test-text", log_format="text")
        logger = setup_logger(name="budgeting-test-text", log_format="text")
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0].formatter, TextFormatter)


class TestFormatters:
    """Test log formatting."""

    def test_json_formatter(self):
        """Test structured output fields."""
        data = json.loads(JSONFormatter().format(_record()))
        assert data["level"] == "INFO"
        assert data["logger"] == "budgeting.test"
        assert data["message"] == "hello"
        assert data["timestamp"].endswith("+00:00")

    def test_json_formatter_includes_exception(self):
        """Test that exception info is rendered."""
        try:
            raise ValueError("boom")
        except ValueError:
            record = _record(level=logging.ERROR, exc_info=sys.exc_info())
        data = json.loads(JSONFormatter().format(record))
        assert "ValueError: boom" in data["exception"]

    @pytest.mark.parametrize("level", [logging.DEBUG, logging.WARNING])
    def test_text_formatter(self, level):
        """Test the human readable line."""
        output = TextFormatter().format(_record(level=level))
        assert logging.getLevelName(level) in output
        assert "budgeting.test - hello" in output


class TestStructuredContext:
    """Test context passed through ``extra``."""

    def test_json_includes_extra_fields(self):
        """Test that ids and amounts from extra are serialized."""
        record = _record()
        budget_id = uuid4()
        record.budget_id = budget_id
        record.amount = Decimal("25.50")
        data = json.loads(JSONFormatter().format(record))
        assert data["budget_id"] == str(budget_id)
        assert data["amount"] == "25.50"
        assert "args" not in data

    def test_json_includes_domain_error_code(self):
        """Test that a logged domain error exposes its code."""
        try:
            raise BudgetErrors.budget_not_found()
        except BudgetError:
            record = _record(level=logging.ERROR, exc_info=sys.exc_info())
        data = json.loads(JSONFormatter().format(record))
        assert data["exception_type"] == "BudgetError"
        assert data["error_code"] == "BUDGET_NOT_FOUND"

    def test_text_appends_context(self):
        """Test that context is rendered as key=value pairs."""
        record = _record()
        record.user_id = "user-1"
        output = TextFormatter().format(record)
        assert output.endswith("| user_id=user-1")
