"""Tests for shared logging and console helpers."""

import logging

import pytest
from rich.logging import RichHandler

from shared.cli import create_table, error, handle_errors, warning
from shared.logger import get_logger, setup_logger


class TestLogger:
    """Test logger setup."""

    def test_setup_logger_level(self):
        """Test the requested level is applied."""
        logger = setup_logger("tests.shared.level", level="DEBUG")
        assert logger.level == logging.DEBUG

    def test_setup_logger_idempotent(self):
        """Test repeated setup does not add handlers."""
        setup_logger("tests.shared.idempotent")
        logger = setup_logger("tests.shared.idempotent", level="WARNING")

        rich_handlers = [h for h in logger.handlers if isinstance(h, RichHandler)]
        assert len(rich_handlers) == 1
        assert logger.level == logging.WARNING

    def test_get_logger(self):
        """Test get_logger returns the named logger."""
        assert get_logger("tests.shared.named") is logging.getLogger("tests.shared.named")


class TestHandleErrors:
    """Test handle_errors decorator."""

    def test_passes_through_result(self):
        """Test return value is preserved."""

        @handle_errors
        def ok():
            return 42

        assert ok() == 42

    def test_exception_exits(self):
        """Test unexpected exceptions become exit code 1."""

        @handle_errors
        def broken():
            raise RuntimeError("boom")

        with pytest.raises(SystemExit) as exc_info:
            broken()

        assert exc_info.value.code == 1

    def test_keyboard_interrupt(self):
        """Test interrupts become exit code 130."""

        @handle_errors
        def interrupted():
            raise KeyboardInterrupt

        with pytest.raises(SystemExit) as exc_info:
            interrupted()

        assert exc_info.value.code == 130


class TestCreateTable:
    """Test table creation."""

    def test_create_table(self):
        """Test title is set."""
        table = create_table(title="Cookies")
        assert table.title == "Cookies"


class TestMessages:
    """Test status messages."""

    def test_error_prints_markup_literally(self, capsys):
        """Test square brackets in a message are not parsed as markup."""
        error("bad[/]line")

        assert "bad[/]line" in capsys.readouterr().err

    def test_warning_keeps_tags(self, capsys):
        """Test tag-like text is kept as written."""
        warning("cookie [bold]abc")

        assert "cookie [bold]abc" in capsys.readouterr().err
