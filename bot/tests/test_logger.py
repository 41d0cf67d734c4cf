# bot/tests/test_logger.py
"""
Tests for bot/logger.py

Covers:
- format_timestamp()  — 'DD/MM. H:mm:ss', hour not zero-padded
- severity_color()    — one colour per severity, white fallback
- ConsoleFormatter    — '<time> [<source>] <message>', colour on/off, tracebacks
- setup_audit_logger() — plain lines, no propagation
"""

import logging
import pytest
from datetime import datetime


def _record(level=logging.INFO, name="discord.gateway", msg="Shard ID None has connected", exc_info=None):
    record = logging.LogRecord(name, level, __file__, 1, msg, None, exc_info)
    record.created = datetime(2025, 1, 31, 9, 4, 7).timestamp()
    return record


class TestFormatTimestamp:

    def test_single_digit_hour_is_not_padded(self):
        from logger import format_timestamp
        assert format_timestamp(datetime(2025, 1, 31, 9, 4, 7)) == "31/01. 9:04:07"

    def test_two_digit_hour(self):
        from logger import format_timestamp
        assert format_timestamp(datetime(2025, 12, 5, 23, 59, 0)) == "05/12. 23:59:00"


class TestSeverityColor:

    @pytest.mark.parametrize("level, color", [
        (logging.CRITICAL, "\x1b[31m"),
        (logging.ERROR, "\x1b[33m"),
        (logging.WARNING, "\x1b[35m"),
        (logging.INFO, "\x1b[36m"),
        (logging.DEBUG, "\x1b[34m"),
    ])
    def test_library_severities(self, level, color):
        from logger import severity_color
        assert severity_color(level) == color

    def test_verbose_is_green(self):
        from logger import VERBOSE, severity_color
        assert severity_color(VERBOSE) == "\x1b[32m"
        assert logging.getLevelName(VERBOSE) == "VERBOSE"

    def test_unknown_level_is_white(self):
        from logger import severity_color
        assert severity_color(42) == "\x1b[37m"


class TestConsoleFormatter:

    def test_plain_layout(self):
        from logger import ConsoleFormatter
        line = ConsoleFormatter(colored=False).format(_record())
        assert line == "31/01. 9:04:07 [discord.gateway] Shard ID None has connected"

    def test_colored_line_is_wrapped(self):
        from logger import ConsoleFormatter, RESET
        line = ConsoleFormatter(colored=True).format(_record(level=logging.WARNING))
        assert line.startswith("\x1b[35m31/01. 9:04:07 [discord.gateway]")
        assert line.endswith(RESET)

    def test_includes_traceback(self):
        from logger import ConsoleFormatter
        try:
            raise ValueError("broken")
        except ValueError:
            import sys
            record = _record(level=logging.ERROR, exc_info=sys.exc_info())

        line = ConsoleFormatter(colored=False).format(record)
        assert "Traceback" in line
        assert "ValueError: broken" in line


class TestAuditLogger:

    def test_writes_plain_lines_without_propagating(self, tmp_path):
        from logger import setup_audit_logger
        log_file = tmp_path / "audit.log"
        audit = setup_audit_logger(str(log_file))
        try:
            audit.info("31/01. 9:04:07 | CPU: 1.0% | RAM: 2.0% | Location: a DM | Command: /ping")
            for handler in audit.handlers:
                handler.flush()

            assert audit.propagate is False
            assert log_file.read_text(encoding="utf-8").strip() == (
                "31/01. 9:04:07 | CPU: 1.0% | RAM: 2.0% | Location: a DM | Command: /ping"
            )
        finally:
            for handler in list(audit.handlers):
                audit.removeHandler(handler)
                handler.close()
            audit.propagate = True
