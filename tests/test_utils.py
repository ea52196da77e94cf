"""Unit tests for utility modules."""

import io
import json
import sys
from datetime import datetime, timezone

import pytest
from core.errors import InvalidLength
from ident import is_valid
from internal.logging import LogLevel, StructuredLogger, parse_level
from utils.timestamp import datetime_to_millis, format_timestamp, millis_to_datetime, now_millis


class TestTimestamp:
    """Tests for timestamp utilities."""

    def test_format_timestamp_iso_format(self):
        """Timestamp is ISO 8601 format."""
        ts = format_timestamp()
        assert "T" in ts
        assert ts.endswith("Z")

    def test_format_timestamp_has_milliseconds(self):
        """Timestamp includes exactly three fractional digits."""
        assert format_timestamp(1700000000123) == "2023-11-14T22:13:20.123Z"

    def test_now_millis_returns_int(self):
        """now_millis returns integer."""
        assert isinstance(now_millis(), int)

    def test_now_millis_reasonable_value(self):
        """now_millis returns reasonable timestamp."""
        assert now_millis() > 1577836800000  # 2020-01-01

    def test_millis_datetime_round_trip(self):
        """ms -> datetime -> ms is exact."""
        dt = millis_to_datetime(1700000000999)
        assert dt == datetime(2023, 11, 14, 22, 13, 20, 999000, tzinfo=timezone.utc)
        assert datetime_to_millis(dt) == 1700000000999

    def test_max_timestamp_in_range(self):
        """The largest 42-bit timestamp is a valid datetime."""
        assert millis_to_datetime((1 << 42) - 1).year == 2109


class TestLogging:
    """Tests for the structured logger."""

    def test_emits_json(self):
        """Records are JSON lines with level and fields."""
        stream = io.StringIO()
        logger = StructuredLogger(LogLevel.DEBUG, stream)
        logger.info("issued", count=3)
        record = json.loads(stream.getvalue())
        assert record["level"] == "INFO"
        assert record["msg"] == "issued"
        assert record["count"] == 3

    def test_level_filter(self):
        """Records below the minimum level are dropped."""
        stream = io.StringIO()
        logger = StructuredLogger(LogLevel.WARN, stream)
        logger.info("quiet")
        logger.warn("loud", error=InvalidLength("bad", expected=11, actual=3))
        lines = stream.getvalue().splitlines()
        assert len(lines) == 1
        assert json.loads(lines[0])["err"] == "bad"

    def test_parse_level(self):
        """Config level names map to LogLevel."""
        assert parse_level("debug") == LogLevel.DEBUG
        assert parse_level("WARNING") == LogLevel.WARN
        assert parse_level(None) == LogLevel.INFO


class TestCrashHandler:
    """Tests for crash handling utilities."""

    def test_configure_sets_path(self):
        """configure() sets crash log path."""
        from utils.crash import configure, _crash_log
        original = _crash_log

        configure("/tmp/test_crash.log")
        from utils import crash
        assert crash._crash_log == "/tmp/test_crash.log"

        # Restore
        configure(original)

    def test_install_crash_handler(self):
        """install_crash_handler sets sys.excepthook."""
        from utils.crash import install_crash_handler, log_crash

        original_hook = sys.excepthook
        install_crash_handler()

        assert sys.excepthook == log_crash

        # Restore
        sys.excepthook = original_hook

    def test_log_crash_writes_record(self, tmp_path, capsys):
        """log_crash writes a JSON record tagged with a tracking ID."""
        from utils import crash
        original = crash._crash_log
        crash.configure(str(tmp_path / "logs" / "crash.log"))
        try:
            try:
                raise InvalidLength("bad id", expected=11, actual=2)
            except InvalidLength:
                crash_id = crash.log_crash(*sys.exc_info())
        finally:
            crash.configure(original)

        record = json.loads((tmp_path / "logs" / "crash.log").read_text())
        assert record["id"] == crash_id
        assert is_valid(crash_id)
        assert record["type"] == "InvalidLength"
        assert record["context"] == {"expected": 11, "actual": 2}
        assert crash_id in capsys.readouterr().err
