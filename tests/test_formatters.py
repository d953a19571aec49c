"""Tests for log formatters"""

import json
from datetime import datetime

import pytest

from leveled_logger import LogEntry, Logger, LogLevel
from leveled_logger.core import color
from leveled_logger.core.log_field import Field, make_fields, make_format_fields, render_body
from leveled_logger.formatters import (
    STAMP_NANO,
    JSONFormatter,
    NullFormatter,
    RawFormatter,
    TextFormatter,
    default_formatters,
)
from leveled_logger.formatters.text_formatter import BASE_TEMPLATES, format_timestamp

MOMENT = datetime(2024, 1, 2, 3, 4, 5, 123456)


@pytest.fixture
def logger(buffer):
    return Logger(buffer, LogLevel.DEBUG, "TEST")


def entry_for(logger, level, fields):
    return LogEntry(logger, level, fields, created=MOMENT)


class TestRenderBody:
    """Test message body rendering."""

    def test_concatenates_without_separator(self):
        assert render_body(make_fields(0, "a", "b", 3)) == "ab3"

    def test_sorts_by_order(self):
        fields = [Field(2, "c", "3"), Field(0, "a", "1"), Field(1, "b", "2")]
        assert render_body(fields) == "123"

    def test_sort_is_stable(self):
        fields = [Field(1, "x", "first"), Field(0, "y", "zero"), Field(1, "z", "second")]
        assert render_body(fields) == "zerofirstsecond"

    def test_format_field(self):
        assert render_body(make_format_fields("%s=%d", "answer", 42)) == "answer=42"

    def test_format_without_args(self):
        assert render_body(make_format_fields("100%%")) == "100%"

    def test_missing_argument_keeps_template(self):
        assert render_body(make_format_fields("%s %s", "only one")) == "%s %s%!(EXTRA only one)"

    def test_wrong_argument_type_keeps_values(self):
        body = render_body(make_format_fields("disk %d%% full", "ninety"))
        assert body == "disk %d%% full%!(EXTRA ninety)"

    def test_incomplete_template_without_args(self):
        assert render_body(make_format_fields("100%")) == "100%"


class TestNullFormatter:
    """Test null formatter."""

    @pytest.mark.parametrize("level", list(LogLevel))
    def test_always_empty(self, logger, level):
        entry = entry_for(logger, level, make_fields(0, "MESSAGE"))
        assert NullFormatter().format(entry) == b""


class TestRawFormatter:
    """Test raw formatter."""

    def test_format(self, logger):
        entry = entry_for(logger, LogLevel.ERROR, make_fields(0, "MESSAGE"))
        assert RawFormatter().format(entry) == b"MESSAGE\n"

    def test_no_decoration(self, logger):
        entry = entry_for(logger, LogLevel.ERROR, make_fields(0, "MESSAGE"))
        output = RawFormatter().format(entry)
        assert b"ERROR" not in output
        assert b"TEST" not in output

    def test_callable(self, logger):
        entry = entry_for(logger, LogLevel.INFO, make_fields(0, "x"))
        assert RawFormatter()(entry) == b"x\n"


class TestTextFormatter:
    """Test text formatter."""

    def test_format(self, logger):
        entry = entry_for(logger, LogLevel.INFO, make_fields(0, "MESSAGE"))
        output = TextFormatter("TEST").format(entry)
        assert output == b"INFO TEST Jan  2 03:04:05.123456000 MESSAGE\n"

    def test_format_fields(self, logger):
        entry = entry_for(logger, LogLevel.WARN, make_format_fields("%s-%s", "a", "b"))
        output = TextFormatter("svc", "%H:%M:%S").format(entry)
        assert output == b"WARN svc 03:04:05 a-b\n"

    def test_uses_effective_level(self, buffer):
        logger = Logger(buffer, LogLevel.ERROR, "TEST")
        entry = entry_for(logger, LogLevel.UNRECOGNIZED, make_fields(0, "x"))
        assert TextFormatter("TEST").format(entry).startswith(b"ERROR ")

    def test_colored(self, logger):
        entry = entry_for(logger, LogLevel.INFO, make_fields(0, "MESSAGE"))
        output = TextFormatter("TEST", "%H:%M:%S", colored=True).format(entry).decode()
        assert output == (
            "\x1b[92mINFO \x1b[0m"
            "\x1b[90mTEST \x1b[0m"
            "\x1b[94m03:04:05 \x1b[0m"
            "MESSAGE\n"
        )

    def test_follows_process_switch(self, logger):
        entry = entry_for(logger, LogLevel.PANIC, make_fields(0, "x"))
        formatter = TextFormatter("TEST")

        assert b"\x1b[" not in formatter.format(entry)
        color.set_no_color(False)
        assert formatter.format(entry).startswith(b"\x1b[91mPANIC \x1b[0m")

    def test_empty_timestamp_format_uses_default(self, logger):
        entry = entry_for(logger, LogLevel.INFO, make_fields(0, "x"))
        formatter = TextFormatter("TEST", "")
        assert b"Jan  2 03:04:05.123456000" in formatter.format(entry)

    def test_templates(self):
        assert set(BASE_TEMPLATES) == {"LVL", "NAME", "TIME"}
        assert BASE_TEMPLATES["NAME"].render("app") == "app "


class TestTimestamp:
    """Test timestamp formatting."""

    def test_stamp_nano(self):
        assert format_timestamp(MOMENT, STAMP_NANO) == "Jan  2 03:04:05.123456000"

    def test_two_digit_day(self):
        moment = datetime(2024, 12, 25, 23, 59, 59)
        assert format_timestamp(moment, STAMP_NANO) == "Dec 25 23:59:59.000000000"

    @pytest.mark.parametrize("month, name", list(enumerate(
        ["Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"],
        start=1,
    )))
    def test_english_month(self, month, name):
        moment = datetime(2024, month, 9, 12, 0, 0)
        assert format_timestamp(moment, STAMP_NANO) == f"{name}  9 12:00:00.000000000"

    def test_plain_strftime(self):
        assert format_timestamp(MOMENT, "%Y-%m-%d") == "2024-01-02"


class TestJSONFormatter:
    """Test JSON formatter."""

    def test_format(self, logger):
        entry = entry_for(logger, LogLevel.INFO, make_format_fields("%s!", "hi"))
        data = json.loads(JSONFormatter("api").format(entry))

        assert data["level"] == "info"
        assert data["logger"] == "api"
        assert data["message"] == "hi!"
        assert data["timestamp"] == MOMENT.isoformat()
        assert data["fields"] == {"Format": "%s!", "Field1": "hi"}

    def test_one_line(self, logger):
        entry = entry_for(logger, LogLevel.INFO, make_fields(0, "x"))
        output = JSONFormatter().format(entry)
        assert output.endswith(b"\n")
        assert output.count(b"\n") == 1

    def test_without_fields_or_name(self, logger):
        entry = entry_for(logger, LogLevel.INFO, make_fields(0, "x"))
        data = json.loads(JSONFormatter(include_fields=False).format(entry))
        assert "fields" not in data
        assert "logger" not in data

    def test_non_serializable_value(self, logger):
        entry = entry_for(logger, LogLevel.INFO, make_fields(0, MOMENT))
        data = json.loads(JSONFormatter().format(entry))
        assert data["fields"]["Field0"] == str(MOMENT)


class TestDefaultFormatters:
    """Test formatters installed on new loggers."""

    def test_names(self):
        formatters = default_formatters("TEST")
        assert isinstance(formatters["null"], NullFormatter)
        assert isinstance(formatters["raw"], RawFormatter)
        assert isinstance(formatters["text"], TextFormatter)
        assert formatters["text"].name == "TEST"
        assert formatters["text"].timestamp_format == STAMP_NANO
