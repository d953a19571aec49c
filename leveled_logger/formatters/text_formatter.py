"""
Text formatter with colored level, tag and timestamp

Each decoration is rendered through a one-placeholder template compiled
once at import time. Plain string concatenation would produce the same
output; the templates leave room for richer segment layouts.
"""

import io
from dataclasses import dataclass
from datetime import datetime
from string import Template
from typing import Dict, Optional

from leveled_logger.core import color
from leveled_logger.core.log_entry import LogEntry
from leveled_logger.core.log_field import render_body
from leveled_logger.formatters.base_formatter import BaseFormatter

# Month, space-padded day, time with nine fractional digits
STAMP_NANO = "%b %_d %H:%M:%S.%N"


@dataclass(frozen=True)
class TemplateSlot:
    """A compiled template substituting a single key."""

    key: str
    template: Template

    def render(self, value: str) -> str:
        return self.template.substitute({self.key: value})


BASE_TEMPLATES: Dict[str, TemplateSlot] = {
    "LVL": TemplateSlot("Lvl", Template("${Lvl} ")),
    "NAME": TemplateSlot("Name", Template("${Name} ")),
    "TIME": TemplateSlot("Time", Template("${Time} ")),
}


MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def format_timestamp(moment: datetime, timestamp_format: str) -> str:
    """
    Format a timestamp with strftime plus three extensions.

    Args:
        moment: Time to format
        timestamp_format: strftime format; ``%b`` is the English month
                          abbreviation whatever the locale, ``%_d`` the
                          space-padded day and ``%N`` the nine-digit
                          fractional second

    Returns:
        Formatted timestamp
    """
    fmt = (
        timestamp_format
        .replace("%b", MONTH_ABBREVIATIONS[moment.month - 1])
        .replace("%_d", f"{moment.day:>2}")
        .replace("%N", f"{moment.microsecond:06d}000")
    )
    return moment.strftime(fmt)


class TextFormatter(BaseFormatter):
    """
    Format log entries as ``"<LEVEL> <name> <timestamp> <body>\\n"``.

    The level is painted with its level color, the name black and the
    timestamp blue.
    """

    def __init__(
        self,
        name: str = "",
        timestamp_format: str = STAMP_NANO,
        colored: Optional[bool] = None,
        encoding: str = "utf-8",
    ):
        """
        Initialize text formatter.

        Args:
            name: Tag written after the level, usually the logger name
            timestamp_format: Format passed to format_timestamp()
            colored: Force colors on/off; None follows the process-wide
                     switch in leveled_logger.core.color
            encoding: Output encoding

        Example:
            # Default layout
            formatter = TextFormatter("myapp")

            # Second precision, never colored
            formatter = TextFormatter("myapp", "%H:%M:%S", colored=False)
        """
        self.name = name
        self.timestamp_format = timestamp_format
        self.colored = colored
        self.encoding = encoding

    def format(self, entry: LogEntry) -> bytes:
        """
        Format log entry.

        Args:
            entry: Log entry to format

        Returns:
            Encoded, decorated line
        """
        b = io.StringIO()
        self._format_fields(b, entry)
        b.write("\n")
        return b.getvalue().encode(self.encoding)

    def _format_fields(self, b: io.StringIO, entry: LogEntry) -> None:
        timestamp_format = self.timestamp_format or STAMP_NANO

        lvl = entry.entry_level()
        lvl.color()(b, BASE_TEMPLATES["LVL"].render(str(lvl).upper()), enabled=self.colored)
        color.black(b, BASE_TEMPLATES["NAME"].render(self.name), enabled=self.colored)

        timestamp = format_timestamp(entry.created, timestamp_format)
        color.blue(b, BASE_TEMPLATES["TIME"].render(timestamp), enabled=self.colored)

        b.write(render_body(entry.fields))

    def __repr__(self) -> str:
        return f"TextFormatter(name={self.name!r}, timestamp_format={self.timestamp_format!r})"
