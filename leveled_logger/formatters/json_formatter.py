"""
JSON formatter for structured logging

Formats log entries as one JSON object per line
"""

import json
from typing import Optional

from leveled_logger.core.log_entry import LogEntry
from leveled_logger.core.log_field import render_body, sort_fields
from leveled_logger.formatters.base_formatter import BaseFormatter


class JSONFormatter(BaseFormatter):
    """
    Format log entries as JSON objects.

    Not installed on new loggers; register it with
    ``logger.set_formatter("json", JSONFormatter("myapp"))``.
    """

    def __init__(
        self,
        name: str = "",
        include_fields: bool = True,
        indent: Optional[int] = None,
        ensure_ascii: bool = False,
    ):
        """
        Initialize JSON formatter.

        Args:
            name: Logger tag written under "logger" (omitted when empty)
            include_fields: Include the raw fields keyed by field key
            indent: JSON indentation (None for one line per entry)
            ensure_ascii: Escape non-ASCII characters

        Example:
            # Compact JSON (one line per entry)
            formatter = JSONFormatter("myapp")

            # Message only
            formatter = JSONFormatter(include_fields=False)
        """
        self.name = name
        self.include_fields = include_fields
        self.indent = indent
        self.ensure_ascii = ensure_ascii

    def format(self, entry: LogEntry) -> bytes:
        """
        Format log entry as JSON.

        Args:
            entry: Log entry to format

        Returns:
            Encoded JSON document plus newline
        """
        log_dict = {
            "timestamp": entry.created.isoformat(),
            "level": str(entry.entry_level()),
            "message": render_body(entry.fields),
        }

        if self.name:
            log_dict["logger"] = self.name

        if self.include_fields:
            log_dict["fields"] = {fd.key: fd.value for fd in sort_fields(entry.fields)}

        text = json.dumps(
            log_dict,
            indent=self.indent,
            ensure_ascii=self.ensure_ascii,
            default=str,
        )
        return (text + "\n").encode("utf-8")

    def __repr__(self) -> str:
        return f"JSONFormatter(name={self.name!r}, indent={self.indent})"
