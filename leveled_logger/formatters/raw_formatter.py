"""
Raw formatter for undecorated output

Writes only the message body, one entry per line
"""

from leveled_logger.core.log_entry import LogEntry
from leveled_logger.core.log_field import render_body
from leveled_logger.formatters.base_formatter import BaseFormatter


class RawFormatter(BaseFormatter):
    """
    Format log entries as their bare message body.

    No level, tag or timestamp is added.
    """

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def format(self, entry: LogEntry) -> bytes:
        """
        Format log entry as its body plus a newline.

        Args:
            entry: Log entry to format

        Returns:
            Encoded body
        """
        return (render_body(entry.fields) + "\n").encode(self.encoding)

    def __repr__(self) -> str:
        return "RawFormatter()"
