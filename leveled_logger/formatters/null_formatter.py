"""Null formatter - renders nothing"""

from leveled_logger.core.log_entry import LogEntry
from leveled_logger.formatters.base_formatter import BaseFormatter


class NullFormatter(BaseFormatter):
    """Inert formatter; a logger using it is silent."""

    def format(self, entry: LogEntry) -> bytes:
        return b""

    def __repr__(self) -> str:
        return "NullFormatter()"
