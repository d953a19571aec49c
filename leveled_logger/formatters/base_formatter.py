"""
Base formatter interface
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from leveled_logger.core.log_entry import LogEntry


class BaseFormatter(ABC):
    """
    Abstract base class for log formatters.

    Formatters convert LogEntry objects into the bytes written to a sink.
    """

    @abstractmethod
    def format(self, entry: "LogEntry") -> bytes:
        """
        Format a log entry into bytes.

        Args:
            entry: The log entry to format

        Returns:
            Rendered bytes, including any trailing newline

        Raises:
            Exception: If the entry cannot be rendered
        """
        pass

    def __call__(self, entry: "LogEntry") -> bytes:
        """Allow formatters to be callable."""
        return self.format(entry)
