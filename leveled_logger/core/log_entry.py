"""
Log entry data structure
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING, List

from leveled_logger.core.log_field import Field
from leveled_logger.core.log_level import LogLevel

if TYPE_CHECKING:
    from leveled_logger.core.logger import Logger


@dataclass
class LogEntry:
    """
    One log event.

    Holds a non-owning reference to the Logger that created it; rendering
    and writing go through that logger's active formatter and sink.
    """

    logger: "Logger"
    level: LogLevel
    fields: List[Field] = field(default_factory=list)
    created: datetime = field(default_factory=datetime.now)

    def set_entry_level(self, level: LogLevel) -> None:
        """Override the level of this entry."""
        self.level = level

    def entry_level(self) -> LogLevel:
        """
        Get the effective level of this entry.

        Returns:
            The entry's own level, or the owning logger's level when the
            entry level is UNRECOGNIZED
        """
        if self.level != LogLevel.UNRECOGNIZED:
            return self.level
        return self.logger.level

    def read(self) -> bytes:
        """Render this entry with the owning logger's active formatter."""
        return self.logger.format(self)

    def write(self, data: bytes) -> int:
        """Write rendered bytes through to the owning logger's sink."""
        return self.logger.write(data)

    def __repr__(self) -> str:
        return (
            f"LogEntry(level={self.level.name}, fields={len(self.fields)}, "
            f"created={self.created.isoformat()})"
        )
