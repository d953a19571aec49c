"""
Logger configuration management
"""

from dataclasses import dataclass
from typing import Any, Optional

from leveled_logger.core.log_level import LogLevel
from leveled_logger.formatters.text_formatter import STAMP_NANO


@dataclass
class LoggerConfig:
    """Logger configuration."""

    # Basic settings
    name: str = "logger"
    min_level: LogLevel = LogLevel.INFO

    # Output settings
    sink: Optional[Any] = None  # None: sys.stderr at build time
    formatter: str = "null"

    # Text formatter settings
    timestamp_format: str = STAMP_NANO
    colored_output: Optional[bool] = None  # None: follow terminal probe

    def __post_init__(self):
        """Validate configuration after initialization."""
        if isinstance(self.min_level, str):
            self.min_level = LogLevel.from_string(self.min_level)
        else:
            self.min_level = LogLevel(self.min_level)
        if self.min_level == LogLevel.UNRECOGNIZED:
            raise ValueError("min_level must be a recognized level")
        if not self.formatter:
            raise ValueError("formatter name cannot be empty")
        if not self.timestamp_format:
            raise ValueError("timestamp_format cannot be empty")

    @classmethod
    def default(cls) -> "LoggerConfig":
        """Create default configuration."""
        return cls()

    @classmethod
    def debug_config(cls) -> "LoggerConfig":
        """Create configuration for debugging."""
        return cls(
            min_level=LogLevel.DEBUG,
            formatter="text",
        )

    @classmethod
    def production_config(cls) -> "LoggerConfig":
        """Create configuration for production."""
        return cls(
            min_level=LogLevel.WARN,
            formatter="raw",
            colored_output=False,
        )
