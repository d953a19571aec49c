"""Logger builder pattern"""

from typing import Any, Dict, List, Tuple, Union

from leveled_logger.core.hooks import Hook, HookFunc, Timing
from leveled_logger.core.log_level import LogLevel
from leveled_logger.core.logger import Logger
from leveled_logger.core.logger_config import LoggerConfig
from leveled_logger.formatters.base_formatter import BaseFormatter


class LoggerBuilder:
    """Builder pattern for logger construction."""

    def __init__(self):
        self._config = LoggerConfig()
        self._custom_formatters: Dict[str, BaseFormatter] = {}
        self._hooks: List[Tuple[Timing, LogLevel, Tuple[Union[Hook, HookFunc], ...]]] = []

    def with_name(self, name: str) -> "LoggerBuilder":
        """Set logger name."""
        self._config.name = name
        return self

    def with_level(self, level: Union[LogLevel, str]) -> "LoggerBuilder":
        """Set minimum log level."""
        self._config.min_level = level
        return self

    def with_sink(self, sink: Any) -> "LoggerBuilder":
        """Set the output stream."""
        self._config.sink = sink
        return self

    def with_formatter(self, name: str) -> "LoggerBuilder":
        """Select the formatter active after build."""
        self._config.formatter = name
        return self

    def with_timestamp_format(self, timestamp_format: str) -> "LoggerBuilder":
        """Set the text formatter's timestamp format."""
        self._config.timestamp_format = timestamp_format
        return self

    def with_colors(self, enabled: bool = True) -> "LoggerBuilder":
        """Force text formatter colors on or off."""
        self._config.colored_output = enabled
        return self

    def add_formatter(self, name: str, formatter: BaseFormatter) -> "LoggerBuilder":
        """
        Register a custom formatter.

        Args:
            name: Formatter name; built-in names are replaced
            formatter: Formatter instance

        Returns:
            Self for method chaining

        Example:
            from leveled_logger.formatters import JSONFormatter

            logger = (LoggerBuilder()
                .add_formatter("json", JSONFormatter("api"))
                .with_formatter("json")
                .build())
        """
        self._custom_formatters[name] = formatter
        return self

    def add_hook(self, timing: Timing, level: LogLevel, *hooks: Union[Hook, HookFunc]) -> "LoggerBuilder":
        """Register hooks for an exact (timing, level) pair."""
        self._hooks.append((timing, level, hooks))
        return self

    def build(self) -> Logger:
        """Build and return configured logger."""
        # Re-run validation on values set through the builder
        config = LoggerConfig(
            name=self._config.name,
            min_level=self._config.min_level,
            sink=self._config.sink,
            formatter=self._config.formatter,
            timestamp_format=self._config.timestamp_format,
            colored_output=self._config.colored_output,
        )
        logger = Logger.from_config(config)

        for name, formatter in self._custom_formatters.items():
            logger.set_formatter(name, formatter)
        if config.formatter in self._custom_formatters:
            logger.swap_formatter(config.formatter)

        for timing, level, hooks in self._hooks:
            logger.add_hook(timing, level, *hooks)

        return logger
