"""
Main Logger class - synchronous leveled logger

Every call runs the same pipeline: PRE hooks, render with the active
formatter, write to the sink, POST hooks. Failures inside the pipeline
are reported to the diagnostic stream and never reach the caller; only
the FATAL and PANIC hooks end the caller's control flow.
"""

from __future__ import annotations

import io
import sys
import threading
from functools import partial
from typing import TYPE_CHECKING, Any, BinaryIO, Callable, Dict, List, Optional, TextIO, Union

from leveled_logger.core.hooks import Hook, HookFunc, Hooks, Timing
from leveled_logger.core.log_entry import LogEntry
from leveled_logger.core.log_field import make_fields, make_format_fields
from leveled_logger.core.log_level import LogLevel
from leveled_logger.formatters import BaseFormatter, NullFormatter, default_formatters

if TYPE_CHECKING:
    from leveled_logger.core.logger_config import LoggerConfig

Sink = Union[BinaryIO, TextIO]


def write_to(stream: Sink, data: bytes) -> int:
    """
    Write rendered bytes to a binary or text stream.

    Text streams (io.TextIOBase) receive the UTF-8 decoded string.

    Returns:
        Number of bytes consumed
    """
    if not data:
        return 0
    if isinstance(stream, io.TextIOBase):
        stream.write(data.decode("utf-8", errors="replace"))
    else:
        stream.write(data)
    return len(data)


def _report(message: str) -> None:
    print(f"log: {message}", file=sys.stdout)


class Logger:
    """Leveled logger writing to a single sink."""

    def __init__(self, sink: Sink, level: LogLevel = LogLevel.INFO, tag: str = "logger"):
        """
        Initialize logger.

        Args:
            sink: Stream the logger owns and writes rendered entries to
            level: Minimum level; calls above it (more verbose) are dropped
            tag: Name written by the text formatter
        """
        self._sink = sink
        self._level = LogLevel(level)
        self._tag = tag
        self._formatters: Dict[str, BaseFormatter] = default_formatters(tag)
        self._formatter: BaseFormatter = NullFormatter()
        self._hooks = Hooks()
        self._lock = threading.RLock()
        self.swap_formatter("null")

    @classmethod
    def from_config(cls, config: "LoggerConfig") -> "Logger":
        """Create a logger from configuration."""
        sink = config.sink if config.sink is not None else sys.stderr
        logger = cls(sink, config.min_level, config.name)
        for name, formatter in default_formatters(
            config.name, config.timestamp_format, config.colored_output
        ).items():
            logger.set_formatter(name, formatter)
        logger.swap_formatter(config.formatter)
        return logger

    @property
    def level(self) -> LogLevel:
        return self._level

    @property
    def tag(self) -> str:
        return self._tag

    @property
    def sink(self) -> Sink:
        return self._sink

    @property
    def hooks(self) -> Hooks:
        return self._hooks

    @property
    def lock(self) -> threading.RLock:
        """Lock guarding formatter swaps, rendering and sink writes."""
        return self._lock

    # Sink

    def write(self, data: bytes) -> int:
        """Write rendered bytes to the sink."""
        return write_to(self._sink, data)

    def flush(self) -> None:
        """Flush the sink if it supports flushing."""
        if hasattr(self._sink, "flush"):
            with self._lock:
                self._sink.flush()

    # Formatters

    def set_formatter(self, name: str, formatter: BaseFormatter) -> None:
        """Install or replace a named formatter."""
        with self._lock:
            self._formatters[name] = formatter

    def get_formatter(self, name: str) -> BaseFormatter:
        """Get a named formatter, or a NullFormatter if none is installed."""
        with self._lock:
            formatter = self._formatters.get(name)
        return formatter if formatter is not None else NullFormatter()

    def swap_formatter(self, name: str) -> None:
        """Make the named formatter active for all subsequent entries."""
        formatter = self.get_formatter(name)
        with self._lock:
            self._formatter = formatter

    def formatter_names(self) -> List[str]:
        with self._lock:
            return list(self._formatters)

    def format(self, entry: LogEntry) -> bytes:
        """Render an entry with the active formatter."""
        with self._lock:
            return self._formatter.format(entry)

    # Hooks

    def add_hook(self, timing: Timing, level: LogLevel, *hooks: Union[Hook, HookFunc]) -> None:
        self._hooks.add_hook(timing, level, *hooks)

    def fire(self, timing: Timing, level: LogLevel, entry: LogEntry) -> None:
        self._hooks.fire(timing, level, entry)

    # Pipeline

    def _new_entry(self, level: LogLevel, fields) -> LogEntry:
        return LogEntry(self, LogLevel(level), fields)

    def _fire(self, timing: Timing, level: LogLevel, entry: LogEntry) -> None:
        try:
            self._hooks.fire(timing, level, entry)
        except Exception as e:
            with self._lock:
                _report(f"Failed to fire hook -- {e}")

    def _read(self, entry: LogEntry) -> Optional[bytes]:
        try:
            return entry.read()
        except Exception as e:
            _report(f"Failed to render entry -- {e}")
            return None

    def _copy(self, write: Callable[[bytes], int], data: bytes) -> None:
        try:
            write(data)
        except Exception as e:
            _report(f"Failed to write -- {e}")

    def log(self, entry: LogEntry) -> None:
        """
        Run an entry through the pipeline, without level gating.

        The POST hooks run only after the rendered entry has been written,
        so FATAL and PANIC output reaches the sink before termination.
        """
        self._fire(Timing.PRE, entry.entry_level(), entry)
        with self._lock:
            data = self._read(entry)
            if data is not None:
                self._copy(entry.write, data)
        self._fire(Timing.POST, entry.entry_level(), entry)

    def _log_to(self, stream: Sink, entry: LogEntry) -> None:
        # The alternate stream is not guarded by the logger lock.
        self._fire(Timing.PRE, entry.entry_level(), entry)
        data = self._read(entry)
        if data is not None:
            self._copy(partial(write_to, stream), data)
            # POST hooks may end the process; the logger only flushes its own sink
            self._flush_stream(stream)
        self._fire(Timing.POST, entry.entry_level(), entry)

    def _flush_stream(self, stream: Sink) -> None:
        if not hasattr(stream, "flush"):
            return
        try:
            stream.flush()
        except Exception as e:
            _report(f"Failed to flush -- {e}")

    # Standard call surface

    def fatal(self, *values: Any) -> None:
        if self._level >= LogLevel.FATAL:
            self.log(self._new_entry(LogLevel.FATAL, make_fields(0, *values)))

    def fatalf(self, template: str, *values: Any) -> None:
        if self._level >= LogLevel.FATAL:
            self.log(self._new_entry(LogLevel.FATAL, make_format_fields(template, *values)))

    def fatalln(self, *values: Any) -> None:
        self.fatal(*values)

    def panic(self, *values: Any) -> None:
        if self._level >= LogLevel.PANIC:
            self.log(self._new_entry(LogLevel.PANIC, make_fields(0, *values)))

    def panicf(self, template: str, *values: Any) -> None:
        if self._level >= LogLevel.PANIC:
            self.log(self._new_entry(LogLevel.PANIC, make_format_fields(template, *values)))

    def panicln(self, *values: Any) -> None:
        self.panic(*values)

    def print(self, *values: Any) -> None:
        """
        Log at INFO.

        The gate is ERROR, not INFO: a logger at ERROR or WARN still prints.
        """
        if self._level >= LogLevel.ERROR:
            self.log(self._new_entry(LogLevel.INFO, make_fields(0, *values)))

    def printf(self, template: str, *values: Any) -> None:
        if self._level >= LogLevel.ERROR:
            self.log(self._new_entry(LogLevel.INFO, make_format_fields(template, *values)))

    def println(self, *values: Any) -> None:
        self.print(*values)

    # Ungated call surface

    def at(self, level: LogLevel, *values: Any) -> None:
        """Log at level regardless of the logger's minimum level."""
        self.log(self._new_entry(level, make_fields(0, *values)))

    def atf(self, level: LogLevel, template: str, *values: Any) -> None:
        self.log(self._new_entry(level, make_format_fields(template, *values)))

    def at_to(self, level: LogLevel, stream: Sink, *values: Any) -> None:
        """
        Log at level to an alternate stream instead of the sink.

        The caller synchronizes access to stream.
        """
        self._log_to(stream, self._new_entry(level, make_fields(0, *values)))

    def at_tof(self, level: LogLevel, stream: Sink, template: str, *values: Any) -> None:
        self._log_to(stream, self._new_entry(level, make_format_fields(template, *values)))

    def __repr__(self) -> str:
        return f"Logger(tag={self._tag!r}, level={self._level.name})"
