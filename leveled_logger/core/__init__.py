"""
Core module for logger system

This module contains the fundamental classes:
- Logger: Main logger class and record pipeline
- LoggerBuilder: Builder pattern for logger construction
- LogEntry: Log entry data structure
- Field: Ordered key/value datum of an entry
- LogLevel: Log level enumeration
- Hooks: Pre/post hook registry
- LoggerConfig: Configuration management
"""

from leveled_logger.core.log_level import LogLevel, LEVELS
from leveled_logger.core.log_field import Field, make_fields, make_format_fields
from leveled_logger.core.log_entry import LogEntry
from leveled_logger.core.hooks import Hook, Hooks, FunctionHook, LoggerPanic, Timing, hook_for
from leveled_logger.core.logger import Logger
from leveled_logger.core.logger_config import LoggerConfig
from leveled_logger.core.logger_builder import LoggerBuilder

__all__ = [
    "Logger",
    "LoggerBuilder",
    "LogEntry",
    "Field",
    "make_fields",
    "make_format_fields",
    "LogLevel",
    "LEVELS",
    "Hook",
    "Hooks",
    "FunctionHook",
    "LoggerPanic",
    "Timing",
    "hook_for",
    "LoggerConfig",
]
