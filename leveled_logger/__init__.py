"""
BSD 3-Clause License

Copyright (c) 2021, 🍀☀🌕🌥 🌊
All rights reserved.

Python Leveled Logger - A structured, leveled logging engine with
pluggable formatters and pre/post hooks
"""

__version__ = "1.0.0"
__author__ = "kcenon"
__email__ = "kcenon@naver.com"

from leveled_logger.core.logger import Logger
from leveled_logger.core.logger_builder import LoggerBuilder
from leveled_logger.core.log_entry import LogEntry
from leveled_logger.core.log_field import Field
from leveled_logger.core.log_level import LogLevel, LEVELS
from leveled_logger.core.hooks import Hook, LoggerPanic, Timing, hook_for
from leveled_logger.core.logger_config import LoggerConfig

# Import submodules (not all classes by default)
from leveled_logger import formatters

__all__ = [
    "Logger",
    "LoggerBuilder",
    "LogEntry",
    "Field",
    "LogLevel",
    "LEVELS",
    "Hook",
    "LoggerPanic",
    "Timing",
    "hook_for",
    "LoggerConfig",
    "formatters",
]
