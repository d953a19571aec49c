#!/usr/bin/env python3
"""Basic usage example"""

import sys

from leveled_logger import LoggerBuilder, LogLevel, Timing
from leveled_logger.formatters import JSONFormatter

def main():
    # Create logger with builder pattern
    logger = (LoggerBuilder()
        .with_name("example")
        .with_level(LogLevel.DEBUG)
        .with_sink(sys.stdout)
        .with_formatter("text")
        .add_formatter("json", JSONFormatter("example"))
        .add_hook(Timing.POST, LogLevel.WARN, lambda e: print("  (warn hook fired)"))
        .build())

    # Log messages
    logger.print("Application started")
    logger.printf("%d workers ready", 4)
    logger.at(LogLevel.WARN, "disk ", "almost ", "full")
    logger.atf(LogLevel.DEBUG, "cache hit ratio %.2f", 0.93)

    # Switch output format at runtime
    logger.swap_formatter("json")
    logger.at(LogLevel.INFO, "now in JSON")

    logger.swap_formatter("raw")
    logger.at_to(LogLevel.ERROR, sys.stderr, "written to stderr only")

if __name__ == "__main__":
    main()
