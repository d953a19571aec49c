"""
Log formatters module

Provides the formatter implementations a logger renders entries with.
"""

from typing import Dict

from leveled_logger.formatters.base_formatter import BaseFormatter
from leveled_logger.formatters.null_formatter import NullFormatter
from leveled_logger.formatters.raw_formatter import RawFormatter
from leveled_logger.formatters.text_formatter import STAMP_NANO, TextFormatter
from leveled_logger.formatters.json_formatter import JSONFormatter


def default_formatters(tag: str, timestamp_format: str = STAMP_NANO, colored=None) -> Dict[str, BaseFormatter]:
    """Formatters installed on every new logger."""
    return {
        "null": NullFormatter(),
        "raw": RawFormatter(),
        "text": TextFormatter(tag, timestamp_format, colored=colored),
    }


__all__ = [
    "BaseFormatter",
    "NullFormatter",
    "RawFormatter",
    "TextFormatter",
    "JSONFormatter",
    "STAMP_NANO",
    "default_formatters",
]
