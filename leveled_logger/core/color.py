"""
ANSI color attribution for terminal output

Colors are small ordered sets of SGR attribute codes. Whether color is
emitted at all is a process-wide switch probed once from sys.stdout.
"""

import sys
import threading
from enum import IntEnum
from typing import Any, Callable, List, Optional, TextIO

ESCAPE = "\x1b"

Renderer = Callable[..., None]


class Attribute(IntEnum):
    """SGR attribute codes."""

    RESET = 0
    BOLD = 1
    FAINT = 2
    ITALIC = 3
    UNDERLINE = 4
    BLINK_SLOW = 5
    BLINK_RAPID = 6
    REVERSE_VIDEO = 7
    CONCEALED = 8
    CROSSED_OUT = 9

    FG_BLACK = 30
    FG_RED = 31
    FG_GREEN = 32
    FG_YELLOW = 33
    FG_BLUE = 34
    FG_MAGENTA = 35
    FG_CYAN = 36
    FG_WHITE = 37

    BG_BLACK = 40
    BG_RED = 41
    BG_GREEN = 42
    BG_YELLOW = 43
    BG_BLUE = 44
    BG_MAGENTA = 45
    BG_CYAN = 46
    BG_WHITE = 47

    FG_HI_BLACK = 90
    FG_HI_RED = 91
    FG_HI_GREEN = 92
    FG_HI_YELLOW = 93
    FG_HI_BLUE = 94
    FG_HI_MAGENTA = 95
    FG_HI_CYAN = 96
    FG_HI_WHITE = 97

    BG_HI_BLACK = 100
    BG_HI_RED = 101
    BG_HI_GREEN = 102
    BG_HI_YELLOW = 103
    BG_HI_BLUE = 104
    BG_HI_MAGENTA = 105
    BG_HI_CYAN = 106
    BG_HI_WHITE = 107


_no_color: Optional[bool] = None
_no_color_lock = threading.Lock()


def _probe_terminal() -> bool:
    stream = sys.stdout
    return not (hasattr(stream, "isatty") and stream.isatty())


def no_color() -> bool:
    """
    Return True when color output is disabled for this process.

    The first call probes whether sys.stdout is an interactive terminal;
    the answer is kept until set_no_color() or reset_no_color() is called.
    """
    global _no_color
    if _no_color is None:
        with _no_color_lock:
            if _no_color is None:
                _no_color = _probe_terminal()
    return _no_color


def set_no_color(disabled: bool) -> None:
    """Explicitly enable (False) or disable (True) color output."""
    global _no_color
    with _no_color_lock:
        _no_color = bool(disabled)


def reset_no_color() -> None:
    """Forget the current switch so the next no_color() probes again."""
    global _no_color
    with _no_color_lock:
        _no_color = None


class Color:
    """An ordered set of SGR attributes applied around written content."""

    def __init__(self, *attributes: Attribute):
        self.params: List[Attribute] = []
        self.add(*attributes)

    def add(self, *attributes: Attribute) -> "Color":
        self.params.extend(attributes)
        return self

    def sequence(self) -> str:
        """Attribute codes joined for an SGR escape, e.g. ``"1;91"``."""
        return ";".join(str(int(p)) for p in self.params)

    def fprint(self, stream: TextIO, *args: Any, enabled: Optional[bool] = None) -> None:
        self.wrap(stream, *args, enabled=enabled)

    def fprintf(self, stream: TextIO, template: str, *args: Any, enabled: Optional[bool] = None) -> None:
        self.wrap(stream, template % args, enabled=enabled)

    def wrap(self, stream: TextIO, *args: Any, enabled: Optional[bool] = None) -> None:
        """
        Write args to stream, wrapped in this color's escapes.

        Args:
            stream: Text stream to write to
            *args: Values written with their str() forms, no separator
            enabled: Force color on/off; None follows no_color()
        """
        if enabled is None:
            enabled = not no_color()
        if not enabled:
            stream.write("".join(str(a) for a in args))
            return

        stream.write(f"{ESCAPE}[{self.sequence()}m")
        stream.write("".join(str(a) for a in args))
        stream.write(f"{ESCAPE}[{int(Attribute.RESET)}m")

    def __repr__(self) -> str:
        return f"Color({self.sequence()!r})"


def color(*attributes: Attribute) -> Renderer:
    """Build a renderer ``fn(stream, *args, enabled=None)`` for the attributes."""
    return Color(*attributes).fprint


black = color(Attribute.FG_HI_BLACK)
red = color(Attribute.FG_HI_RED)
green = color(Attribute.FG_HI_GREEN)
yellow = color(Attribute.FG_HI_YELLOW)
blue = color(Attribute.FG_HI_BLUE)
magenta = color(Attribute.FG_HI_MAGENTA)
cyan = color(Attribute.FG_HI_CYAN)
white = color(Attribute.FG_HI_WHITE)
