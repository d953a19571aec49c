"""
Hook registry

Hooks are side-effect callbacks keyed by an exact (timing, level) pair.
PRE hooks run before an entry is rendered, POST hooks after it has been
written. Two POST hooks are installed on every registry and terminate
control flow: FATAL exits the process, PANIC raises LoggerPanic.
"""

from __future__ import annotations

import os
import sys
from abc import ABC, abstractmethod
from enum import IntEnum
from typing import TYPE_CHECKING, Callable, Dict, List, Optional, Union

from leveled_logger.core.log_level import LogLevel

if TYPE_CHECKING:
    from leveled_logger.core.log_entry import LogEntry


class Timing(IntEnum):
    """When a hook fires relative to rendering."""

    PRE = 0
    POST = 1


class LoggerPanic(BaseException):
    """
    Raised by the PANIC hook after the entry has been written.

    Derives from BaseException so best-effort ``except Exception`` blocks
    in the logging pipeline let it through.
    """


class Hook(ABC):
    """
    Abstract base class for hooks.

    A hook signals failure by raising; the remaining hooks of that firing
    are skipped.
    """

    @abstractmethod
    def fire(self, entry: "LogEntry") -> None:
        """
        Run the hook for an entry.

        Args:
            entry: The entry being logged
        """
        pass

    def __call__(self, entry: "LogEntry") -> None:
        """Allow hooks to be callable."""
        self.fire(entry)


HookFunc = Callable[["LogEntry"], None]


class FunctionHook(Hook):
    """Adapt a plain callable to the Hook interface."""

    def __init__(self, fn: HookFunc):
        if not callable(fn):
            raise TypeError("hook function must be callable")
        self.fn = fn

    def fire(self, entry: "LogEntry") -> None:
        self.fn(entry)

    def __repr__(self) -> str:
        name = getattr(self.fn, "__name__", repr(self.fn))
        return f"FunctionHook(fn={name})"


def hook_for(fn: HookFunc) -> Hook:
    """Wrap a callable as a Hook."""
    return FunctionHook(fn)


class FatalHook(Hook):
    """Flush output and terminate the process with a non-zero status."""

    def __init__(self, exit_code: int = 1, exit_func: Optional[Callable[[int], None]] = None):
        """
        Initialize fatal hook.

        Args:
            exit_code: Process exit status
            exit_func: Terminating function (default: os._exit, which ends
                       the process from any thread)
        """
        self.exit_code = exit_code
        self.exit_func = exit_func or os._exit

    def fire(self, entry: "LogEntry") -> None:
        entry.logger.flush()
        for stream in (sys.stdout, sys.stderr):
            if stream is not None:
                stream.flush()
        self.exit_func(self.exit_code)


class PanicHook(Hook):
    """Raise LoggerPanic."""

    MESSAGE = "panic hook"

    def fire(self, entry: "LogEntry") -> None:
        raise LoggerPanic(self.MESSAGE)


class Hooks:
    """
    Per-timing, per-level ordered hook lists.

    Lists are append-only and fire in registration order. The registry
    holds no lock; hooks that touch shared state synchronize themselves.
    """

    def __init__(self):
        self._hooks: Dict[Timing, Dict[LogLevel, List[Hook]]] = {
            Timing.PRE: {},
            Timing.POST: {},
        }
        self.add_hook(Timing.POST, LogLevel.FATAL, FatalHook())
        self.add_hook(Timing.POST, LogLevel.PANIC, PanicHook())

    def add_hook(self, timing: Timing, level: LogLevel, *hooks: Union[Hook, HookFunc]) -> None:
        """
        Append hooks for an exact (timing, level) pair.

        Args:
            timing: PRE or POST
            level: Level the hooks fire at
            *hooks: Hook instances or plain callables

        Raises:
            TypeError: If a hook is neither a Hook nor callable
        """
        adapted = []
        for hk in hooks:
            if isinstance(hk, Hook):
                adapted.append(hk)
            elif callable(hk):
                adapted.append(FunctionHook(hk))
            else:
                raise TypeError(f"hook must be a Hook or callable, got {type(hk).__name__}")

        self._hooks.setdefault(Timing(timing), {}).setdefault(LogLevel(level), []).extend(adapted)

    def fire(self, timing: Timing, level: LogLevel, entry: "LogEntry") -> None:
        """
        Fire hooks registered for (timing, level) in registration order.

        Raises:
            Exception: The first exception raised by a hook
        """
        for hk in self._hooks.get(timing, {}).get(level, ()):
            hk.fire(entry)

    def get_hooks(self, timing: Timing, level: LogLevel) -> List[Hook]:
        """Get a copy of the hooks registered for (timing, level)."""
        return list(self._hooks.get(timing, {}).get(level, ()))
