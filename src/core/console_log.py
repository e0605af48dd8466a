"""Console log sink — timestamped, level-tagged lines.

Every component takes an optional ``log_fn(level, message)`` callback;
at runtime that callback is ``ConsoleLog.log``.  ERROR and WARNING go to
stderr, everything else to stdout.
"""
from __future__ import annotations

import sys
import threading
from datetime import datetime
from typing import TextIO

_STDERR_LEVELS = frozenset({"WARNING", "ERROR"})


class ConsoleLog:
    """Thread-safe writer shared by the clicker and listener threads."""

    def __init__(self, out: TextIO | None = None, err: TextIO | None = None) -> None:
        self._out  = out
        self._err  = err
        self._lock = threading.Lock()

    def log(self, level: str, message: str) -> None:
        """Write one timestamped entry."""
        level = level.upper()
        ts = datetime.now().strftime("%H:%M:%S.%f")[:-3]
        line = f"{ts} {level:<7} {message}\n"
        # sys.stdout / sys.stderr are looked up per call; they may be rebound
        stream = (self._err or sys.stderr) if level in _STDERR_LEVELS else (self._out or sys.stdout)
        with self._lock:
            stream.write(line)
            stream.flush()

    def banner(self, lines: list[str]) -> None:
        """Write untimestamped lines to stdout (start-up banner)."""
        stream = self._out or sys.stdout
        with self._lock:
            for line in lines:
                stream.write(line + "\n")
            stream.flush()
