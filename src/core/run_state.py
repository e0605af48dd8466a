"""Shared run state — armed flag and arm origin.

One instance is created at start-up and handed to both the click engine
(read-only) and the input listener (the only writer).

Thread model
------------
- The armed flag is published through a ``threading.Event`` so
  ``is_armed()`` never blocks.
- ``_lock`` serialises every write: armed transitions and the origin
  compare-and-set.  It is never held across a sleep or a log call.
- The origin is cleared *before* the flag is set, so no reader sees
  ``armed=True`` together with an origin from a previous session.
- ``disarm_if_moved`` judges a move and disarms in one hold of
  ``_lock``; a hotkey re-arm cannot slip in between.
"""
from __future__ import annotations

import threading
from typing import Callable, Optional

from src.core.constants import MOVE_STOP_DISTANCE_PX

LogFn = Callable[[str, str], None]       # (level, message)
Point = tuple[float, float]

MOUSE_MOVED = "mouse moved"


class RunState:
    def __init__(
        self,
        move_threshold_px: float = MOVE_STOP_DISTANCE_PX,
        log_fn:            LogFn | None = None,
    ) -> None:
        self._armed  = threading.Event()
        self._origin: Optional[Point] = None
        self._lock   = threading.Lock()
        self._threshold_sq = float(move_threshold_px) ** 2
        self._log    = log_fn or (lambda level, msg: None)

    # ------------------------------------------------------------------
    # Armed flag
    # ------------------------------------------------------------------

    def is_armed(self) -> bool:
        return self._armed.is_set()

    def set_armed(self, armed: bool, reason: str) -> bool:
        """Switch to ``armed``; returns False (and logs nothing) if already there."""
        with self._lock:
            changed = self._apply(armed)
        if changed:
            self._announce(armed, reason)
        return changed

    def toggle(self, reason: str) -> bool:
        """Flip the armed flag atomically and return the new value."""
        with self._lock:
            armed = not self._armed.is_set()
            self._apply(armed)
        self._announce(armed, reason)
        return armed

    def _apply(self, armed: bool) -> bool:
        # caller holds _lock
        if armed == self._armed.is_set():
            return False
        if armed:
            self._origin = None
            self._armed.set()
        else:
            self._armed.clear()
        return True

    def _announce(self, armed: bool, reason: str) -> None:
        self._log("INFO", f"Auto clicker: {'ON' if armed else 'OFF'} ({reason})")

    # ------------------------------------------------------------------
    # Origin
    # ------------------------------------------------------------------

    @property
    def arm_origin(self) -> Optional[Point]:
        with self._lock:
            return self._origin

    def capture_or_check_origin(self, pos: Point) -> Optional[str]:
        """Record ``pos`` as the origin, or report whether it is too far from it.

        Returns ``MOUSE_MOVED`` when the squared distance from the origin
        is strictly greater than the threshold squared, else None.
        """
        with self._lock:
            return self._capture_or_check(pos)

    def disarm_if_moved(self, pos: Point) -> bool:
        """Handle one mouse move while armed; returns True if it disarmed.

        The armed check, the origin capture / comparison and the disarm
        happen under one hold of ``_lock``.  A toggle from another thread
        is therefore either fully before this move (and the move is judged
        against the new session's origin) or fully after it.
        """
        with self._lock:
            if not self._armed.is_set():
                return False
            reason = self._capture_or_check(pos)
            if reason is None:
                return False
            self._apply(False)
        self._announce(False, reason)
        return True

    def _capture_or_check(self, pos: Point) -> Optional[str]:
        # caller holds _lock
        x, y = float(pos[0]), float(pos[1])
        if self._origin is None:
            self._origin = (x, y)
            return None
        dx = x - self._origin[0]
        dy = y - self._origin[1]
        return MOUSE_MOVED if dx * dx + dy * dy > self._threshold_sq else None

    def __repr__(self) -> str:
        return f"RunState(armed={self.is_armed()!r}, origin={self._origin!r})"
