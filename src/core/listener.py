"""Input listener — hotkey toggle and move-to-disarm.

Consumes a single blocking subscription from an EventSource.  With the
pynput backend, mouse and keyboard events arrive on two separate hook
threads, so handle_event() can run concurrently with itself:

- every RunState decision is a single locked call (``toggle`` for the
  hotkey, ``disarm_if_moved`` for moves), so a toggle on the keyboard
  thread can never land between a move's distance check and the disarm
  it triggers;
- ``_toggle_held`` is only touched by key events, i.e. only by the
  keyboard thread.

A failed subscription is logged and run() returns.  There is no restart:
after that the hotkey and move detection are gone for the rest of the
process, and the click engine keeps whatever armed state it had.
"""
from __future__ import annotations

from typing import Any, Callable

from src.core.events import Event, EventSource, KeyPress, KeyRelease, MouseMove
from src.core.run_state import RunState

LogFn = Callable[[str, str], None]       # (level, message)

HOTKEY_PRESSED = "hotkey pressed"


class InputListener:
    def __init__(
        self,
        state:      RunState,
        source:     EventSource,
        toggle_key: Any,
        log_fn:     LogFn | None = None,
    ) -> None:
        self._state       = state
        self._source      = source
        self._toggle_key  = toggle_key
        self._log         = log_fn or (lambda lvl, msg: None)
        self._toggle_held = False   # suppresses auto-repeat presses

    def run(self) -> None:
        """Block on the event subscription until it ends or fails."""
        try:
            self._source.listen(self.handle_event)
        except Exception as exc:          # noqa: BLE001
            self._log("ERROR", f"Error listening to events: {exc!r}")
            return
        self._log("WARNING", "Event listener stopped")

    def handle_event(self, event: Event) -> None:
        if isinstance(event, KeyPress):
            if event.key != self._toggle_key or self._toggle_held:
                return
            self._toggle_held = True
            self._state.toggle(HOTKEY_PRESSED)

        elif isinstance(event, KeyRelease):
            if event.key == self._toggle_key:
                self._toggle_held = False

        elif isinstance(event, MouseMove):
            self._state.disarm_if_moved((event.x, event.y))
