"""Input events delivered by an event source to the input listener.

Kept free of pynput imports so the listener logic can be exercised with
synthetic event sequences on machines without a display server.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Protocol, Union


@dataclass(frozen=True)
class KeyPress:
    key: Any


@dataclass(frozen=True)
class KeyRelease:
    key: Any


@dataclass(frozen=True)
class MouseMove:
    x: float
    y: float


Event = Union[KeyPress, KeyRelease, MouseMove]


class EventSource(Protocol):
    def listen(self, callback: Callable[[Event], None]) -> None:
        """Block, delivering every global input event to ``callback``.

        Returns or raises only when the subscription ends.
        """


class MouseCapability(Protocol):
    def press(self, button: Any) -> None: ...
    def release(self, button: Any) -> None: ...
