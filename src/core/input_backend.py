"""pynput-backed input capability — global event hooks and click injection.

PynputEventSource
    Runs a mouse and a keyboard ``pynput`` listener side by side and
    forwards move / key events as ``src.core.events`` objects.  pynput
    invokes the callbacks from its own hook threads.  ``listen()`` blocks
    until either listener stops; an exception raised inside a callback
    (or by the platform hook) is re-raised by pynput's ``join`` when the
    context managers exit, and propagates to the caller.

PynputMouse
    Thin wrapper over ``mouse.Controller`` exposing press / release.
"""
from __future__ import annotations

import time
from typing import Callable

from pynput import mouse, keyboard

from src.core.events import Event, KeyPress, KeyRelease, MouseMove

_RUNNING_POLL_S = 0.5


class PynputEventSource:
    def listen(self, callback: Callable[[Event], None]) -> None:
        ml = mouse.Listener(
            on_move=lambda x, y: callback(MouseMove(float(x), float(y))),
        )
        kl = keyboard.Listener(
            on_press=lambda key: callback(KeyPress(key)),
            on_release=lambda key: callback(KeyRelease(key)),
        )
        with ml, kl:
            while ml.running and kl.running:
                time.sleep(_RUNNING_POLL_S)


class PynputMouse:
    def __init__(self) -> None:
        self._mc = mouse.Controller()

    def press(self, button: mouse.Button) -> None:
        self._mc.press(button)

    def release(self, button: mouse.Button) -> None:
        self._mc.release(button)
