"""Coordinator — wires run state, click engine and input listener together.

Architecture
------------
main.py
  └─ Coordinator
       ├─ RunState                 — shared by both threads
       ├─ clicker thread  (daemon) — ClickEngine.run()
       └─ listener thread (daemon) — InputListener.run()
            └─ PynputEventSource   — pynput mouse + keyboard hooks

There is no shutdown path: the process ends on an external signal and
the daemon threads go with it.
"""
from __future__ import annotations

import threading
from typing import Callable

from src.core.clicker    import ClickEngine
from src.core.listener   import InputListener
from src.core.run_state  import RunState
from src.core.sampler    import NormalSampler
from src.core import constants

LogFn = Callable[[str, str], None]       # (level, message)


class Coordinator:
    def __init__(
        self,
        state:    RunState,
        engine:   ClickEngine,
        listener: InputListener,
    ) -> None:
        self.state     = state
        self._engine   = engine
        self._listener = listener
        self._threads: list[threading.Thread] = []

    @property
    def threads(self) -> list[threading.Thread]:
        return list(self._threads)

    def start(self) -> None:
        """Start the clicker and listener threads (once)."""
        if self._threads:
            return
        self._threads = [
            threading.Thread(target=self._engine.run, name="clicker", daemon=True),
            threading.Thread(target=self._listener.run, name="listener", daemon=True),
        ]
        for t in self._threads:
            t.start()

    def wait_forever(self) -> None:
        """Park the calling thread; only an external signal ends it."""
        parked = threading.Event()
        while True:
            parked.wait(3600)


def banner_lines(toggle_key_name: str) -> list[str]:
    return [
        "==== AUTO CLICKER ====",
        f"Toggle on/off hotkey: {toggle_key_name}",
        f"Click interval:       {constants.CLICK_INTERVAL_MEAN_MS} ms "
        f"(SD = {constants.CLICK_INTERVAL_SD_MS} ms)",
        f"Hold duration:        {constants.HOLD_DURATION_MEAN_MS} ms "
        f"(SD = {constants.HOLD_DURATION_SD_MS} ms)",
        f"Mouse move threshold: {constants.MOVE_STOP_DISTANCE_PX} px",
        "",
        "==== LOG ====",
    ]


def build_default(log_fn: LogFn) -> Coordinator:
    """Build a Coordinator backed by pynput, configured from constants.py.

    Raises ValueError if TOGGLE_KEY or CLICK_BUTTON is not a known name.
    """
    # Deferred so importing this module does not require a display server
    from src.core.input_backend import PynputEventSource, PynputMouse
    from src.core.keys import parse_key, parse_button

    toggle_key = parse_key(constants.TOGGLE_KEY)
    if toggle_key is None:
        raise ValueError(f"Unknown toggle key: {constants.TOGGLE_KEY!r}")
    button = parse_button(constants.CLICK_BUTTON)
    if button is None:
        raise ValueError(f"Unknown click button: {constants.CLICK_BUTTON!r}")

    state = RunState(constants.MOVE_STOP_DISTANCE_PX, log_fn=log_fn)
    engine = ClickEngine(
        state            = state,
        mouse            = PynputMouse(),
        button           = button,
        interval_sampler = NormalSampler(constants.CLICK_INTERVAL_MEAN_MS,
                                         constants.CLICK_INTERVAL_SD_MS, log=log_fn),
        hold_sampler     = NormalSampler(constants.HOLD_DURATION_MEAN_MS,
                                         constants.HOLD_DURATION_SD_MS, log=log_fn),
        log_fn           = log_fn,
    )
    listener = InputListener(state, PynputEventSource(), toggle_key, log_fn=log_fn)
    return Coordinator(state, engine, listener)
