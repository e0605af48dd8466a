"""Click engine — emits press / hold / release cycles while armed.

States
------
Idle      RunState not armed: sleep IDLE_POLL_S, re-check.  Never clicks.
Clicking  RunState armed: one cycle per step()
              sample interval + hold → press → wait hold
              → release → wait interval

Design notes
------------
- The armed flag is only read at cycle boundaries.  Disarming during a
  hold or interval wait is noticed once the cycle ends; the worst-case
  latency is one hold + one interval.
- Waits are best-effort and not preemptible: adaptive_wait() sleeps a
  quarter of the remaining time per slice until the deadline passes.
- Each synthetic event is followed by a fixed SETTLE_DELAY_S, separate
  from the randomised timing.
- A failed press / release is logged and the cycle carries on.
"""
from __future__ import annotations

import time
from typing import Any, Callable

from src.core.events import MouseCapability
from src.core.run_state import RunState
from src.core.sampler import NormalSampler
from src.core.constants import (
    IDLE_POLL_S, SETTLE_DELAY_S, MIN_WAIT_SLICE_S,
)

LogFn   = Callable[[str, str], None]       # (level, message)
SleepFn = Callable[[float], None]
ClockFn = Callable[[], float]


def adaptive_wait(
    duration_s: float,
    sleep:      SleepFn = time.sleep,
    clock:      ClockFn = time.monotonic,
) -> None:
    """Wait ``duration_s`` seconds in shrinking slices (remaining / 4)."""
    end = clock() + duration_s
    while True:
        remaining = end - clock()
        if remaining <= 0:
            return
        sleep(max(remaining / 4, MIN_WAIT_SLICE_S))


class ClickEngine:
    """Reads RunState and clicks ``button`` on ``mouse`` while armed."""

    def __init__(
        self,
        state:            RunState,
        mouse:            MouseCapability,
        button:           Any,
        interval_sampler: NormalSampler,
        hold_sampler:     NormalSampler,
        log_fn:           LogFn | None = None,
        sleep:            SleepFn = time.sleep,
        clock:            ClockFn = time.monotonic,
    ) -> None:
        self._state    = state
        self._mouse    = mouse
        self._button   = button
        self._interval = interval_sampler
        self._hold     = hold_sampler
        self._log      = log_fn or (lambda lvl, msg: None)
        self._sleep    = sleep
        self._clock    = clock

    # ------------------------------------------------------------------
    # Public entry points
    # ------------------------------------------------------------------

    def run(self) -> None:
        """Loop forever; meant to be the target of a daemon thread."""
        while True:
            self.step()

    def step(self) -> bool:
        """Run one Idle poll or one click cycle. Returns True if it clicked."""
        if not self._state.is_armed():
            self._sleep(IDLE_POLL_S)
            return False

        interval_ms = self._interval.sample()
        hold_ms     = self._hold.sample()

        self._send("press", self._mouse.press)
        self._wait_ms(hold_ms)
        self._send("release", self._mouse.release)
        self._wait_ms(interval_ms)
        return True

    # ------------------------------------------------------------------

    def _send(self, name: str, action: Callable[[Any], None]) -> None:
        try:
            action(self._button)
        except Exception as exc:          # noqa: BLE001
            self._log("ERROR", f"Error sending event {name} {self._button}: {exc}")
        # Let the OS process the event
        self._sleep(SETTLE_DELAY_S)

    def _wait_ms(self, ms: float) -> None:
        adaptive_wait(ms / 1000.0, self._sleep, self._clock)
