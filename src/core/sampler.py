"""Timing sampler — bounded-positive normal draws for click timing.

A normal distribution with SD = mean / 6 puts a small but non-zero mass
below zero.  Instead of rejection sampling without bound, each sample
gets ``SAMPLE_RETRIES`` attempts and then falls back to the mean, which
keeps the worst-case cost of one click cycle fixed.
"""
from __future__ import annotations

import math
from typing import Callable, Optional, TypeVar

import numpy as np

from src.core.constants import SAMPLE_RETRIES

T = TypeVar("T")

LogFn = Callable[[str, str], None]       # (level, message)


def bounded_retry(
    draw:         Callable[[], T],
    accept:       Callable[[T], bool],
    fallback:     T,
    attempts:     int = SAMPLE_RETRIES,
    on_exhausted: Optional[Callable[[], None]] = None,
) -> T:
    """Return the first ``draw()`` result that ``accept`` likes, else ``fallback``.

    ``draw`` is called at most ``attempts`` times.  ``on_exhausted`` runs
    once when every attempt was rejected.
    """
    for _ in range(attempts):
        value = draw()
        if accept(value):
            return value
    if on_exhausted is not None:
        on_exhausted()
    return fallback


def sample_positive(
    mean:   float,
    stddev: float,
    rng:    np.random.Generator | None = None,
    log:    LogFn | None = None,
) -> float:
    """Draw a strictly positive value from N(mean, stddev); fall back to ``mean``."""
    rng = rng if rng is not None else np.random.default_rng()
    _log = log or (lambda level, msg: None)
    return bounded_retry(
        draw         = lambda: float(rng.normal(mean, stddev)),
        accept       = lambda v: v > 0.0,
        fallback     = float(mean),
        on_exhausted = lambda: _log("ERROR", "Error generating a positive sample"),
    )


class NormalSampler:
    """One timing distribution (click interval or hold duration), in ms."""

    def __init__(
        self,
        mean:   float,
        stddev: float,
        rng:    np.random.Generator | None = None,
        log:    LogFn | None = None,
    ) -> None:
        if not math.isfinite(mean) or not math.isfinite(stddev) or stddev < 0:
            raise ValueError(f"Invalid normal distribution: mean={mean!r}, sd={stddev!r}")
        self.mean   = float(mean)
        self.stddev = float(stddev)
        self._rng   = rng if rng is not None else np.random.default_rng()
        self._log   = log

    def sample(self) -> float:
        return sample_positive(self.mean, self.stddev, self._rng, self._log)

    def __repr__(self) -> str:
        return f"NormalSampler(mean={self.mean!r}, stddev={self.stddev!r})"
