"""Centralised tunables and magic numbers.

All numeric constants that control runtime behaviour are collected here
so they are easy to find, document, and adjust.  There is no runtime
configuration: edit these values and restart.
"""

# ---------------------------------------------------------------------------
# Hotkey / button  (src/core/keys.py names)
# ---------------------------------------------------------------------------
TOGGLE_KEY    = "F8"     # turns the auto clicker on/off
CLICK_BUTTON  = "LEFT"

# ---------------------------------------------------------------------------
# Timing  (src/core/sampler.py, src/core/clicker.py)
# ---------------------------------------------------------------------------
CLICK_INTERVAL_MEAN_MS = 1200.0                      # release → next press
CLICK_INTERVAL_SD_MS   = CLICK_INTERVAL_MEAN_MS / 6.0
HOLD_DURATION_MEAN_MS  = 85.0                        # press → release
HOLD_DURATION_SD_MS    = HOLD_DURATION_MEAN_MS / 6.0
SAMPLE_RETRIES         = 10      # draws before falling back to the mean

# ---------------------------------------------------------------------------
# Click engine  (src/core/clicker.py)
# ---------------------------------------------------------------------------
IDLE_POLL_S      = 0.25     # re-check interval while disarmed; lower = snappier, more CPU
SETTLE_DELAY_S   = 0.001    # let the OS process each synthetic event
MIN_WAIT_SLICE_S = 0.0005   # floor for one adaptive_wait slice

# ---------------------------------------------------------------------------
# Listener  (src/core/run_state.py)
# ---------------------------------------------------------------------------
MOVE_STOP_DISTANCE_PX = 16.0   # disarm after moving more than this from the origin
