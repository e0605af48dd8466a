"""Tests for src.core.listener — hotkey toggle and move-to-disarm with synthetic events."""
from src.core.events import KeyPress, KeyRelease, MouseMove
from src.core.listener import InputListener
from src.core.run_state import RunState

TOGGLE = "F8"


class _ListSource:
    """Delivers a fixed event list, then ends the subscription."""

    def __init__(self, events) -> None:
        self.events = list(events)

    def listen(self, callback) -> None:
        for ev in self.events:
            callback(ev)


class _FailingSource:
    def listen(self, callback) -> None:
        callback(KeyPress(TOGGLE))
        raise OSError("hook unavailable")


def _press(key=TOGGLE):
    return [KeyPress(key), KeyRelease(key)]


def _listener(events=(), logs=None, threshold=16.0):
    state = RunState(move_threshold_px=threshold, log_fn=logs)
    return state, InputListener(state, _ListSource(events), TOGGLE, log_fn=logs)


class TestHotkey:
    def test_press_arms_with_no_origin(self, logs):
        state, listener = _listener(_press(), logs)
        listener.run()
        assert state.is_armed() is True
        assert state.arm_origin is None
        assert "Auto clicker: ON (hotkey pressed)" in logs.messages("INFO")

    def test_second_press_disarms(self, logs):
        state, listener = _listener(_press() + _press(), logs)
        listener.run()
        assert state.is_armed() is False
        assert logs.messages("INFO") == [
            "Auto clicker: ON (hotkey pressed)",
            "Auto clicker: OFF (hotkey pressed)",
        ]

    def test_double_delivery_one_transition(self, logs):
        state, listener = _listener([KeyPress(TOGGLE), KeyPress(TOGGLE)], logs)
        listener.run()
        assert state.is_armed() is True
        assert len(logs.messages("INFO")) == 1

    def test_other_keys_ignored(self, logs):
        state, listener = _listener(_press("F9") + _press("a"), logs)
        listener.run()
        assert state.is_armed() is False
        assert logs.messages("INFO") == []

    def test_other_key_release_keeps_guard(self):
        state, listener = _listener([KeyPress(TOGGLE), KeyRelease("F9"), KeyPress(TOGGLE)])
        listener.run()
        assert state.is_armed() is True


class TestMouseMove:
    def test_move_while_disarmed_ignored(self):
        state, listener = _listener([MouseMove(1.0, 1.0), MouseMove(500.0, 500.0)])
        listener.run()
        assert state.arm_origin is None
        assert state.is_armed() is False

    def test_first_move_records_origin(self):
        state, listener = _listener(_press() + [MouseMove(3.0, 4.0)])
        listener.run()
        assert state.arm_origin == (3.0, 4.0)
        assert state.is_armed() is True

    def test_small_then_large_move(self, logs):
        events = _press() + [MouseMove(0.0, 0.0), MouseMove(10.0, 10.0), MouseMove(20.0, 20.0)]
        state, listener = _listener(events, logs)
        listener.run()
        assert state.is_armed() is False
        assert logs.messages("INFO")[-1] == "Auto clicker: OFF (mouse moved)"

    def test_small_move_stays_armed(self):
        state, listener = _listener(_press() + [MouseMove(0.0, 0.0), MouseMove(10.0, 10.0)])
        listener.run()
        assert state.is_armed() is True

    def test_exact_threshold_stays_armed(self):
        state, listener = _listener(_press() + [MouseMove(0.0, 0.0), MouseMove(0.0, 16.0)])
        listener.run()
        assert state.is_armed() is True

    def test_rearm_uses_new_origin(self, logs):
        # Origin P=(0,0) in the first session, Q=(100,100) in the second
        events = (
            _press() + [MouseMove(0.0, 0.0)] + _press()
            + [MouseMove(100.0, 100.0)]          # ignored: disarmed
            + _press() + [MouseMove(100.0, 100.0), MouseMove(105.0, 105.0)]
        )
        state, listener = _listener(events, logs)
        listener.run()
        assert state.is_armed() is True
        assert state.arm_origin == (100.0, 100.0)
        assert "Auto clicker: OFF (mouse moved)" not in logs.messages()

    def test_disarm_logged_once(self, logs):
        events = _press() + [MouseMove(0.0, 0.0), MouseMove(50.0, 0.0), MouseMove(60.0, 0.0)]
        state, listener = _listener(events, logs)
        listener.run()
        assert logs.messages("INFO").count("Auto clicker: OFF (mouse moved)") == 1


class TestSubscriptionFailure:
    def test_failure_logged_and_state_kept(self, logs):
        state = RunState(log_fn=logs)
        listener = InputListener(state, _FailingSource(), TOGGLE, log_fn=logs)
        listener.run()   # must not raise
        assert state.is_armed() is True
        errors = logs.messages("ERROR")
        assert len(errors) == 1
        assert "hook unavailable" in errors[0]

    def test_clean_end_warns(self, logs):
        _, listener = _listener([], logs)
        listener.run()
        assert logs.messages("WARNING") == ["Event listener stopped"]


class TestMoveRouting:
    def test_moves_use_single_locked_call(self):
        calls = []

        class _Recording(RunState):
            def disarm_if_moved(self, pos):
                calls.append(pos)
                return super().disarm_if_moved(pos)

            def capture_or_check_origin(self, pos):
                raise AssertionError("split check-then-disarm path used")

        state = _Recording(move_threshold_px=16.0)
        listener = InputListener(state, _ListSource(
            _press() + [MouseMove(0.0, 0.0), MouseMove(30.0, 0.0)]), TOGGLE)
        listener.run()
        assert calls == [(0.0, 0.0), (30.0, 0.0)]
        assert state.is_armed() is False
