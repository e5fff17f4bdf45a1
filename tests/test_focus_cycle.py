"""Tests for the focus/break cycling engine and its transition function."""

import pytest

from zentryx.models.focus_cycle import CycleConfig, FocusCycleState, FocusMode
from zentryx.services.clock_service import FixedClock
from zentryx.services.focus_cycle_service import (
    BlockCompleted,
    ConfigChanged,
    FocusCycleEngine,
    Pause,
    Reset,
    SetMode,
    Start,
    Tick,
    next_mode_after,
    transition,
)

CONFIG = CycleConfig(focus_minutes=25, short_break_minutes=5, long_break_minutes=15, cycles_before_long=4)


def _run_to_completion(engine: FocusCycleEngine) -> BlockCompleted:
    """Start the engine and tick until the current countdown finishes."""
    engine.start()
    for _ in range(engine.state.seconds_remaining + 1):
        emitted = engine.tick()
        if emitted is not None:
            return emitted
    raise AssertionError("countdown never completed")


def _completed_breaks(engine: FocusCycleEngine, focus_blocks: int) -> list[FocusMode]:
    """Complete ``focus_blocks`` focus blocks, consuming each break, and record the breaks."""
    breaks = []
    for _ in range(focus_blocks):
        assert engine.state.mode is FocusMode.FOCUS
        emitted = _run_to_completion(engine)
        breaks.append(emitted.next_mode)
        _run_to_completion(engine)
    return breaks


# ---------------------------------------------------------------------------
# Transition function
# ---------------------------------------------------------------------------


class TestTransition:
    def test_initial_state_shows_full_focus_duration(self):
        state = FocusCycleState.initial(CONFIG)
        assert state.mode is FocusMode.FOCUS
        assert state.seconds_remaining == 25 * 60
        assert state.running is False
        assert state.completed_focus_blocks == 0
        assert state.focus_by_hour == {}

    def test_start_is_noop_when_running(self):
        state = FocusCycleState(seconds_remaining=100, running=True)
        new_state, emitted = transition(state, Start(), CONFIG)
        assert new_state is state
        assert emitted is None

    def test_pause_keeps_remaining_time(self):
        state = FocusCycleState(seconds_remaining=321, running=True)
        new_state, _ = transition(state, Pause(), CONFIG)
        assert new_state.running is False
        assert new_state.seconds_remaining == 321

    @pytest.mark.parametrize("mode", list(FocusMode))
    def test_reset_restores_configured_duration(self, mode):
        state = FocusCycleState(mode=mode, seconds_remaining=7, running=True)
        new_state, _ = transition(state, Reset(), CONFIG)
        assert new_state.running is False
        assert new_state.seconds_remaining == CONFIG.duration_seconds(mode)

    def test_tick_decrements(self):
        state = FocusCycleState(seconds_remaining=10, running=True)
        new_state, emitted = transition(state, Tick(hour=9), CONFIG)
        assert new_state.seconds_remaining == 9
        assert emitted is None

    def test_tick_ignored_while_paused(self):
        state = FocusCycleState(seconds_remaining=10, running=False)
        new_state, emitted = transition(state, Tick(hour=9), CONFIG)
        assert new_state == state
        assert emitted is None

    def test_last_tick_completes_focus_block(self):
        state = FocusCycleState(seconds_remaining=1, running=True)
        new_state, emitted = transition(state, Tick(hour=14), CONFIG)

        assert emitted == BlockCompleted(
            completed_mode=FocusMode.FOCUS,
            next_mode=FocusMode.SHORT_BREAK,
            hour=14,
            completed_focus_blocks=1,
        )
        assert new_state.mode is FocusMode.SHORT_BREAK
        assert new_state.running is False
        assert new_state.seconds_remaining == 5 * 60
        assert new_state.completed_focus_blocks == 1
        assert new_state.focus_by_hour == {14: 1}

    def test_completion_does_not_mutate_previous_histogram(self):
        histogram = {9: 2}
        state = FocusCycleState(seconds_remaining=1, running=True, focus_by_hour=histogram)
        new_state, _ = transition(state, Tick(hour=9), CONFIG)
        assert new_state.focus_by_hour == {9: 3}
        assert histogram == {9: 2}

    @pytest.mark.parametrize("mode", [FocusMode.SHORT_BREAK, FocusMode.LONG_BREAK])
    def test_break_completion_returns_to_focus_without_counting(self, mode):
        state = FocusCycleState(mode=mode, seconds_remaining=1, running=True, completed_focus_blocks=3)
        new_state, emitted = transition(state, Tick(hour=10), CONFIG)
        assert emitted.next_mode is FocusMode.FOCUS
        assert new_state.mode is FocusMode.FOCUS
        assert new_state.seconds_remaining == 25 * 60
        assert new_state.completed_focus_blocks == 3
        assert new_state.focus_by_hour == {}

    def test_set_mode_while_idle_recomputes(self):
        state = FocusCycleState(seconds_remaining=600, running=False)
        new_state, _ = transition(state, SetMode(FocusMode.LONG_BREAK), CONFIG)
        assert new_state.mode is FocusMode.LONG_BREAK
        assert new_state.seconds_remaining == 15 * 60

    def test_set_mode_while_running_keeps_remaining(self):
        state = FocusCycleState(seconds_remaining=600, running=True)
        new_state, _ = transition(state, SetMode(FocusMode.SHORT_BREAK), CONFIG)
        assert new_state.mode is FocusMode.SHORT_BREAK
        assert new_state.seconds_remaining == 600
        assert new_state.running is True

    def test_set_mode_never_counts_blocks(self):
        state = FocusCycleState(seconds_remaining=1, running=False, completed_focus_blocks=2, focus_by_hour={9: 2})
        new_state, emitted = transition(state, SetMode(FocusMode.SHORT_BREAK), CONFIG)
        assert emitted is None
        assert new_state.completed_focus_blocks == 2
        assert new_state.focus_by_hour == {9: 2}

    def test_next_mode_after(self):
        assert next_mode_after(FocusMode.FOCUS, 1, CONFIG) is FocusMode.SHORT_BREAK
        assert next_mode_after(FocusMode.FOCUS, 4, CONFIG) is FocusMode.LONG_BREAK
        assert next_mode_after(FocusMode.FOCUS, 8, CONFIG) is FocusMode.LONG_BREAK
        assert next_mode_after(FocusMode.SHORT_BREAK, 4, CONFIG) is FocusMode.FOCUS
        assert next_mode_after(FocusMode.LONG_BREAK, 4, CONFIG) is FocusMode.FOCUS

    def test_unknown_event_rejected(self):
        with pytest.raises(ValueError):
            transition(FocusCycleState(), object(), CONFIG)


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------


class TestFocusCycleEngine:
    def test_four_blocks_give_short_short_short_long(self):
        engine = FocusCycleEngine(CONFIG, FixedClock(9))
        assert _completed_breaks(engine, 4) == [
            FocusMode.SHORT_BREAK,
            FocusMode.SHORT_BREAK,
            FocusMode.SHORT_BREAK,
            FocusMode.LONG_BREAK,
        ]
        assert engine.state.completed_focus_blocks == 4

    @pytest.mark.parametrize("cycles", [1, 2, 3, 5])
    def test_long_break_on_every_nth_block(self, cycles):
        config = CycleConfig(
            focus_minutes=1, short_break_minutes=1, long_break_minutes=1, cycles_before_long=cycles
        )
        engine = FocusCycleEngine(config, FixedClock(9))
        breaks = _completed_breaks(engine, cycles * 3)
        long_positions = [i + 1 for i, mode in enumerate(breaks) if mode is FocusMode.LONG_BREAK]
        assert long_positions == [cycles, 2 * cycles, 3 * cycles]

    def test_single_cycle_config_always_long_break(self):
        config = CycleConfig(focus_minutes=1, short_break_minutes=1, long_break_minutes=2, cycles_before_long=1)
        engine = FocusCycleEngine(config, FixedClock(9))
        assert _completed_breaks(engine, 3) == [FocusMode.LONG_BREAK] * 3

    def test_histogram_uses_hour_at_completion(self):
        clock = FixedClock(9)
        config = CycleConfig(focus_minutes=1, short_break_minutes=1, long_break_minutes=1, cycles_before_long=4)
        engine = FocusCycleEngine(config, clock)

        _completed_breaks(engine, 2)
        clock.hour = 14
        _completed_breaks(engine, 1)

        assert engine.state.focus_by_hour == {9: 2, 14: 1}

    def test_on_complete_callback(self):
        seen: list[BlockCompleted] = []
        config = CycleConfig(focus_minutes=1, short_break_minutes=1, long_break_minutes=1, cycles_before_long=4)
        engine = FocusCycleEngine(config, FixedClock(11), on_complete=seen.append)

        _run_to_completion(engine)

        assert len(seen) == 1
        assert seen[0].completed_mode is FocusMode.FOCUS
        assert seen[0].hour == 11

    def test_countdown_ticks_exactly_configured_seconds(self):
        config = CycleConfig(focus_minutes=1, short_break_minutes=1, long_break_minutes=1, cycles_before_long=4)
        engine = FocusCycleEngine(config, FixedClock(9))
        engine.start()
        for _ in range(59):
            assert engine.tick() is None
        assert engine.state.seconds_remaining == 1
        assert engine.tick() is not None
        assert engine.state.running is False

    def test_reset_after_ticks(self):
        engine = FocusCycleEngine(CONFIG, FixedClock(9))
        engine.start()
        for _ in range(30):
            engine.tick()
        engine.reset()
        assert engine.state.running is False
        assert engine.state.seconds_remaining == 25 * 60

    def test_config_change_while_paused_updates_display(self):
        engine = FocusCycleEngine(CONFIG, FixedClock(9))
        engine.update_config(CycleConfig(focus_minutes=50, short_break_minutes=5, long_break_minutes=15))
        assert engine.state.seconds_remaining == 50 * 60

    def test_config_change_while_running_is_deferred(self):
        engine = FocusCycleEngine(CONFIG, FixedClock(9))
        engine.start()
        engine.tick()
        engine.update_config(CycleConfig(focus_minutes=50, short_break_minutes=5, long_break_minutes=15))

        assert engine.state.seconds_remaining == 25 * 60 - 1

        engine.pause()
        assert engine.state.seconds_remaining == 25 * 60 - 1

        engine.reset()
        assert engine.state.seconds_remaining == 50 * 60

    def test_zero_length_focus_completes_on_first_tick(self):
        config = CycleConfig(focus_minutes=0, short_break_minutes=5, long_break_minutes=15)
        engine = FocusCycleEngine(config, FixedClock(9))
        assert engine.state.seconds_remaining == 0
        engine.start()
        emitted = engine.tick()
        assert emitted is not None
        assert engine.state.completed_focus_blocks == 1

    def test_tick_when_idle_does_not_read_clock(self):
        class ExplodingClock:
            def current_hour(self) -> int:
                raise AssertionError("clock read while idle")

        engine = FocusCycleEngine(CONFIG, ExplodingClock())
        assert engine.tick() is None


class TestCycleConfig:
    def test_negative_and_non_finite_values_become_zero(self):
        config = CycleConfig(
            focus_minutes=-5,
            short_break_minutes=float("nan"),
            long_break_minutes=float("inf"),
            cycles_before_long=4,
        )
        assert config.focus_minutes == 0
        assert config.short_break_minutes == 0
        assert config.long_break_minutes == 0

    def test_cycles_before_long_at_least_one(self):
        assert CycleConfig(cycles_before_long=0).cycles_before_long == 1
        assert CycleConfig(cycles_before_long=-3).cycles_before_long == 1

    def test_duration_seconds(self):
        assert CONFIG.duration_seconds(FocusMode.FOCUS) == 1500
        assert CONFIG.duration_seconds(FocusMode.SHORT_BREAK) == 300
        assert CONFIG.duration_seconds(FocusMode.LONG_BREAK) == 900
