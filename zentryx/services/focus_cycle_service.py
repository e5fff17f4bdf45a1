"""Focus/break cycling engine.

All cycling rules live in ``transition``, a pure function of
``(state, event, config)`` that returns the next state and, when a
countdown ran out, a ``BlockCompleted`` event. ``FocusCycleEngine`` only
holds the current state and feeds events into it.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, replace

from zentryx.models.focus_cycle import CycleConfig, FocusCycleState, FocusMode
from zentryx.services.clock_service import ClockSource

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Events
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Start:
    pass


@dataclass(frozen=True)
class Pause:
    pass


@dataclass(frozen=True)
class Reset:
    pass


@dataclass(frozen=True)
class SetMode:
    mode: FocusMode


@dataclass(frozen=True)
class ConfigChanged:
    pass


@dataclass(frozen=True)
class Tick:
    hour: int  # wall-clock hour at the time of the tick


FocusEvent = Start | Pause | Reset | SetMode | ConfigChanged | Tick


@dataclass(frozen=True)
class BlockCompleted:
    completed_mode: FocusMode
    next_mode: FocusMode
    hour: int
    completed_focus_blocks: int


# ---------------------------------------------------------------------------
# Transition function
# ---------------------------------------------------------------------------


def next_mode_after(mode: FocusMode, completed_focus_blocks: int, config: CycleConfig) -> FocusMode:
    """Mode that follows a finished countdown.

    ``completed_focus_blocks`` is the count after the finished block was
    added.
    """
    if mode is not FocusMode.FOCUS:
        return FocusMode.FOCUS
    if completed_focus_blocks % config.cycles_before_long == 0:
        return FocusMode.LONG_BREAK
    return FocusMode.SHORT_BREAK


def _idle_in(state: FocusCycleState, mode: FocusMode, config: CycleConfig) -> FocusCycleState:
    return replace(state, mode=mode, running=False, seconds_remaining=config.duration_seconds(mode))


def _complete(
    state: FocusCycleState, hour: int, config: CycleConfig
) -> tuple[FocusCycleState, BlockCompleted]:
    blocks = state.completed_focus_blocks
    histogram = state.focus_by_hour
    if state.mode is FocusMode.FOCUS:
        blocks += 1
        histogram = dict(histogram)
        histogram[hour] = histogram.get(hour, 0) + 1

    following = next_mode_after(state.mode, blocks, config)
    new_state = _idle_in(
        replace(state, completed_focus_blocks=blocks, focus_by_hour=histogram),
        following,
        config,
    )
    return new_state, BlockCompleted(
        completed_mode=state.mode,
        next_mode=following,
        hour=hour,
        completed_focus_blocks=blocks,
    )


def transition(
    state: FocusCycleState, event: FocusEvent, config: CycleConfig
) -> tuple[FocusCycleState, BlockCompleted | None]:
    if isinstance(event, Start):
        if state.running:
            return state, None
        return replace(state, running=True), None

    if isinstance(event, Pause):
        return replace(state, running=False), None

    if isinstance(event, Reset):
        return _idle_in(state, state.mode, config), None

    if isinstance(event, SetMode):
        # Manual switches never count as a completed block
        if state.running:
            return replace(state, mode=event.mode), None
        return _idle_in(state, event.mode, config), None

    if isinstance(event, ConfigChanged):
        # A running countdown keeps its remaining time until the next idle recompute
        if state.running:
            return state, None
        return _idle_in(state, state.mode, config), None

    if isinstance(event, Tick):
        if not state.running:
            return state, None
        if state.seconds_remaining > 1:
            return replace(state, seconds_remaining=state.seconds_remaining - 1), None
        return _complete(state, event.hour, config)

    raise ValueError(f"Unknown focus cycle event: {event!r}")


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------


class FocusCycleEngine:
    """Owns one ``FocusCycleState`` and is its only writer."""

    def __init__(
        self,
        config: CycleConfig,
        clock: ClockSource,
        on_complete: Callable[[BlockCompleted], None] | None = None,
    ):
        self.config = config
        self.clock = clock
        self.on_complete = on_complete
        self.state = FocusCycleState.initial(config)

    def dispatch(self, event: FocusEvent) -> BlockCompleted | None:
        self.state, emitted = transition(self.state, event, self.config)
        if emitted is not None:
            logger.info(
                "%s finished at hour %d, next mode %s (%d focus blocks today)",
                emitted.completed_mode.value,
                emitted.hour,
                emitted.next_mode.value,
                emitted.completed_focus_blocks,
            )
            if self.on_complete is not None:
                self.on_complete(emitted)
        return emitted

    def start(self) -> None:
        self.dispatch(Start())

    def pause(self) -> None:
        self.dispatch(Pause())

    def reset(self) -> None:
        self.dispatch(Reset())

    def set_mode(self, mode: FocusMode) -> None:
        logger.debug("Focus cycle mode set to %s", mode.value)
        self.dispatch(SetMode(mode))

    def update_config(self, config: CycleConfig) -> None:
        self.config = config
        logger.debug("Cycle config updated: %s", config)
        self.dispatch(ConfigChanged())

    def tick(self) -> BlockCompleted | None:
        if not self.state.running:
            return None
        return self.dispatch(Tick(hour=self.clock.current_hour()))
