import logging
from collections.abc import Callable

from zentryx.models.countdown import CountdownState
from zentryx.models.focus_cycle import clamp_duration

logger = logging.getLogger(__name__)

PRESET_MINUTES = (5, 10, 25)


class CountdownEngine:
    """Single-shot countdown for the standalone Timer tool.

    Driven by ``tick()`` once per second. Reaching zero stops the countdown
    and calls ``on_finished``; nothing repeats.
    """

    def __init__(self, seconds: int = 0, on_finished: Callable[[], None] | None = None):
        self.state = CountdownState(seconds_remaining=clamp_duration(seconds))
        self.on_finished = on_finished

    def start(self) -> None:
        if self.state.seconds_remaining > 0:
            self.state.running = True

    def pause(self) -> None:
        self.state.running = False

    def reset(self) -> None:
        self.state.running = False
        self.state.seconds_remaining = 0

    def set_duration(self, seconds) -> None:
        self.state.running = False
        self.state.seconds_remaining = clamp_duration(seconds)

    def start_preset(self, minutes: int) -> None:
        self.set_duration(minutes * 60)
        self.start()

    def tick(self) -> bool:
        """Advance one second. Returns True on the tick that reaches zero."""
        if not self.state.running or self.state.seconds_remaining <= 0:
            return False

        self.state.seconds_remaining -= 1
        if self.state.seconds_remaining > 0:
            return False

        self.state.running = False
        logger.info("Countdown finished")
        if self.on_finished is not None:
            self.on_finished()
        return True
