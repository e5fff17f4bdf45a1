import logging

from zentryx.models.stopwatch import StopwatchState

logger = logging.getLogger(__name__)

DEFAULT_RESOLUTION_MS = 100


class StopwatchEngine:
    """Free-running accumulator.

    Every tick adds ``resolution_ms`` while running. Elapsed time is a sum of
    ticks rather than a wall-clock delta, so scheduler jitter shows up as drift.
    """

    def __init__(self, resolution_ms: int = DEFAULT_RESOLUTION_MS):
        self.resolution_ms = resolution_ms
        self.state = StopwatchState()

    def start(self) -> None:
        self.state.running = True

    def pause(self) -> None:
        self.state.running = False

    def reset(self) -> None:
        self.state.running = False
        self.state.elapsed_ms = 0
        self.state.laps = []

    def lap(self) -> bool:
        if self.state.elapsed_ms == 0:
            logger.warning("Lap ignored: stopwatch has not accumulated any time")
            return False
        self.state.laps.append(self.state.elapsed_ms)
        return True

    def tick(self) -> None:
        if self.state.running:
            self.state.elapsed_ms += self.resolution_ms
