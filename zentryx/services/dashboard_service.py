from zentryx.config import Settings
from zentryx.models.focus_cycle import CycleConfig
from zentryx.services.clock_service import ClockSource, SystemClock, TickScheduler
from zentryx.services.coaching_service import Coach
from zentryx.services.countdown_service import CountdownEngine
from zentryx.services.focus_cycle_service import FocusCycleEngine
from zentryx.services.schedule_service import ScheduleBlock, generate_schedule
from zentryx.services.stats_service import ProductivityReport, analyze
from zentryx.services.stopwatch_service import StopwatchEngine
from zentryx.services.task_service import TaskList


class DashboardSession:
    """One user's dashboard: the three timers, the task list and the coach.

    Each engine owns its own state; the session only wires them together and
    answers pull-style questions (stats, schedule) from their current state.
    """

    def __init__(
        self,
        config: CycleConfig | None = None,
        clock: ClockSource | None = None,
        stopwatch_resolution_ms: int = 100,
        coach_reply_delay_seconds: float = 0.3,
    ):
        self.clock = clock or SystemClock()
        self.focus = FocusCycleEngine(config or CycleConfig(), self.clock)
        self.countdown = CountdownEngine()
        self.stopwatch = StopwatchEngine(resolution_ms=stopwatch_resolution_ms)
        self.tasks = TaskList()
        self.coach = Coach(reply_delay_seconds=coach_reply_delay_seconds)

    @classmethod
    def from_settings(cls, settings: Settings, clock: ClockSource | None = None) -> "DashboardSession":
        return cls(
            config=CycleConfig(
                focus_minutes=settings.FOCUS_MINUTES,
                short_break_minutes=settings.SHORT_BREAK_MINUTES,
                long_break_minutes=settings.LONG_BREAK_MINUTES,
                cycles_before_long=settings.CYCLES_BEFORE_LONG,
            ),
            clock=clock,
            stopwatch_resolution_ms=settings.STOPWATCH_TICK_MS,
            coach_reply_delay_seconds=settings.COACH_REPLY_DELAY_MS / 1000,
        )

    @property
    def cycle_config(self) -> CycleConfig:
        return self.focus.config

    def update_cycle_config(self, config: CycleConfig) -> None:
        self.focus.update_config(config)

    def tick_countdowns(self) -> None:
        self.focus.tick()
        self.countdown.tick()

    def tick_stopwatch(self) -> None:
        self.stopwatch.tick()

    def scheduler(self, countdown_period: float, stopwatch_period: float) -> TickScheduler:
        scheduler = TickScheduler()
        scheduler.every("countdowns", countdown_period, self.tick_countdowns)
        scheduler.every("stopwatch", stopwatch_period, self.tick_stopwatch)
        return scheduler

    def stats(self) -> ProductivityReport:
        state = self.focus.state
        return analyze(
            completed_focus_blocks=state.completed_focus_blocks,
            focus_minutes=self.cycle_config.focus_minutes,
            focus_by_hour=state.focus_by_hour,
            completed_tasks=self.tasks.completed_count(),
            total_tasks=len(self.tasks),
        )

    def generate_schedule(self) -> list[ScheduleBlock]:
        return generate_schedule(self.tasks.prioritized(), self.stats().best_hour)
