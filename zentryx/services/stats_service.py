from collections.abc import Mapping
from dataclasses import dataclass

BLANK_DAY = (
    "Today is still blank. Let's add one small task and start a 15-minute focus block."
)
DOING_GREAT = (
    "You're doing great today. High completion and solid focus time. "
    "Consider a longer rest before bed."
)
SLOW_DAY = (
    "Slow day so far. Try one tiny task and a 10-15 minute focus session "
    "to restart momentum."
)
MAKING_PROGRESS = (
    "You're making progress. Let's finish 1-2 more tasks and then you can relax guilt-free."
)


@dataclass(frozen=True)
class ProductivityReport:
    total_focus_minutes: int
    completed_tasks: int
    total_tasks: int
    completion_rate: float
    best_hour: int | None
    assessment: str


def completion_rate(completed_tasks: int, total_tasks: int) -> float:
    if total_tasks == 0:
        return 0.0
    return completed_tasks / total_tasks


def best_hour(focus_by_hour: Mapping[int, int]) -> int | None:
    """Hour with the most completed focus blocks; the lowest hour wins ties."""
    if not focus_by_hour:
        return None
    return min(focus_by_hour, key=lambda hour: (-focus_by_hour[hour], hour))


def assess(total_focus_minutes: int, rate: float, total_tasks: int) -> str:
    if total_tasks == 0 and total_focus_minutes == 0:
        return BLANK_DAY
    if rate >= 0.80 and total_focus_minutes >= 120:
        return DOING_GREAT
    if rate < 0.40 and total_focus_minutes < 60:
        return SLOW_DAY
    return MAKING_PROGRESS


def analyze(
    completed_focus_blocks: int,
    focus_minutes: int,
    focus_by_hour: Mapping[int, int],
    completed_tasks: int,
    total_tasks: int,
) -> ProductivityReport:
    """Derive the day's productivity figures.

    Focus time uses the currently configured focus length for every block,
    so editing the length mid-day rescales earlier blocks too.
    """
    total_focus_minutes = completed_focus_blocks * focus_minutes
    rate = completion_rate(completed_tasks, total_tasks)
    return ProductivityReport(
        total_focus_minutes=total_focus_minutes,
        completed_tasks=completed_tasks,
        total_tasks=total_tasks,
        completion_rate=rate,
        best_hour=best_hour(focus_by_hour),
        assessment=assess(total_focus_minutes, rate, total_tasks),
    )
