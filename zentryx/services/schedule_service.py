"""Day plan synthesis.

A plan is the four daily anchors followed by three 25-minute focus blocks
at the best focus hour, the hour after it and 16:00. Hours are not wrapped
past midnight and focus blocks may overlap anchors.

All three focus slots are always emitted; slots with no incomplete task
left are labelled "Deep work" rather than omitted.
"""

from collections.abc import Sequence
from dataclasses import dataclass

from zentryx.models.task import Task

DEFAULT_FOCUS_HOUR = 10
AFTERNOON_FOCUS_HOUR = 16
FOCUS_BLOCK_MINUTES = 25
FALLBACK_LABEL = "Deep work"

ANCHORS = (
    ("07:30", "08:00", "Breakfast"),
    ("13:00", "13:30", "Lunch"),
    ("20:00", "20:30", "Dinner"),
    ("23:30", "07:00", "Sleep"),
)


@dataclass(frozen=True)
class ScheduleBlock:
    start: str
    end: str
    label: str
    kind: str  # "anchor" or "focus"

    def __str__(self) -> str:
        return f"{self.start}-{self.end}  {self.label}"


def _focus_block(hour: int, task: Task | None) -> ScheduleBlock:
    title = task.title if task is not None else FALLBACK_LABEL
    return ScheduleBlock(
        start=f"{hour:02d}:00",
        end=f"{hour:02d}:{FOCUS_BLOCK_MINUTES:02d}",
        label=f"Focus: {title}",
        kind="focus",
    )


def generate_schedule(prioritized_tasks: Sequence[Task], best_hour: int | None) -> list[ScheduleBlock]:
    """Build the day plan.

    ``prioritized_tasks`` must already be in prioritized order; completed
    tasks are skipped. Focus slots with no task left get a generic label.
    """
    blocks = [ScheduleBlock(start, end, label, "anchor") for start, end, label in ANCHORS]

    active = [t for t in prioritized_tasks if not t.completed]
    best = best_hour if best_hour is not None else DEFAULT_FOCUS_HOUR
    for slot, hour in enumerate((best, best + 1, AFTERNOON_FOCUS_HOUR)):
        task = active[slot] if slot < len(active) else None
        blocks.append(_focus_block(hour, task))

    return blocks
