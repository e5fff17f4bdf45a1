import math
from dataclasses import dataclass, field
from enum import Enum


class FocusMode(str, Enum):
    FOCUS = "Focus"
    SHORT_BREAK = "Short break"
    LONG_BREAK = "Long break"


def clamp_duration(value) -> int:
    """Coerce a duration to a non-negative whole number.

    Negative, non-finite and non-numeric values become 0.
    """
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0
    if not math.isfinite(number) or number < 0:
        return 0
    return int(number)


@dataclass(frozen=True)
class CycleConfig:
    focus_minutes: int = 25
    short_break_minutes: int = 5
    long_break_minutes: int = 15
    cycles_before_long: int = 4

    def __post_init__(self):
        object.__setattr__(self, "focus_minutes", clamp_duration(self.focus_minutes))
        object.__setattr__(self, "short_break_minutes", clamp_duration(self.short_break_minutes))
        object.__setattr__(self, "long_break_minutes", clamp_duration(self.long_break_minutes))
        # Used as a modulus
        object.__setattr__(self, "cycles_before_long", max(1, clamp_duration(self.cycles_before_long)))

    def duration_seconds(self, mode: FocusMode) -> int:
        if mode is FocusMode.FOCUS:
            return self.focus_minutes * 60
        elif mode is FocusMode.SHORT_BREAK:
            return self.short_break_minutes * 60
        return self.long_break_minutes * 60


@dataclass(frozen=True)
class FocusCycleState:
    mode: FocusMode = FocusMode.FOCUS
    seconds_remaining: int = 0
    running: bool = False
    completed_focus_blocks: int = 0
    focus_by_hour: dict[int, int] = field(default_factory=dict)

    @classmethod
    def initial(cls, config: CycleConfig) -> "FocusCycleState":
        return cls(seconds_remaining=config.duration_seconds(FocusMode.FOCUS))
