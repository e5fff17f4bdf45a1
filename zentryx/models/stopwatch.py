from dataclasses import dataclass, field


@dataclass
class StopwatchState:
    elapsed_ms: int = 0
    running: bool = False
    laps: list[int] = field(default_factory=list)  # elapsed_ms snapshots, oldest first
