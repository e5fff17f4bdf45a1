from pydantic import BaseModel


class StatsResponse(BaseModel):
    total_focus_minutes: int
    completed_focus_blocks: int
    completed_tasks: int
    total_tasks: int
    completion_rate: float  # 0.0 - 1.0
    best_hour: int | None  # 0-23, None until a focus block completes
    best_hour_label: str
    focus_by_hour: dict[int, int]
    assessment: str
