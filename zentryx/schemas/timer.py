from pydantic import BaseModel, Field

from zentryx.models.focus_cycle import FocusMode


class CycleConfigUpdate(BaseModel):
    focus_minutes: int = Field(ge=5, le=90)
    short_break_minutes: int = Field(ge=1, le=30)
    long_break_minutes: int = Field(ge=5, le=60)
    cycles_before_long: int = Field(ge=1, le=10)


class CycleConfigResponse(BaseModel):
    focus_minutes: int
    short_break_minutes: int
    long_break_minutes: int
    cycles_before_long: int

    model_config = {"from_attributes": True}


class FocusModeUpdate(BaseModel):
    mode: FocusMode


class FocusCycleResponse(BaseModel):
    mode: FocusMode
    seconds_remaining: int
    display: str  # MM:SS
    running: bool
    completed_focus_blocks: int
    focus_by_hour: dict[int, int]
    config: CycleConfigResponse


class StopwatchResponse(BaseModel):
    elapsed_ms: int
    display: str  # MM:SS.t
    running: bool
    laps: list[int]
    lap_displays: list[str]


class CountdownResponse(BaseModel):
    seconds_remaining: int
    display: str
    running: bool


class CountdownDurationUpdate(BaseModel):
    seconds: int = Field(ge=0, le=24 * 60 * 60)


class TimersResponse(BaseModel):
    focus: FocusCycleResponse
    stopwatch: StopwatchResponse
    countdown: CountdownResponse
