from fastapi import APIRouter, Depends, HTTPException, status

from zentryx.dependencies import get_dashboard
from zentryx.models.focus_cycle import CycleConfig
from zentryx.schemas.timer import (
    CountdownDurationUpdate,
    CountdownResponse,
    CycleConfigResponse,
    CycleConfigUpdate,
    FocusCycleResponse,
    FocusModeUpdate,
    StopwatchResponse,
    TimersResponse,
)
from zentryx.services.countdown_service import PRESET_MINUTES
from zentryx.services.dashboard_service import DashboardSession
from zentryx.services.formatting import format_mmss, format_stopwatch

router = APIRouter(prefix="/timers", tags=["timers"])


def _focus_response(dashboard: DashboardSession) -> FocusCycleResponse:
    state = dashboard.focus.state
    return FocusCycleResponse(
        mode=state.mode,
        seconds_remaining=state.seconds_remaining,
        display=format_mmss(state.seconds_remaining),
        running=state.running,
        completed_focus_blocks=state.completed_focus_blocks,
        focus_by_hour=state.focus_by_hour,
        config=CycleConfigResponse.model_validate(dashboard.cycle_config),
    )


def _stopwatch_response(dashboard: DashboardSession) -> StopwatchResponse:
    state = dashboard.stopwatch.state
    return StopwatchResponse(
        elapsed_ms=state.elapsed_ms,
        display=format_stopwatch(state.elapsed_ms),
        running=state.running,
        laps=list(state.laps),
        lap_displays=[format_stopwatch(lap) for lap in state.laps],
    )


def _countdown_response(dashboard: DashboardSession) -> CountdownResponse:
    state = dashboard.countdown.state
    return CountdownResponse(
        seconds_remaining=state.seconds_remaining,
        display=format_mmss(state.seconds_remaining),
        running=state.running,
    )


@router.get("", response_model=TimersResponse)
async def get_timers(dashboard: DashboardSession = Depends(get_dashboard)):
    return TimersResponse(
        focus=_focus_response(dashboard),
        stopwatch=_stopwatch_response(dashboard),
        countdown=_countdown_response(dashboard),
    )


# --- Focus cycle ---


@router.get("/focus", response_model=FocusCycleResponse)
async def get_focus(dashboard: DashboardSession = Depends(get_dashboard)):
    return _focus_response(dashboard)


@router.post("/focus/start", response_model=FocusCycleResponse)
async def start_focus(dashboard: DashboardSession = Depends(get_dashboard)):
    dashboard.focus.start()
    return _focus_response(dashboard)


@router.post("/focus/pause", response_model=FocusCycleResponse)
async def pause_focus(dashboard: DashboardSession = Depends(get_dashboard)):
    dashboard.focus.pause()
    return _focus_response(dashboard)


@router.post("/focus/reset", response_model=FocusCycleResponse)
async def reset_focus(dashboard: DashboardSession = Depends(get_dashboard)):
    dashboard.focus.reset()
    return _focus_response(dashboard)


@router.post("/focus/tick", response_model=FocusCycleResponse)
async def tick_focus(dashboard: DashboardSession = Depends(get_dashboard)):
    """Advance the focus timer by one second (manual clock)."""
    dashboard.focus.tick()
    return _focus_response(dashboard)


@router.put("/focus/mode", response_model=FocusCycleResponse)
async def set_focus_mode(
    data: FocusModeUpdate,
    dashboard: DashboardSession = Depends(get_dashboard),
):
    dashboard.focus.set_mode(data.mode)
    return _focus_response(dashboard)


@router.get("/focus/config", response_model=CycleConfigResponse)
async def get_cycle_config(dashboard: DashboardSession = Depends(get_dashboard)):
    return dashboard.cycle_config


@router.put("/focus/config", response_model=FocusCycleResponse)
async def update_cycle_config(
    data: CycleConfigUpdate,
    dashboard: DashboardSession = Depends(get_dashboard),
):
    dashboard.update_cycle_config(CycleConfig(**data.model_dump()))
    return _focus_response(dashboard)


# --- Stopwatch ---


@router.get("/stopwatch", response_model=StopwatchResponse)
async def get_stopwatch(dashboard: DashboardSession = Depends(get_dashboard)):
    return _stopwatch_response(dashboard)


@router.post("/stopwatch/start", response_model=StopwatchResponse)
async def start_stopwatch(dashboard: DashboardSession = Depends(get_dashboard)):
    dashboard.stopwatch.start()
    return _stopwatch_response(dashboard)


@router.post("/stopwatch/pause", response_model=StopwatchResponse)
async def pause_stopwatch(dashboard: DashboardSession = Depends(get_dashboard)):
    dashboard.stopwatch.pause()
    return _stopwatch_response(dashboard)


@router.post("/stopwatch/reset", response_model=StopwatchResponse)
async def reset_stopwatch(dashboard: DashboardSession = Depends(get_dashboard)):
    dashboard.stopwatch.reset()
    return _stopwatch_response(dashboard)


@router.post("/stopwatch/lap", response_model=StopwatchResponse)
async def lap_stopwatch(dashboard: DashboardSession = Depends(get_dashboard)):
    if not dashboard.stopwatch.lap():
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Stopwatch has no elapsed time to record",
        )
    return _stopwatch_response(dashboard)


@router.post("/stopwatch/tick", response_model=StopwatchResponse)
async def tick_stopwatch(dashboard: DashboardSession = Depends(get_dashboard)):
    dashboard.stopwatch.tick()
    return _stopwatch_response(dashboard)


# --- Countdown ---


@router.get("/countdown", response_model=CountdownResponse)
async def get_countdown(dashboard: DashboardSession = Depends(get_dashboard)):
    return _countdown_response(dashboard)


@router.post("/countdown/start", response_model=CountdownResponse)
async def start_countdown(dashboard: DashboardSession = Depends(get_dashboard)):
    dashboard.countdown.start()
    return _countdown_response(dashboard)


@router.post("/countdown/pause", response_model=CountdownResponse)
async def pause_countdown(dashboard: DashboardSession = Depends(get_dashboard)):
    dashboard.countdown.pause()
    return _countdown_response(dashboard)


@router.post("/countdown/reset", response_model=CountdownResponse)
async def reset_countdown(dashboard: DashboardSession = Depends(get_dashboard)):
    dashboard.countdown.reset()
    return _countdown_response(dashboard)


@router.post("/countdown/tick", response_model=CountdownResponse)
async def tick_countdown(dashboard: DashboardSession = Depends(get_dashboard)):
    dashboard.countdown.tick()
    return _countdown_response(dashboard)


@router.put("/countdown/duration", response_model=CountdownResponse)
async def set_countdown_duration(
    data: CountdownDurationUpdate,
    dashboard: DashboardSession = Depends(get_dashboard),
):
    dashboard.countdown.set_duration(data.seconds)
    return _countdown_response(dashboard)


@router.post("/countdown/preset/{minutes}", response_model=CountdownResponse)
async def start_countdown_preset(
    minutes: int,
    dashboard: DashboardSession = Depends(get_dashboard),
):
    if minutes not in PRESET_MINUTES:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Unknown preset; choose one of {list(PRESET_MINUTES)}",
        )
    dashboard.countdown.start_preset(minutes)
    return _countdown_response(dashboard)
