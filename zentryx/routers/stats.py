from fastapi import APIRouter, Depends

from zentryx.dependencies import get_dashboard
from zentryx.schemas.stats import StatsResponse
from zentryx.services.dashboard_service import DashboardSession
from zentryx.services.formatting import format_hour

router = APIRouter(prefix="/stats", tags=["stats"])


@router.get("", response_model=StatsResponse)
async def get_stats(dashboard: DashboardSession = Depends(get_dashboard)):
    report = dashboard.stats()
    state = dashboard.focus.state
    return StatsResponse(
        total_focus_minutes=report.total_focus_minutes,
        completed_focus_blocks=state.completed_focus_blocks,
        completed_tasks=report.completed_tasks,
        total_tasks=report.total_tasks,
        completion_rate=report.completion_rate,
        best_hour=report.best_hour,
        best_hour_label=(
            "Not enough data yet" if report.best_hour is None else format_hour(report.best_hour)
        ),
        focus_by_hour=state.focus_by_hour,
        assessment=report.assessment,
    )
