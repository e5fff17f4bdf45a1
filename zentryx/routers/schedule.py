from fastapi import APIRouter, Depends

from zentryx.dependencies import get_dashboard
from zentryx.schemas.schedule import ScheduleBlockResponse, ScheduleResponse
from zentryx.services.dashboard_service import DashboardSession

router = APIRouter(prefix="/schedule", tags=["schedule"])


@router.post("", response_model=ScheduleResponse)
async def generate_schedule(dashboard: DashboardSession = Depends(get_dashboard)):
    """Propose a plan for the rest of the day from the current tasks and focus history."""
    blocks = dashboard.generate_schedule()
    return ScheduleResponse(
        blocks=[
            ScheduleBlockResponse(
                start=b.start, end=b.end, label=b.label, kind=b.kind, text=str(b)
            )
            for b in blocks
        ]
    )
