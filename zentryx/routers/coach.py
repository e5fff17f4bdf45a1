from fastapi import APIRouter, Depends, HTTPException, Request, status

from zentryx.config import settings
from zentryx.dependencies import get_dashboard
from zentryx.schemas.coach import ChatMessageCreate, ChatMessageResponse
from zentryx.services.dashboard_service import DashboardSession

router = APIRouter(prefix="/coach", tags=["coach"])


@router.get("/messages", response_model=list[ChatMessageResponse])
async def list_messages(dashboard: DashboardSession = Depends(get_dashboard)):
    return list(dashboard.coach.messages)


@router.post("/messages", response_model=ChatMessageResponse, status_code=201)
async def send_message(
    data: ChatMessageCreate,
    req: Request,
    dashboard: DashboardSession = Depends(get_dashboard),
):
    """Send a message to the coach and wait for its reply."""
    redis_client = getattr(req.app.state, "redis", None)
    client_key = req.client.host if req.client else "unknown"

    reply = await dashboard.coach.send(
        data.text,
        redis_client=redis_client,
        client_key=client_key,
        limit=settings.COACH_DAILY_LIMIT,
    )
    if reply is None:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail="Message is blank"
        )
    return reply
