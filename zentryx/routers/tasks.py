import uuid

from fastapi import APIRouter, Depends, HTTPException, status

from zentryx.dependencies import get_dashboard
from zentryx.schemas.task import TaskCreate, TaskResponse
from zentryx.services.dashboard_service import DashboardSession

router = APIRouter(prefix="/tasks", tags=["tasks"])


@router.get("", response_model=list[TaskResponse])
async def list_tasks(dashboard: DashboardSession = Depends(get_dashboard)):
    return dashboard.tasks.prioritized()


@router.post("", response_model=TaskResponse, status_code=201)
async def create_task(
    data: TaskCreate,
    dashboard: DashboardSession = Depends(get_dashboard),
):
    task = dashboard.tasks.add_task(**data.model_dump())
    if task is None:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail="Task title is blank"
        )
    return task


@router.post("/{task_id}/toggle", response_model=TaskResponse)
async def toggle_task(
    task_id: uuid.UUID,
    dashboard: DashboardSession = Depends(get_dashboard),
):
    task = dashboard.tasks.toggle_completed(task_id)
    if task is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Task not found")
    return task
