import uuid
from datetime import datetime

from pydantic import BaseModel, Field


class TaskCreate(BaseModel):
    title: str = Field(min_length=1, max_length=500)
    minutes: int = Field(default=25, ge=5, le=240)
    priority: int = Field(default=3, ge=1, le=5)
    due: datetime | None = None

    model_config = {"str_strip_whitespace": True}


class TaskResponse(BaseModel):
    id: uuid.UUID
    title: str
    minutes: int
    priority: int
    completed: bool
    due: datetime | None

    model_config = {"from_attributes": True}
