from pydantic import BaseModel


class ScheduleBlockResponse(BaseModel):
    start: str  # HH:MM
    end: str
    label: str
    kind: str  # "anchor" or "focus"
    text: str

    model_config = {"from_attributes": True}


class ScheduleResponse(BaseModel):
    blocks: list[ScheduleBlockResponse]
