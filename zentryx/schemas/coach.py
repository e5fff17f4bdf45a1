from datetime import datetime

from pydantic import BaseModel, Field


class ChatMessageCreate(BaseModel):
    text: str = Field(min_length=1, max_length=2000)

    model_config = {"str_strip_whitespace": True}


class ChatMessageResponse(BaseModel):
    author: str
    text: str
    sent_at: datetime

    model_config = {"from_attributes": True}
