import uuid
from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class Task:
    title: str
    minutes: int = 25
    priority: int = 3  # 1=highest .. 5=lowest
    completed: bool = False
    due: datetime | None = None
    id: uuid.UUID = field(default_factory=uuid.uuid4)
