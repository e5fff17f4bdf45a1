from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class ChatMessage:
    author: str  # "you" or "bot"
    text: str
    sent_at: datetime = field(default_factory=datetime.now)
