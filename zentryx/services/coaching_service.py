"""Scripted coach.

Replies come from a fixed keyword table (case-insensitive substring match,
first match wins). A short artificial delay paces the conversation.
"""

import asyncio
import logging
from collections import deque
from datetime import date

from redis.exceptions import RedisError

from zentryx.models.chat_message import ChatMessage

logger = logging.getLogger(__name__)


REPLIES: tuple[tuple[tuple[str, ...], str], ...] = (
    (
        ("tired", "exhausted"),
        "You sound tired. Let's schedule a short 5-10 minute break, drink some water, "
        "then do just one small chunk of work.",
    ),
    (
        ("exam", "test"),
        "For exams, split revision into small topics and use 25-minute focus blocks. "
        "Start with the hardest or most important topics first.",
    ),
    (
        ("job", "office", "work"),
        "For work tasks, list 3 key items. Start with the one that moves things forward "
        "the most, even if it's a bit uncomfortable.",
    ),
    (
        ("sad", "anxious"),
        "I can't replace real people, but I'm here to listen. Try to write exactly what's "
        "bothering you in one line, then we'll break it into smaller steps.",
    ),
)

DEFAULT_REPLY = (
    "Got it. Tell me what you want to focus on in the next 30 minutes (study, chores, "
    "work, or rest) and I'll suggest a tiny plan."
)

RATE_LIMITED_REPLY = (
    "We've talked a lot today. Take a real break and come back tomorrow with a fresh plan."
)

MAX_LOG_MESSAGES = 500


def coach_reply(message: str) -> str:
    lower = message.lower()
    for keywords, reply in REPLIES:
        if any(word in lower for word in keywords):
            return reply
    return DEFAULT_REPLY


async def _check_rate_limit(redis_client, key: str, limit: int) -> bool:
    """Check and increment a daily counter. Returns True if within limit."""
    key = f"coach_rate:{key}:{date.today().isoformat()}"
    count = await redis_client.incr(key)
    if count == 1:
        await redis_client.expire(key, 86400)
    return count <= limit


class Coach:
    """Conversation log plus the reply policy.

    The log keeps the most recent ``max_messages`` entries; older ones are
    dropped.
    """

    def __init__(self, reply_delay_seconds: float = 0.3, max_messages: int = MAX_LOG_MESSAGES):
        self.reply_delay_seconds = reply_delay_seconds
        self.messages: deque[ChatMessage] = deque(maxlen=max_messages)

    async def _pick_reply(self, text: str, redis_client, client_key: str, limit: int) -> str:
        if redis_client is None:
            return coach_reply(text)
        try:
            allowed = await _check_rate_limit(redis_client, client_key, limit)
        except (RedisError, OSError) as exc:
            # Counter unavailable: answer without it
            logger.warning("Coach limit check skipped: %s", exc)
            return coach_reply(text)
        if not allowed:
            logger.warning("Coach daily limit reached for %s", client_key)
            return RATE_LIMITED_REPLY
        return coach_reply(text)

    async def send(
        self, text: str, redis_client=None, client_key: str = "local", limit: int = 200
    ) -> ChatMessage | None:
        """Record a user message and the coach's answer.

        Blank messages are ignored and return None.
        """
        text = (text or "").strip()
        if not text:
            return None

        reply = await self._pick_reply(text, redis_client, client_key, limit)
        self.messages.append(ChatMessage(author="you", text=text))

        if self.reply_delay_seconds > 0:
            await asyncio.sleep(self.reply_delay_seconds)

        answer = ChatMessage(author="bot", text=reply)
        self.messages.append(answer)
        return answer
