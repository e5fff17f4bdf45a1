from zentryx.models.chat_message import ChatMessage
from zentryx.models.countdown import CountdownState
from zentryx.models.focus_cycle import CycleConfig, FocusCycleState, FocusMode
from zentryx.models.stopwatch import StopwatchState
from zentryx.models.task import Task

__all__ = [
    "ChatMessage",
    "CountdownState",
    "CycleConfig",
    "FocusCycleState",
    "FocusMode",
    "StopwatchState",
    "Task",
]
