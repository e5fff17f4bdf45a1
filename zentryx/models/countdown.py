from dataclasses import dataclass


@dataclass
class CountdownState:
    seconds_remaining: int = 0
    running: bool = False
