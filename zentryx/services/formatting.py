def format_mmss(total_seconds: int) -> str:
    minutes, seconds = divmod(total_seconds, 60)
    return f"{minutes:02d}:{seconds:02d}"


def format_stopwatch(ms: int) -> str:
    """``MM:SS.t`` with tenths of a second, e.g. 2500 -> ``00:02.5``."""
    minutes, seconds = divmod(ms // 1000, 60)
    tenth = (ms % 1000) // 100
    return f"{minutes:02d}:{seconds:02d}.{tenth}"


def format_hour(hour: int) -> str:
    return f"{hour:02d}:00"
