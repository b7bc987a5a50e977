"""
Time formatting helpers for countdown display.
"""


def format_elapsed_time(seconds: int) -> str:
    """
    Format a number of seconds the way a stopwatch shows it.

    Args:
        seconds: Non-negative number of seconds

    Returns:
        "MM:SS" below one hour, "H:MM:SS" from one hour on
    """
    seconds = max(int(seconds), 0)
    hours, remainder = divmod(seconds, 3600)
    minutes, secs = divmod(remainder, 60)

    if hours > 0:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes:02d}:{secs:02d}"
