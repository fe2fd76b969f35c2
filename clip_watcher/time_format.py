"""Elapsed-time formatting helpers."""


def format_time(seconds: int) -> str:
    """Format a second count as zero-padded ``HH:MM:SS``.

    Hours are not wrapped at 24, so ``90000`` becomes ``"25:00:00"``.

    Args:
        seconds: Non-negative number of seconds.

    Returns:
        str: Formatted timestamp.
    """
    hours, remainder = divmod(seconds, 3600)
    minutes, secs = divmod(remainder, 60)
    return f"{hours:02d}:{minutes:02d}:{secs:02d}"
