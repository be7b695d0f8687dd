"""
Generates the unique identifier for one client run.
"""

import os
import time


def generate_sign(pid: int | None = None, timestamp: float | None = None) -> str:
    """
    Builds a run sign of the form '<pid>-<seconds>.<millis>'.

    The Unix time is truncated to millisecond precision and the fraction is
    zero-padded, so signs from the same process sort by creation time under
    plain string comparison.

    Args:
        pid: Process identifier, defaults to the current process.
        timestamp: Unix time in seconds, defaults to now.

    Returns:
        The sign string.
    """
    if pid is None:
        pid = os.getpid()
    if timestamp is None:
        timestamp = time.time()
    millis = int(timestamp * 1000)
    seconds, fraction = divmod(millis, 1000)
    return f"{pid}-{seconds}.{fraction:03d}"
