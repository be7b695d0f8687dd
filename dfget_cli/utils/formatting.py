"""
Helper functions for converting between byte rates and human-readable strings.
"""

import re

from dfget_cli.exceptions import ConfigurationError

RATE_UNITS = {"": 1, "K": 1024, "M": 1024**2, "G": 1024**3}
RATE_PATTERN = re.compile(r"(?P<value>\d+)\s*(?P<unit>[KMG]?)B?", re.IGNORECASE)


def format_size(bytes_size: int) -> str:
    """Formats bytes into a human-readable size string (e.g., '145.3 MB')."""
    if bytes_size <= 0:
        return "0 B"
    units = ["B", "KB", "MB", "GB", "TB"]
    i = 0
    while bytes_size >= 1024 and i < len(units) - 1:
        bytes_size /= 1024
        i += 1
    return f"{bytes_size:.1f} {units[i]}"


def format_rate(bytes_per_second: int) -> str:
    """Formats a byte rate, treating zero as no limit."""
    if bytes_per_second <= 0:
        return "unlimited"
    return f"{format_size(bytes_per_second)}/s"


def parse_rate(rate: str | int) -> int:
    """
    Parses a rate such as '20M', '512k' or '1048576' into bytes per second.

    Units are 1024-based and case-insensitive; a trailing 'B' is accepted.

    Raises:
        ConfigurationError: If the string is not a non-negative rate.
    """
    if isinstance(rate, int):
        if rate < 0:
            raise ConfigurationError(f"Rate cannot be negative: {rate}")
        return rate

    match = RATE_PATTERN.fullmatch(rate.strip())
    if not match:
        raise ConfigurationError(
            f"Invalid rate '{rate}'. Use a byte count or a K/M/G suffix, e.g. 20M."
        )
    return int(match.group("value")) * RATE_UNITS[match.group("unit").upper()]
