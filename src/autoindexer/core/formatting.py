from __future__ import annotations

"""
Listing Formatters.

Pure helpers turning raw file metadata into the strings shown in the
index table.
"""

from datetime import datetime, timezone
from typing import Tuple

SIZE_UNITS: Tuple[str, ...] = ("B", "KiB", "MiB", "GiB", "TiB")


def format_size(num_bytes: int) -> str:
    """
    Render a byte count with binary units.

    Bytes are printed as an integer; larger units carry two decimals.
    Nothing is ever shown in a unit above TiB.

    Args:
        num_bytes: Size in bytes.

    Returns:
        str: Human readable size, e.g. '1023 B' or '1.00 KiB'.
    """
    unit_index = 0
    readable = float(num_bytes)
    while readable >= 1024 and unit_index < len(SIZE_UNITS) - 1:
        readable /= 1024
        unit_index += 1

    if unit_index == 0:
        return f"{num_bytes} {SIZE_UNITS[0]}"
    return f"{readable:.2f} {SIZE_UNITS[unit_index]}"


def format_timestamp(unix_seconds: int) -> str:
    """
    Render Unix seconds as a UTC 'YYYY-MM-DD HH:MM:SS' string.

    Args:
        unix_seconds: Seconds since the epoch.

    Returns:
        str: Formatted calendar time, no timezone adjustment.
    """
    dt = datetime.fromtimestamp(unix_seconds, tz=timezone.utc)
    return (
        f"{dt.year}-{dt.month:02d}-{dt.day:02d} "
        f"{dt.hour:02d}:{dt.minute:02d}:{dt.second:02d}"
    )
