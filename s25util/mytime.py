"""Current time, ticks and simple timestamp formatting."""

from __future__ import annotations

import logging
import os
import time

_log = logging.getLogger(__name__)


def current_time() -> int:
    """Current time as a Unix timestamp in seconds."""
    return int(time.time())


def _tick_rate() -> int:
    try:
        return int(os.sysconf("SC_CLK_TCK"))
    except (AttributeError, ValueError, OSError):
        return 1000


def current_tick() -> int:
    """A monotonic tick count."""
    return int(time.monotonic() * _tick_rate())


def format_time(fmt: str, timestamp: int | None = None) -> str:
    """Format a timestamp in local time.

    %Y year, %m month, %d day, %H hour, %i minute, %s second, %% a percent sign.
    """
    if timestamp is None:
        timestamp = current_time()
    try:
        tm = time.localtime(timestamp)
    except (OverflowError, OSError, ValueError):
        return ""

    fields = {
        "Y": f"{tm.tm_year:04d}",
        "m": f"{tm.tm_mon:02d}",
        "d": f"{tm.tm_mday:02d}",
        "H": f"{tm.tm_hour:02d}",
        "i": f"{tm.tm_min:02d}",
        "s": f"{tm.tm_sec:02d}",
        "%": "%",
    }
    parts: list[str] = []
    in_format = False
    for ch in fmt:
        if in_format:
            in_format = False
            if ch in fields:
                parts.append(fields[ch])
            else:
                _log.warning("Invalid format string: %s", fmt)
                parts.append(ch)
        elif ch == "%":
            in_format = True
        else:
            parts.append(ch)
    if in_format:
        _log.warning("Invalid format string: %s", fmt)
    return "".join(parts)