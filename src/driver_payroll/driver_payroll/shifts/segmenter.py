from __future__ import annotations

from ..core.constants import DAY_SECONDS


def unwrap_end(start: int, end: int) -> int:
    """Push ``end`` past midnight when the shift wraps around."""
    return end + DAY_SECONDS if end < start else end


def idle_seconds_between(start: int, end: int, *, window_start: int, window_end: int) -> int:
    """Seconds of ``[start, end)`` that fall outside the daily delivery window.

    ``start``/``end`` are seconds since midnight of the shift's first day. The
    interval is walked one calendar day at a time, so any number of midnight
    crossings is handled.
    """

    end = unwrap_end(start, end)

    idle = 0
    cursor = start
    while cursor < end:
        day_start = (cursor // DAY_SECONDS) * DAY_SECONDS
        segment_end = min(end, day_start + DAY_SECONDS)

        open_at = day_start + window_start
        close_at = day_start + window_end

        if cursor < open_at:
            idle += max(0, min(segment_end, open_at) - cursor)
        if segment_end > close_at:
            idle += max(0, segment_end - max(cursor, close_at))

        cursor = segment_end

    return idle
