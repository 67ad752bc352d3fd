"""Date and time block."""

from datetime import datetime

from .blocks import SOLAR_BASE1, status_json

TIME_COLOR = SOLAR_BASE1
TIME_FONT_COLOR = "#000000"
_TIME_FORMAT = " %a %d %b %H:%M:%S"
_TIME_MAX_LEN = 100


def current_time(now=None):
    """Format `now` (local time by default) for the bar."""
    moment = datetime.now() if now is None else now
    return moment.strftime(_TIME_FORMAT)[: _TIME_MAX_LEN - 1]


def time_date_block(prev_color, now=None):
    """Return the time block JSON and the colour the next block follows."""
    block = status_json(
        prev_color, TIME_COLOR, "timedate", TIME_FONT_COLOR, current_time(now)
    )
    return block, TIME_COLOR