"""Time-of-day and time-range strings (HH:MM, HH:MM-HH:MM)."""

import re

from ..errors import ScheduleFormatError

_TIME_RE = re.compile(r"^([01]\d|2[0-3]):([0-5]\d)(?::([0-5]\d))?$")


def is_valid_time(value: str) -> bool:
    """True for HH:MM or HH:MM:SS within a 24h day."""
    return isinstance(value, str) and bool(_TIME_RE.match(value.strip()))


def normalize_time(value: str) -> str:
    """Drops the seconds part the API returns ("08:00:00" -> "08:00").

    Values that are not times are returned stripped but otherwise untouched.
    """
    if not isinstance(value, str):
        return ""
    value = value.strip()
    if not _TIME_RE.match(value):
        return value
    return ":".join(value.split(":")[:2])


def parse_range(value: str) -> tuple[str, str]:
    """Splits "HH:MM-HH:MM" into normalized (start, end).

    Raises:
        ScheduleFormatError: If either side is not a valid time.
    """
    if not isinstance(value, str) or "-" not in value:
        raise ScheduleFormatError(f"Faixa de horário inválida: {value!r}")
    start, _, end = value.partition("-")
    if not (is_valid_time(start) and is_valid_time(end)):
        raise ScheduleFormatError(f"Faixa de horário inválida: {value!r}")
    return normalize_time(start), normalize_time(end)


def is_valid_range(value: str) -> bool:
    try:
        parse_range(value)
    except ScheduleFormatError:
        return False
    return True


def format_window(start: str, end: str) -> str:
    """Display form of an execution window, e.g. "08:00 - 17:00"."""
    return f"{normalize_time(start)} - {normalize_time(end)}"
