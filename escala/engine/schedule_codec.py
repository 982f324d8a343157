"""Codec for an employee's work_schedule.

The wire form is a JSON object mapping weekday keys (dom, seg, ..., sab) to
lists of "HH:MM-HH:MM" strings. Every schedule crossing an API or display
boundary goes through ``decode``/``encode`` here.

Decoding never raises: unreadable input becomes an empty schedule and the
caller is told through ``DecodedSchedule.valid``.
"""

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from ..config import logger as log
from ..constants.weekdays import Weekday
from .time_window import is_valid_range

Schedule = dict[str, list[str]]


@dataclass
class DecodedSchedule:
    """Result of decoding. ``valid`` is False when the raw value was unreadable."""

    schedule: Schedule = field(default_factory=dict)
    valid: bool = True


def decode_with_status(raw: Any) -> DecodedSchedule:
    """Decodes a raw work_schedule and reports whether it was readable.

    - A mapping is passed through unchanged.
    - None or an empty string is an empty, valid schedule.
    - A string is parsed as JSON; anything other than a JSON object is invalid.
    """
    if isinstance(raw, Mapping):
        return DecodedSchedule(schedule=raw, valid=True)
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        return DecodedSchedule()
    if not isinstance(raw, (str, bytes)):
        log.warn("codec", "Unsupported work_schedule type", type=type(raw).__name__)
        return DecodedSchedule(valid=False)

    try:
        parsed = json.loads(raw)
    except (TypeError, ValueError) as e:
        log.warn("codec", "Invalid work_schedule JSON", error=str(e), raw=raw)
        return DecodedSchedule(valid=False)

    if not isinstance(parsed, dict):
        log.warn("codec", "work_schedule is not a JSON object", raw=raw)
        return DecodedSchedule(valid=False)
    return DecodedSchedule(schedule=parsed, valid=True)


def decode(raw: Any) -> Schedule:
    """Decodes a raw work_schedule, returning {} for unreadable input."""
    return decode_with_status(raw).schedule


def encode(schedule: Mapping, pretty: bool = False) -> str:
    """Serializes a schedule. ``pretty`` gives the indented form used in edit forms."""
    if pretty:
        return json.dumps(dict(schedule), ensure_ascii=False, indent=2)
    return json.dumps(dict(schedule), ensure_ascii=False, separators=(",", ":"))


def normalize(schedule: Mapping) -> Schedule:
    """Strips whitespace and drops blank slots. Keys, including unknown ones, are kept."""
    result: Schedule = {}
    for key, slots in schedule.items():
        if isinstance(slots, str):
            slots = [slots]
        result[key] = [str(slot).strip() for slot in slots or [] if str(slot).strip()]
    return result


def validate(schedule: Mapping) -> list[str]:
    """Returns a message for each slot that is not an HH:MM-HH:MM range.

    Unknown weekday keys are not an error.
    """
    problems = []
    for key, slots in schedule.items():
        if not isinstance(slots, (list, tuple)):
            problems.append(f"{key}: lista de horários esperada")
            continue
        for slot in slots:
            if not is_valid_range(slot):
                problems.append(f"{key}: horário inválido {slot!r}")
    return problems


def format_schedule(schedule: Mapping) -> list[tuple[str, list[str]]]:
    """Pairs of (day label, slots) in the schedule's own key order.

    Unknown keys are shown upper-cased.
    """
    rows = []
    for key, slots in schedule.items():
        day = Weekday.from_key(key)
        label = day.short_label if day is not None else str(key).upper()
        rows.append((label, list(slots or [])))
    return rows
