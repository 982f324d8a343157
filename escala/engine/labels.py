"""Resolves ids and weekday codes to display strings.

Lookups never raise and never return an empty string: a miss (for example an
order pointing at a department deleted later) yields a placeholder.
"""

from collections.abc import Iterable
from typing import Optional, Union

from ..constants.labels import (
    DEFAULT_DEPARTMENT_COLOR,
    DEPARTMENT_COLORS,
    EMPLOYEE_ID_FALLBACK,
    UNKNOWN_DEPARTMENT,
    UNKNOWN_EMPLOYEE,
)
from ..constants.weekdays import INVALID_DAY_LABEL, Weekday


def _find_name(items: Iterable, item_id) -> Optional[str]:
    for item in items or []:
        if item.id == item_id:
            return item.name or None
    return None


def department_name(departments: Iterable, department_id) -> str:
    """Name of a department, or "Departamento Desconhecido"."""
    return _find_name(departments, department_id) or UNKNOWN_DEPARTMENT


def employee_name(employees: Iterable, employee_id, fallback: str = "unknown") -> str:
    """Name of an employee.

    Args:
        employees: Loaded employees.
        employee_id: Collaborator id.
        fallback: "unknown" gives "Desconhecido"; "id" gives "ID {id}".
    """
    name = _find_name(employees, employee_id)
    if name:
        return name
    if fallback == "id":
        return EMPLOYEE_ID_FALLBACK.format(id=employee_id)
    return UNKNOWN_EMPLOYEE


def department_color(name: str) -> str:
    return DEPARTMENT_COLORS.get(name, DEFAULT_DEPARTMENT_COLOR)


def day_label(day: Union[int, str], short: bool = False) -> str:
    """Label for a weekday index (0-6) or schedule key ("seg").

    Indices outside 0-6 give "Dia inválido"; unknown keys are returned as-is.
    """
    if isinstance(day, int):
        weekday = Weekday.from_index(day)
        if weekday is None:
            return INVALID_DAY_LABEL
    else:
        weekday = Weekday.from_key(day)
        if weekday is None:
            return str(day) or INVALID_DAY_LABEL
    return weekday.short_label if short else weekday.label
