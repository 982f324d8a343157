"""Busy/available status derived from collaborator lists.

Status is assignment-based only: an employee is busy when their id appears in
any loaded order's collaborator list, whatever the weekday and whatever their
nominal ``Employee.departments``. Nothing here is cached; callers recompute
from the current snapshot.
"""

from collections.abc import Iterable, Sequence

from ..constants.labels import STATUS_AVAILABLE, STATUS_UNAVAILABLE, UNKNOWN_DEPARTMENT
from ..domain.service_order import ServiceOrder
from .labels import department_name


def busy_set(orders: Iterable[ServiceOrder]) -> set[int]:
    """Ids of every collaborator in any department assignment of any order."""
    busy: set[int] = set()
    for order in orders:
        for dept in order.departments:
            busy.update(dept.collaborators)
    return busy


def employee_departments(
    orders: Iterable[ServiceOrder], departments: Sequence = ()
) -> dict[int, list[str]]:
    """Department names each collaborator currently works under.

    Names are listed in first-seen order without repeats. Department ids that
    cannot be resolved fall back to the name echoed by the API, then to the
    unknown-department placeholder.
    """
    result: dict[int, list[str]] = {}
    for order in orders:
        for dept in order.departments:
            name = department_name(departments, dept.department_id)
            if name == UNKNOWN_DEPARTMENT and dept.department_name:
                name = dept.department_name
            for collaborator_id in dept.collaborators:
                names = result.setdefault(collaborator_id, [])
                if name not in names:
                    names.append(name)
    return result


def status(employee_id: int, busy: set[int]) -> str:
    return STATUS_UNAVAILABLE if employee_id in busy else STATUS_AVAILABLE


def orders_for_employee(
    orders: Iterable[ServiceOrder], employee_id: int
) -> list[ServiceOrder]:
    """Orders where the employee is a collaborator in at least one department."""
    return [
        order
        for order in orders
        if employee_id in order.collaborator_ids()
    ]
