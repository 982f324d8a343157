"""Employee roster with current status and working departments."""

from ..constants.labels import INVALID_SCHEDULE_LABEL, STATUS_LABELS
from ..engine import schedule_codec
from ..engine.availability import busy_set, employee_departments, status
from ..store import Snapshot


def employee_roster(snapshot: Snapshot) -> list[dict]:
    """One row per employee.

    ``working_departments`` is derived from the loaded orders;
    ``departments`` is the employee's nominal list as stored.
    """
    busy = busy_set(snapshot.orders)
    working = employee_departments(snapshot.orders, snapshot.departments)
    rows = []
    for employee in snapshot.employees:
        employee_status = status(employee.id, busy)
        rows.append(
            {
                "id": employee.id,
                "name": employee.name,
                "username": employee.username,
                "status": employee_status,
                "status_label": STATUS_LABELS[employee_status],
                "departments": list(employee.departments),
                "working_departments": working.get(employee.id, []),
                "schedule_valid": employee.schedule_valid,
                "schedule": (
                    schedule_codec.format_schedule(employee.work_schedule)
                    if employee.schedule_valid
                    else INVALID_SCHEDULE_LABEL
                ),
            }
        )
    return rows
