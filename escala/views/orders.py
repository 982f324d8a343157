"""Service order details and list."""

from ..domain.service_order import ServiceOrder
from ..engine import labels
from ..engine.time_window import format_window
from ..store import Snapshot


def order_details(snapshot: Snapshot, order: ServiceOrder, fallback: str = "unknown") -> dict:
    """Order with days, department names, windows and collaborator names resolved.

    Args:
        snapshot: Current snapshot.
        order: Order to describe.
        fallback: Placeholder style for unknown collaborators ("unknown" or "id").
    """
    departments = []
    for dept in order.departments:
        name = labels.department_name(snapshot.departments, dept.department_id)
        departments.append(
            {
                "department_id": dept.department_id,
                "name": name,
                "color": labels.department_color(name),
                "window": format_window(dept.execution_start, dept.execution_end),
                "collaborators": [
                    {
                        "id": collaborator_id,
                        "name": labels.employee_name(
                            snapshot.employees, collaborator_id, fallback=fallback
                        ),
                    }
                    for collaborator_id in dept.collaborators
                ],
            }
        )
    return {
        "id": order.id,
        "os_number": order.os_number,
        "created_at": order.created_at,
        "service_days": list(order.service_days),
        "days": [labels.day_label(day) for day in order.service_days],
        "departments": departments,
    }


def order_list(snapshot: Snapshot) -> list[dict]:
    """Every loaded order, in load order. Unknown collaborators show as "ID {id}"."""
    return [order_details(snapshot, order, fallback="id") for order in snapshot.orders]
