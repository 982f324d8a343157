"""Collaborator dashboard: the orders the logged-in collaborator works on."""

import asyncio
from dataclasses import replace
from typing import Optional

from ..container import Container, get_container
from ..domain.service_order import ServiceOrder
from ..domain.session import Session
from ..engine.availability import orders_for_employee
from ..errors import SessionError
from ..session import require_collaborator
from ..store import Snapshot
from .orders import order_details


def _own_assignments(order: ServiceOrder, employee_id: int) -> ServiceOrder:
    return replace(
        order,
        departments=[d for d in order.departments if employee_id in d.collaborators],
    )


def collaborator_dashboard(snapshot: Snapshot, session: Session) -> dict:
    """Employee info plus their orders.

    Each order keeps only the department assignments that include the
    collaborator, without the list of co-workers.

    Raises:
        SessionError: If the session is not a collaborator session or the
            username is not among the loaded employees.
    """
    username = require_collaborator(session)
    employee = snapshot.find_employee_by_username(username)
    if employee is None:
        raise SessionError("Colaborador não encontrado")

    orders = []
    for order in orders_for_employee(snapshot.orders, employee.id):
        details = order_details(snapshot, _own_assignments(order, employee.id))
        for dept in details["departments"]:
            del dept["collaborators"]
        orders.append(details)
    return {
        "employee": {"id": employee.id, "name": employee.name, "username": employee.username},
        "orders": orders,
    }


async def load_collaborator_dashboard(
    session: Session, container: Optional[Container] = None
) -> dict:
    """Fetches only what one collaborator needs and builds their dashboard."""
    username = require_collaborator(session)
    container = container or get_container()
    employee, departments, orders = await asyncio.gather(
        container.employees.get_by_username(username),
        container.departments.get_all(),
        container.service_orders.get_all(),
    )
    if employee is None:
        raise SessionError("Colaborador não encontrado")
    snapshot = Snapshot(
        employees=(employee,), departments=tuple(departments), orders=tuple(orders)
    )
    return collaborator_dashboard(snapshot, session)
