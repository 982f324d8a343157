"""Entity store: an immutable snapshot of employees, departments and orders.

A snapshot is only ever built from three successful reads. Writes return a
new snapshot and the caller swaps its reference, so derived views never see
a mix of old and new data.
"""

import asyncio
from dataclasses import dataclass, replace
from typing import Optional

from .config import logger as log
from .container import Container, get_container
from .domain.department import Department
from .domain.employee import Employee
from .domain.service_order import ServiceOrder
from .models.department import DepartmentPayload
from .models.employee import EmployeePayload
from .models.service_order import ServiceOrderPayload


@dataclass(frozen=True)
class Snapshot:
    """One consistent load of the three entity sets."""

    employees: tuple[Employee, ...] = ()
    departments: tuple[Department, ...] = ()
    orders: tuple[ServiceOrder, ...] = ()

    @classmethod
    def empty(cls) -> "Snapshot":
        """The state before the first load completes."""
        return cls()

    @property
    def is_empty(self) -> bool:
        return not (self.employees or self.departments or self.orders)

    def find_employee(self, employee_id: int) -> Optional[Employee]:
        return next((e for e in self.employees if e.id == employee_id), None)

    def find_employee_by_username(self, username: str) -> Optional[Employee]:
        return next((e for e in self.employees if e.username == username), None)

    def find_order(self, order_id: int) -> Optional[ServiceOrder]:
        return next((o for o in self.orders if o.id == order_id), None)

    def with_order(self, order: ServiceOrder) -> "Snapshot":
        """Replaces the order with the same id in place, or appends it."""
        if self.find_order(order.id) is None:
            return replace(self, orders=self.orders + (order,))
        return replace(
            self, orders=tuple(order if o.id == order.id else o for o in self.orders)
        )

    def without_order(self, order_id: int) -> "Snapshot":
        return replace(self, orders=tuple(o for o in self.orders if o.id != order_id))

    def with_employee(self, employee: Employee) -> "Snapshot":
        """Replaces the employee with the same id in place, or appends it."""
        if self.find_employee(employee.id) is None:
            return replace(self, employees=self.employees + (employee,))
        return replace(
            self,
            employees=tuple(employee if e.id == employee.id else e for e in self.employees),
        )

    def without_employee(self, employee_id: int) -> "Snapshot":
        return replace(
            self, employees=tuple(e for e in self.employees if e.id != employee_id)
        )

    def with_department(self, department: Department) -> "Snapshot":
        others = tuple(d for d in self.departments if d.id != department.id)
        if len(others) == len(self.departments):
            return replace(self, departments=self.departments + (department,))
        return replace(
            self,
            departments=tuple(
                department if d.id == department.id else d for d in self.departments
            ),
        )

    def without_department(self, department_id: int) -> "Snapshot":
        return replace(
            self, departments=tuple(d for d in self.departments if d.id != department_id)
        )


async def load_snapshot(container: Optional[Container] = None) -> Snapshot:
    """Fetches employees, departments and orders concurrently.

    If any request fails the error propagates and no snapshot is built; the
    caller keeps whatever snapshot it had.
    """
    container = container or get_container()
    employees, departments, orders = await asyncio.gather(
        container.employees.get_all(),
        container.departments.get_all(),
        container.service_orders.get_all(),
    )
    log.info(
        "store",
        "Snapshot loaded",
        employees=len(employees),
        departments=len(departments),
        orders=len(orders),
    )
    return Snapshot(
        employees=tuple(employees),
        departments=tuple(departments),
        orders=tuple(orders),
    )


async def save_order(
    snapshot: Snapshot,
    payload: ServiceOrderPayload,
    order_id: Optional[int] = None,
    container: Optional[Container] = None,
) -> tuple[Snapshot, Optional[ServiceOrder]]:
    """Creates (``order_id`` None) or fully replaces an order.

    The returned snapshot includes the order as answered by the API. A create
    answered without a body is followed by a full reload, and the order is
    looked up there by its number (None if the reload does not list it).
    """
    container = container or get_container()
    if order_id is None:
        order = await container.service_orders.create(payload)
        if order is None:
            snapshot = await load_snapshot(container)
            matches = [o for o in snapshot.orders if o.os_number == payload.os_number]
            return snapshot, (matches[-1] if matches else None)
    else:
        order = await container.service_orders.update(order_id, payload)
    return snapshot.with_order(order), order


async def delete_order(
    snapshot: Snapshot, order_id: int, container: Optional[Container] = None
) -> Snapshot:
    """Deletes an order and drops it locally without re-fetching."""
    container = container or get_container()
    await container.service_orders.delete(order_id)
    return snapshot.without_order(order_id)


def _employee_from_payload(
    current: Optional[Employee], employee_id: int, payload: EmployeePayload
) -> Employee:
    """The employee as submitted, on top of what the snapshot already knew."""
    submitted = dict(
        name=payload.name,
        username=payload.username,
        departments=list(payload.departments),
        work_schedule=dict(payload.work_schedule),
        schedule_valid=True,
    )
    if current is None:
        return Employee(id=employee_id, **submitted)
    return replace(current, **submitted)


async def save_employee(
    snapshot: Snapshot,
    payload: EmployeePayload,
    employee_id: Optional[int] = None,
    container: Optional[Container] = None,
) -> tuple[Snapshot, Optional[Employee]]:
    """Creates (``employee_id`` None) or updates an employee.

    An update answered without a body keeps the submitted values. A create
    answered without a body is followed by a full reload.
    """
    container = container or get_container()
    if employee_id is None:
        employee = await container.employees.create(payload)
        if employee is None:
            snapshot = await load_snapshot(container)
            return snapshot, snapshot.find_employee_by_username(payload.username)
    else:
        employee = await container.employees.update(employee_id, payload)
        if employee is None:
            employee = _employee_from_payload(
                snapshot.find_employee(employee_id), employee_id, payload
            )
    return snapshot.with_employee(employee), employee


async def delete_employee(
    snapshot: Snapshot, employee_id: int, container: Optional[Container] = None
) -> Snapshot:
    container = container or get_container()
    await container.employees.delete(employee_id)
    return snapshot.without_employee(employee_id)


async def save_department(
    snapshot: Snapshot,
    payload: DepartmentPayload,
    department_id: Optional[int] = None,
    container: Optional[Container] = None,
) -> tuple[Snapshot, Optional[Department]]:
    container = container or get_container()
    if department_id is None:
        department = await container.departments.create(payload)
        if department is None:
            snapshot = await load_snapshot(container)
            matches = [d for d in snapshot.departments if d.name == payload.name]
            return snapshot, (matches[-1] if matches else None)
    else:
        department = await container.departments.update(department_id, payload)
    return snapshot.with_department(department), department


async def delete_department(
    snapshot: Snapshot, department_id: int, container: Optional[Container] = None
) -> Snapshot:
    container = container or get_container()
    await container.departments.delete(department_id)
    return snapshot.without_department(department_id)
