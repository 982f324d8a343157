"""Projects service orders onto the seven days of the week."""

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Optional

from ..constants.weekdays import Weekday
from ..domain.service_order import ServiceOrder


@dataclass
class DayColumn:
    """Orders active on one weekday."""

    weekday: Weekday
    orders: list[ServiceOrder] = field(default_factory=list)

    @property
    def key(self) -> str:
        return self.weekday.key

    @property
    def label(self) -> str:
        return self.weekday.label


def has_department(order: ServiceOrder, department_id: int) -> bool:
    return any(dept.department_id == department_id for dept in order.departments)


def orders_for_day(
    orders: Sequence[ServiceOrder],
    weekday: int,
    department_filter: Optional[int] = None,
) -> list[ServiceOrder]:
    """Orders recurring on ``weekday``, optionally restricted to one department.

    Input order is preserved. A weekday outside 0-6 matches nothing.
    """
    if Weekday.from_index(weekday) is None:
        return []
    return [
        order
        for order in orders
        if weekday in order.service_days
        and (department_filter is None or has_department(order, department_filter))
    ]


def project_week(
    orders: Sequence[ServiceOrder],
    department_filter: Optional[int] = None,
) -> list[DayColumn]:
    """One column per weekday, Sunday first."""
    return [
        DayColumn(weekday=day, orders=orders_for_day(orders, day, department_filter))
        for day in Weekday
    ]
