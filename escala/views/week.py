"""Weekly board: one column per weekday with the orders running that day."""

from datetime import date, timedelta
from typing import Optional

from ..engine.projector import project_week
from ..store import Snapshot
from .orders import order_details


def week_start(reference: date) -> date:
    """Sunday on or before ``reference``."""
    # date.weekday() is 0 for Monday; the board starts on Sunday.
    return reference - timedelta(days=(reference.weekday() + 1) % 7)


def week_board(
    snapshot: Snapshot,
    department_filter: Optional[int] = None,
    reference: Optional[date] = None,
) -> list[dict]:
    """Seven day columns, Sunday first, for the week containing ``reference``.

    Each column carries its calendar date (dd/MM) and the matching orders.
    """
    start = week_start(reference or date.today())
    board = []
    for column in project_week(snapshot.orders, department_filter):
        day_date = start + timedelta(days=int(column.weekday))
        board.append(
            {
                "weekday": int(column.weekday),
                "key": column.key,
                "label": column.label,
                "date": day_date.strftime("%d/%m"),
                "orders": [order_details(snapshot, order) for order in column.orders],
            }
        )
    return board
