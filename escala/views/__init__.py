"""
Read-only views assembled from a Snapshot for the presentation layer
"""

from .dashboard import collaborator_dashboard, load_collaborator_dashboard
from .orders import order_details, order_list
from .roster import employee_roster
from .week import week_board

__all__ = [
    "collaborator_dashboard",
    "employee_roster",
    "load_collaborator_dashboard",
    "order_details",
    "order_list",
    "week_board",
]
