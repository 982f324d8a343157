"""
Payload models for write requests to the backend API
"""
from .department import DepartmentPayload
from .employee import EmployeePayload
from .service_order import OrderDepartmentPayload, ServiceOrderPayload

__all__ = [
    "DepartmentPayload",
    "EmployeePayload",
    "OrderDepartmentPayload",
    "ServiceOrderPayload",
]
