"""Factory for creating Container with the HTTP implementation."""

from typing import Optional

import httpx

from ...container import Container
from .connection import HTTPConnection
from .auth_repository import HTTPAuthRepository
from .department_repository import HTTPDepartmentRepository
from .employee_repository import HTTPEmployeeRepository
from .service_order_repository import HTTPServiceOrderRepository


def create_http_container(
    base_url: Optional[str] = None,
    timeout: Optional[float] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> Container:
    """Creates a Container with HTTP repository implementations.

    Args:
        base_url: API root. Uses ESCALA_API_URL if not specified.
        timeout: Request timeout in seconds.
        transport: Custom httpx transport, mainly for tests.

    Returns:
        Container: Configured with HTTP repositories sharing one connection.
    """
    connection = HTTPConnection(base_url, timeout=timeout, transport=transport)

    return Container(
        connection=connection,
        employees=HTTPEmployeeRepository(connection),
        departments=HTTPDepartmentRepository(connection),
        service_orders=HTTPServiceOrderRepository(connection),
        auth=HTTPAuthRepository(connection),
    )
