"""Dependency injection container for repository access."""

from dataclasses import dataclass
from typing import Optional

from .repositories.http.connection import HTTPConnection
from .repositories.interfaces.auth_repository import IAuthRepository
from .repositories.interfaces.department_repository import IDepartmentRepository
from .repositories.interfaces.employee_repository import IEmployeeRepository
from .repositories.interfaces.service_order_repository import IServiceOrderRepository


@dataclass
class Container:
    """Holds all repository instances for dependency injection."""

    connection: Optional[HTTPConnection]
    employees: IEmployeeRepository
    departments: IDepartmentRepository
    service_orders: IServiceOrderRepository
    auth: IAuthRepository

    async def aclose(self) -> None:
        """Closes the underlying HTTP connection, if any."""
        if self.connection is not None:
            await self.connection.aclose()


_container: Optional[Container] = None


def get_container() -> Container:
    """Returns the global container instance.

    Raises:
        RuntimeError: If container has not been initialized.
    """
    if _container is None:
        raise RuntimeError(
            "Container not initialized. Call set_container() in the application entry point."
        )
    return _container


def set_container(container: Container) -> None:
    """Sets the global container instance.

    Args:
        container: Container with concrete repository implementations.
    """
    global _container
    _container = container


def reset_container() -> None:
    """Resets the global container. Useful for testing."""
    global _container
    _container = None
