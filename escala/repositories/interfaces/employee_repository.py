"""Interface for employee repository."""

from abc import ABC, abstractmethod
from typing import Optional

from ...domain.employee import Employee
from ...models.employee import EmployeePayload


class IEmployeeRepository(ABC):
    """Contract for employee data access."""

    @abstractmethod
    async def get_all(self) -> list[Employee]:
        """Gets every employee."""
        pass

    @abstractmethod
    async def get_by_username(self, username: str) -> Optional[Employee]:
        """Gets an employee by login handle."""
        pass

    @abstractmethod
    async def create(self, payload: EmployeePayload) -> Optional[Employee]:
        """Creates an employee. None if the API confirms without returning the record."""
        pass

    @abstractmethod
    async def update(self, employee_id: int, payload: EmployeePayload) -> Optional[Employee]:
        """Updates an employee. Returns None when the API sends no body."""
        pass

    @abstractmethod
    async def delete(self, employee_id: int) -> None:
        """Deletes an employee."""
        pass
