"""Interface for department repository."""

from abc import ABC, abstractmethod
from typing import Optional

from ...domain.department import Department
from ...models.department import DepartmentPayload


class IDepartmentRepository(ABC):
    """Contract for department data access."""

    @abstractmethod
    async def get_all(self) -> list[Department]:
        """Gets every department."""
        pass

    @abstractmethod
    async def create(self, payload: DepartmentPayload) -> Optional[Department]:
        """Creates a department. None if the API confirms without returning the record."""
        pass

    @abstractmethod
    async def update(self, department_id: int, payload: DepartmentPayload) -> Optional[Department]:
        """Renames a department. Returns None when the API sends no body."""
        pass

    @abstractmethod
    async def delete(self, department_id: int) -> None:
        """Deletes a department."""
        pass
