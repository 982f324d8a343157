"""HTTP implementation of EmployeeRepository."""

from typing import Optional

from ..interfaces.employee_repository import IEmployeeRepository
from ...domain.employee import Employee
from ...models.employee import EmployeePayload
from ...config import logger as log
from ...errors import ApiError
from .connection import HTTPConnection, parse_collection


class HTTPEmployeeRepository(IEmployeeRepository):
    """Employees served by /employee and /employees."""

    def __init__(self, connection: HTTPConnection):
        self._conn = connection

    async def get_all(self) -> list[Employee]:
        """Gets every employee."""
        log.debug("repo.employee", "get_all")
        data = await self._conn.get("employee/all")
        results = [Employee.from_dict(item) for item in parse_collection(data)]
        invalid = [e.id for e in results if not e.schedule_valid]
        log.debug("repo.employee", "get_all result", count=len(results), invalid_schedules=invalid)
        return results

    async def get_by_username(self, username: str) -> Optional[Employee]:
        """Gets an employee by login handle."""
        log.debug("repo.employee", "get_by_username", username=username)
        try:
            data = await self._conn.get(f"employees/{username}")
        except ApiError as e:
            if e.status_code == 404:
                return None
            raise
        result = Employee.from_dict(data) if data else None
        log.debug("repo.employee", "get_by_username result", found=result is not None)
        return result

    async def create(self, payload: EmployeePayload) -> Optional[Employee]:
        """Creates an employee."""
        log.info("repo.employee", "create", username=payload.username)
        data = await self._conn.post("employee", payload.to_request())
        if not data:
            log.warn("repo.employee", "create answered without a body", username=payload.username)
            return None
        return Employee.from_dict(data)

    async def update(self, employee_id: int, payload: EmployeePayload) -> Optional[Employee]:
        """Updates an employee."""
        log.info("repo.employee", "update", employee_id=employee_id)
        data = await self._conn.put(f"employee/{employee_id}", payload.to_request())
        return Employee.from_dict(data) if data else None

    async def delete(self, employee_id: int) -> None:
        """Deletes an employee."""
        log.info("repo.employee", "delete", employee_id=employee_id)
        await self._conn.delete(f"employee/{employee_id}")
