"""HTTP implementation of DepartmentRepository."""

from typing import Optional

from ..interfaces.department_repository import IDepartmentRepository
from ...domain.department import Department
from ...models.department import DepartmentPayload
from ...config import logger as log
from .connection import HTTPConnection, parse_collection


class HTTPDepartmentRepository(IDepartmentRepository):
    """Departments served by /departments."""

    def __init__(self, connection: HTTPConnection):
        self._conn = connection

    async def get_all(self) -> list[Department]:
        """Gets every department."""
        log.debug("repo.department", "get_all")
        data = await self._conn.get("departments")
        results = [Department.from_dict(item) for item in parse_collection(data)]
        log.debug("repo.department", "get_all result", count=len(results), names=[d.name for d in results])
        return results

    async def create(self, payload: DepartmentPayload) -> Optional[Department]:
        """Creates a department."""
        log.info("repo.department", "create", name=payload.name)
        data = await self._conn.post("departments", payload.model_dump())
        if not data:
            log.warn("repo.department", "create answered without a body", name=payload.name)
            return None
        return Department.from_dict(data)

    async def update(self, department_id: int, payload: DepartmentPayload) -> Optional[Department]:
        """Renames a department."""
        log.info("repo.department", "update", department_id=department_id, name=payload.name)
        data = await self._conn.put(
            f"departments/{department_id}", {"id": department_id, **payload.model_dump()}
        )
        if not data:
            return Department(id=department_id, name=payload.name)
        return Department.from_dict(data)

    async def delete(self, department_id: int) -> None:
        """Deletes a department."""
        log.info("repo.department", "delete", department_id=department_id)
        await self._conn.delete(f"departments/{department_id}")
