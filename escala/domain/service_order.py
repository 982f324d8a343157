"""ServiceOrder entity - a recurring job executed on fixed weekdays."""

from dataclasses import dataclass, field
from typing import Optional


def _int_list(values) -> list[int]:
    return [int(value) for value in (values or []) if value is not None]


@dataclass
class OrderDepartment:
    """The part of a service order bound to one department.

    execution_start and execution_end are display values; the engine does not
    check that start comes before end.
    """

    department_id: int
    execution_start: str = ""
    execution_end: str = ""
    collaborators: list[int] = field(default_factory=list)
    id: Optional[int] = None
    department_name: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "OrderDepartment":
        """Creates an OrderDepartment from an API record.

        Read endpoints send ``collaborators``; write payloads use
        ``collaborator_ids``. Either is accepted.
        """
        collaborators = data.get("collaborators")
        if collaborators is None:
            collaborators = data.get("collaborator_ids")
        return cls(
            id=data.get("id"),
            department_id=int(data["department_id"]),
            execution_start=data.get("execution_start") or "",
            execution_end=data.get("execution_end") or "",
            collaborators=_int_list(collaborators),
            department_name=data.get("department_name"),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "department_id": self.department_id,
            "execution_start": self.execution_start,
            "execution_end": self.execution_end,
            "collaborators": list(self.collaborators),
            "department_name": self.department_name,
        }


@dataclass
class ServiceOrder:
    """A service order (OS) recurring on ``service_days`` (0=Sunday .. 6=Saturday)."""

    id: int
    os_number: str
    service_days: list[int] = field(default_factory=list)
    departments: list[OrderDepartment] = field(default_factory=list)
    created_at: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "ServiceOrder":
        """Creates a ServiceOrder from an API record."""
        return cls(
            id=int(data["id"]),
            os_number=str(data.get("os_number") or ""),
            service_days=_int_list(data.get("service_days")),
            departments=[
                OrderDepartment.from_dict(item) for item in data.get("departments") or []
            ],
            created_at=data.get("created_at"),
        )

    def to_dict(self) -> dict:
        """Converts to dictionary."""
        return {
            "id": self.id,
            "os_number": self.os_number,
            "service_days": list(self.service_days),
            "departments": [dept.to_dict() for dept in self.departments],
            "created_at": self.created_at,
        }

    def collaborator_ids(self) -> list[int]:
        """All collaborator ids of this order, first-seen order, no duplicates."""
        seen: list[int] = []
        for dept in self.departments:
            for collaborator_id in dept.collaborators:
                if collaborator_id not in seen:
                    seen.append(collaborator_id)
        return seen
