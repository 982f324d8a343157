"""Employee entity - a collaborator who can be assigned to service orders."""

from dataclasses import dataclass, field
from typing import Optional, Union

from ..engine.schedule_codec import decode_with_status, encode

DepartmentRef = Union[int, str]


def _parse_departments(raw) -> list[DepartmentRef]:
    """Accepts a JSON array or the comma-separated string some endpoints send."""
    if raw is None:
        return []
    if isinstance(raw, str):
        return [part.strip() for part in raw.split(",") if part.strip()]
    result: list[DepartmentRef] = []
    for item in raw:
        if isinstance(item, dict):
            item = item.get("name") or item.get("id")
        if item is None or item == "":
            continue
        result.append(item.strip() if isinstance(item, str) else item)
    return result


@dataclass
class Employee:
    """An employee, with the weekly hours they nominally work."""

    id: int
    name: str
    username: str = ""
    departments: list[DepartmentRef] = field(default_factory=list)
    work_schedule: dict[str, list[str]] = field(default_factory=dict)
    schedule_valid: bool = True
    email: Optional[str] = None
    phone: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "Employee":
        """Creates an Employee from an API record.

        A work_schedule that cannot be decoded becomes an empty schedule and
        ``schedule_valid`` is set to False.
        """
        decoded = decode_with_status(data.get("work_schedule"))
        return cls(
            id=int(data["id"]),
            name=data.get("name") or "",
            username=data.get("username") or "",
            departments=_parse_departments(data.get("departments")),
            work_schedule=decoded.schedule,
            schedule_valid=decoded.valid,
            email=data.get("email"),
            phone=data.get("phone"),
        )

    def to_dict(self) -> dict:
        """Converts to the API record shape (work_schedule JSON-encoded)."""
        return {
            "id": self.id,
            "name": self.name,
            "username": self.username,
            "departments": list(self.departments),
            "work_schedule": encode(self.work_schedule),
            "email": self.email,
            "phone": self.phone,
        }
