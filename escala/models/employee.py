"""
EmployeePayload - body of POST/PUT /employee
"""

from collections.abc import Sequence
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from ..domain.department import Department
from ..domain.employee import Employee
from ..engine import schedule_codec


class EmployeePayload(BaseModel):
    """
    Employee write payload.

    ``departments`` goes over the wire as department ids and ``work_schedule``
    as a mapping (the API stores it JSON-encoded).
    """

    name: str = Field(..., min_length=1, description="Nome do colaborador")
    username: str = Field(..., min_length=1, description="Login do colaborador")
    departments: list[int] = Field(default_factory=list, description="IDs dos setores")
    work_schedule: dict[str, list[str]] = Field(default_factory=dict)
    password: Optional[str] = Field(None, description="Senha (apenas na criação)")

    class Config:
        str_strip_whitespace = True

    @field_validator("work_schedule", mode="before")
    @classmethod
    def _decode_schedule(cls, value):
        if isinstance(value, str):
            decoded = schedule_codec.decode_with_status(value)
            if not decoded.valid:
                raise ValueError("Formato de horário inválido")
            value = decoded.schedule
        return value

    @field_validator("work_schedule")
    @classmethod
    def _check_slots(cls, value: dict[str, list[str]]) -> dict[str, list[str]]:
        value = schedule_codec.normalize(value)
        problems = schedule_codec.validate(value)
        if problems:
            raise ValueError("Formato de horário inválido: " + "; ".join(problems))
        return value

    @classmethod
    def from_employee(
        cls, employee: Employee, departments: Sequence[Department]
    ) -> "EmployeePayload":
        """Builds an update payload, mapping department names to ids.

        Names with no matching department are dropped; ids are kept as-is.
        """
        by_name = {dept.name: dept.id for dept in departments}
        ids: list[int] = []
        for ref in employee.departments:
            dept_id = ref if isinstance(ref, int) else by_name.get(ref)
            if dept_id is None and isinstance(ref, str) and ref.isdigit():
                dept_id = int(ref)
            if dept_id is not None and dept_id not in ids:
                ids.append(dept_id)
        return cls(
            name=employee.name,
            username=employee.username,
            departments=ids,
            work_schedule=employee.work_schedule,
        )

    def to_request(self) -> dict:
        return self.model_dump(exclude_none=True)
