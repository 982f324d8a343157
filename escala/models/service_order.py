"""
ServiceOrderPayload - body of POST/PUT /service-orders

Updates replace the whole order: the payload always carries the complete
``departments`` and ``service_days`` arrays.
"""

from pydantic import BaseModel, Field, field_validator

from ..domain.service_order import ServiceOrder
from ..engine.time_window import is_valid_time, normalize_time


class OrderDepartmentPayload(BaseModel):
    """One department assignment inside an order payload."""

    department_id: int = Field(..., gt=0, description="ID do setor")
    execution_start: str = Field(..., description="Início da execução (HH:MM)")
    execution_end: str = Field(..., description="Fim da execução (HH:MM)")
    collaborator_ids: list[int] = Field(default_factory=list)

    @field_validator("execution_start", "execution_end")
    @classmethod
    def _check_time(cls, value: str) -> str:
        if not is_valid_time(value):
            raise ValueError(f"Horário inválido: {value!r}")
        return normalize_time(value)

    @field_validator("collaborator_ids")
    @classmethod
    def _dedupe(cls, value: list[int]) -> list[int]:
        return list(dict.fromkeys(value))


class ServiceOrderPayload(BaseModel):
    """Create/update payload for a service order."""

    os_number: str = Field(..., min_length=1, description="Número da OS")
    service_days: list[int] = Field(..., description="Dias da semana (0 = Domingo)")
    departments: list[OrderDepartmentPayload] = Field(default_factory=list)

    class Config:
        str_strip_whitespace = True

    @field_validator("service_days")
    @classmethod
    def _check_days(cls, value: list[int]) -> list[int]:
        if not value:
            raise ValueError("Selecione pelo menos um dia da semana")
        for day in value:
            if day < 0 or day > 6:
                raise ValueError(f"Dia da semana inválido: {day}")
        return sorted(set(value))

    @classmethod
    def from_order(cls, order: ServiceOrder) -> "ServiceOrderPayload":
        """Builds the full-replace payload for an existing order."""
        return cls(
            os_number=order.os_number,
            service_days=order.service_days,
            departments=[
                OrderDepartmentPayload(
                    department_id=dept.department_id,
                    execution_start=dept.execution_start,
                    execution_end=dept.execution_end,
                    collaborator_ids=dept.collaborators,
                )
                for dept in order.departments
            ],
        )

    def to_request(self) -> dict:
        return self.model_dump()
