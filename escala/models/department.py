"""
DepartmentPayload - body of POST/PUT /departments
"""

from pydantic import BaseModel, Field


class DepartmentPayload(BaseModel):
    """The name is all the API needs for a department."""

    name: str = Field(..., min_length=1, description="Nome do setor")

    class Config:
        str_strip_whitespace = True
