from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel


class DepartmentResponse(BaseModel):
    id: int
    name: str
    description: Optional[str] = None

    class Config:
        from_attributes = True


class JobGradeResponse(BaseModel):
    id: int
    name: str
    description: Optional[str] = None
    min_salary: Decimal
    max_salary: Decimal

    class Config:
        from_attributes = True


class EmployeeCountResponse(BaseModel):
    """Live (non-deleted) employee headcount for a department or job grade."""
    id: int
    employee_count: int
    generated_at: datetime
