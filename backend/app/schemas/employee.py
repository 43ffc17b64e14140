from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from app.models.employee import EmployeeStatus
from app.schemas.organization import DepartmentResponse, JobGradeResponse

_EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class SalaryRecordResponse(BaseModel):
    id: int
    base_salary: Decimal
    effective_date: date
    notes: Optional[str] = None

    class Config:
        from_attributes = True


class AbsenceRecordResponse(BaseModel):
    id: int
    year: int
    month: int
    sick_leave_days: Decimal
    vacation_days: Decimal
    unpaid_leave_days: Decimal
    notes: Optional[str] = None

    class Config:
        from_attributes = True


class EmployeeResponse(BaseModel):
    """Employee scalar fields only; no related rows."""
    id: int
    employee_number: str
    first_name: str
    last_name: str
    email: str
    phone_number: Optional[str] = None
    hire_date: Optional[date] = None
    status: str
    department_id: int
    job_grade_id: int
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class EmployeeWithJobGrade(EmployeeResponse):
    job_grade: Optional[JobGradeResponse] = None


class EmployeeWithDepartment(EmployeeResponse):
    department: Optional[DepartmentResponse] = None


class EmployeeSummary(EmployeeResponse):
    department: Optional[DepartmentResponse] = None
    job_grade: Optional[JobGradeResponse] = None


class EmployeeListItem(EmployeeSummary):
    salary_records: List[SalaryRecordResponse] = Field(default_factory=list)


class EmployeeDetail(EmployeeListItem):
    absence_records: List[AbsenceRecordResponse] = Field(default_factory=list)


class EmployeePage(BaseModel):
    items: List[EmployeeListItem]
    total: int
    page: int
    page_size: int
    total_pages: int


class EmployeeNumberCheck(BaseModel):
    value: str
    is_unique: bool


class EmailCheck(BaseModel):
    value: str
    is_duplicate: bool


class EmployeeCreate(BaseModel):
    employee_number: str = Field(..., min_length=1, max_length=20)
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    email: str = Field(..., max_length=255, pattern=_EMAIL_PATTERN)
    phone_number: Optional[str] = Field(None, max_length=30)
    hire_date: Optional[date] = None
    status: EmployeeStatus = EmployeeStatus.ACTIVE
    department_id: int
    job_grade_id: int

    @field_validator("employee_number", "first_name", "last_name", "email", mode="before")
    @classmethod
    def _strip(cls, value):
        return value.strip() if isinstance(value, str) else value


class EmployeeUpdate(BaseModel):
    """Partial update; omitted fields are left unchanged."""
    employee_number: Optional[str] = Field(None, min_length=1, max_length=20)
    first_name: Optional[str] = Field(None, min_length=1, max_length=100)
    last_name: Optional[str] = Field(None, min_length=1, max_length=100)
    email: Optional[str] = Field(None, max_length=255, pattern=_EMAIL_PATTERN)
    phone_number: Optional[str] = Field(None, max_length=30)
    hire_date: Optional[date] = None
    status: Optional[EmployeeStatus] = None
    department_id: Optional[int] = None
    job_grade_id: Optional[int] = None

    @field_validator("employee_number", "first_name", "last_name", "email", mode="before")
    @classmethod
    def _strip(cls, value):
        return value.strip() if isinstance(value, str) else value


class SalaryRecordCreate(BaseModel):
    base_salary: Decimal = Field(..., gt=0, max_digits=12, decimal_places=2)
    effective_date: date
    notes: Optional[str] = None


class AbsenceRecordCreate(BaseModel):
    year: int = Field(..., ge=1900, le=2100)
    month: int = Field(..., ge=1, le=12)
    sick_leave_days: Decimal = Field(default=Decimal("0"), ge=0, le=31)
    vacation_days: Decimal = Field(default=Decimal("0"), ge=0, le=31)
    unpaid_leave_days: Decimal = Field(default=Decimal("0"), ge=0, le=31)
    notes: Optional[str] = None

    @model_validator(mode="after")
    def _check_total_days(self):
        if self.sick_leave_days + self.vacation_days + self.unpaid_leave_days > 31:
            raise ValueError("Total absence days in a month cannot exceed 31")
        return self
