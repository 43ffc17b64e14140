# Repositories Package
# Data access only; business rules live in app.services

from app.repositories.base import BaseRepository
from app.repositories.employee_repository import EmployeeRepository
from app.repositories.organization_repository import DepartmentRepository, JobGradeRepository

__all__ = [
    "BaseRepository",
    "EmployeeRepository",
    "DepartmentRepository",
    "JobGradeRepository",
]
