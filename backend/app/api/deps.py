from typing import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.session import AsyncSessionLocal
from app.repositories.employee_repository import EmployeeRepository
from app.repositories.organization_repository import DepartmentRepository, JobGradeRepository
from app.services.employee_service import EmployeeService


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """One short-lived session per request; never shared across requests."""
    async with AsyncSessionLocal() as session:
        yield session


def get_employee_repository(db: AsyncSession = Depends(get_db)) -> EmployeeRepository:
    return EmployeeRepository(db)


def get_department_repository(db: AsyncSession = Depends(get_db)) -> DepartmentRepository:
    return DepartmentRepository(db)


def get_job_grade_repository(db: AsyncSession = Depends(get_db)) -> JobGradeRepository:
    return JobGradeRepository(db)


def get_employee_service(db: AsyncSession = Depends(get_db)) -> EmployeeService:
    return EmployeeService(db)
