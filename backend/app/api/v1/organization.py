from datetime import datetime
from typing import Any, List

from fastapi import APIRouter, Depends

from app.api.deps import (
    get_department_repository,
    get_employee_repository,
    get_job_grade_repository,
)
from app.repositories.employee_repository import EmployeeRepository
from app.repositories.organization_repository import DepartmentRepository, JobGradeRepository
from app.schemas.organization import DepartmentResponse, EmployeeCountResponse, JobGradeResponse

departments_router = APIRouter()
job_grades_router = APIRouter()


@departments_router.get("", response_model=List[DepartmentResponse])
async def list_departments(
    repo: DepartmentRepository = Depends(get_department_repository),
) -> Any:
    return await repo.get_all_ordered()


@departments_router.get("/{department_id}", response_model=DepartmentResponse)
async def read_department(
    department_id: int,
    repo: DepartmentRepository = Depends(get_department_repository),
) -> Any:
    return await repo.get_by_id_or_raise(department_id)


@departments_router.get("/{department_id}/employee-count", response_model=EmployeeCountResponse)
async def department_employee_count(
    department_id: int,
    employees: EmployeeRepository = Depends(get_employee_repository),
) -> Any:
    count = await employees.get_employee_count_by_department(department_id)
    return EmployeeCountResponse(id=department_id, employee_count=count, generated_at=datetime.utcnow())


@job_grades_router.get("", response_model=List[JobGradeResponse])
async def list_job_grades(
    repo: JobGradeRepository = Depends(get_job_grade_repository),
) -> Any:
    return await repo.get_all_ordered()


@job_grades_router.get("/{job_grade_id}", response_model=JobGradeResponse)
async def read_job_grade(
    job_grade_id: int,
    repo: JobGradeRepository = Depends(get_job_grade_repository),
) -> Any:
    return await repo.get_by_id_or_raise(job_grade_id)


@job_grades_router.get("/{job_grade_id}/employee-count", response_model=EmployeeCountResponse)
async def job_grade_employee_count(
    job_grade_id: int,
    employees: EmployeeRepository = Depends(get_employee_repository),
) -> Any:
    count = await employees.get_employee_count_by_job_grade(job_grade_id)
    return EmployeeCountResponse(id=job_grade_id, employee_count=count, generated_at=datetime.utcnow())
