from typing import Any, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response, status

from app.api.deps import get_employee_repository, get_employee_service
from app.api.helpers import build_employee_page, clamp_page_size
from app.core.config import settings
from app.core.rate_limiter import RateLimits, limiter
from app.repositories.employee_repository import EmployeeRepository
from app.schemas.employee import (
    AbsenceRecordCreate,
    AbsenceRecordResponse,
    EmailCheck,
    EmployeeCreate,
    EmployeeDetail,
    EmployeeListItem,
    EmployeeNumberCheck,
    EmployeePage,
    EmployeeResponse,
    EmployeeSummary,
    EmployeeUpdate,
    EmployeeWithDepartment,
    EmployeeWithJobGrade,
    SalaryRecordCreate,
    SalaryRecordResponse,
)
from app.services.employee_service import EmployeeService

router = APIRouter()


@router.get("", response_model=EmployeePage)
@limiter.limit(RateLimits.API_SEARCH)
async def list_employees(
    request: Request,
    page: int = Query(1, ge=1),
    page_size: Optional[int] = Query(None, ge=1),
    search: Optional[str] = Query(None, max_length=100),
    department_id: Optional[int] = None,
    job_grade_id: Optional[int] = None,
    repo: EmployeeRepository = Depends(get_employee_repository),
) -> Any:
    """
    Paginated employee list ordered by last name, first name.
    `search` matches first name, last name, employee number or email (case-insensitive substring).
    """
    size = clamp_page_size(page_size)
    employees = await repo.get_employees_with_details(
        page, size, search_term=search, department_id=department_id, job_grade_id=job_grade_id
    )
    total = await repo.get_total_count(
        search_term=search, department_id=department_id, job_grade_id=job_grade_id
    )
    return build_employee_page(employees, total, page, size)


@router.get("/all", response_model=List[EmployeeDetail])
@limiter.limit(RateLimits.API_READ)
async def list_all_employees(
    request: Request,
    repo: EmployeeRepository = Depends(get_employee_repository),
) -> Any:
    return await repo.get_all_with_details()


@router.get("/active", response_model=List[EmployeeSummary])
@limiter.limit(RateLimits.API_READ)
async def list_active_employees(
    request: Request,
    repo: EmployeeRepository = Depends(get_employee_repository),
) -> Any:
    return await repo.get_all_active_employees()


@router.get("/recent", response_model=List[EmployeeSummary])
@limiter.limit(RateLimits.API_READ)
async def list_recent_employees(
    request: Request,
    count: int = Query(settings.RECENT_EMPLOYEES_DEFAULT, ge=1, le=100),
    repo: EmployeeRepository = Depends(get_employee_repository),
) -> Any:
    return await repo.get_recent_employees_with_details(count)


@router.get("/by-department/{department_id}", response_model=List[EmployeeWithJobGrade])
async def list_employees_by_department(
    department_id: int,
    repo: EmployeeRepository = Depends(get_employee_repository),
) -> Any:
    return await repo.get_by_department(department_id)


@router.get("/by-job-grade/{job_grade_id}", response_model=List[EmployeeWithDepartment])
async def list_employees_by_job_grade(
    job_grade_id: int,
    repo: EmployeeRepository = Depends(get_employee_repository),
) -> Any:
    return await repo.get_by_job_grade(job_grade_id)


@router.get("/by-number/{employee_number}", response_model=EmployeeListItem)
@limiter.limit(RateLimits.API_READ)
async def read_employee_by_number(
    request: Request,
    employee_number: str,
    repo: EmployeeRepository = Depends(get_employee_repository),
) -> Any:
    employee = await repo.get_employee_by_employee_number(employee_number)
    if employee is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Employee not found",
        )
    return employee


@router.get("/check-number", response_model=EmployeeNumberCheck)
async def check_employee_number(
    employee_number: str = Query(..., min_length=1),
    exclude_id: Optional[int] = None,
    repo: EmployeeRepository = Depends(get_employee_repository),
) -> Any:
    """Advisory pre-check for form validation; the write itself is authoritative."""
    is_unique = await repo.is_employee_number_unique(employee_number, exclude_id=exclude_id)
    return EmployeeNumberCheck(value=employee_number, is_unique=is_unique)


@router.get("/check-email", response_model=EmailCheck)
async def check_email(
    email: str = Query(..., min_length=1),
    exclude_id: Optional[int] = None,
    repo: EmployeeRepository = Depends(get_employee_repository),
) -> Any:
    """Advisory pre-check for form validation; the write itself is authoritative."""
    is_duplicate = await repo.is_duplicate_email(email, exclude_id=exclude_id)
    return EmailCheck(value=email, is_duplicate=is_duplicate)


@router.get("/deleted/{employee_id}", response_model=EmployeeResponse)
async def read_deleted_employee(
    employee_id: int,
    repo: EmployeeRepository = Depends(get_employee_repository),
) -> Any:
    employee = await repo.get_deleted_employee_by_id(employee_id)
    if employee is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Deleted employee not found",
        )
    return employee


@router.get("/{employee_id}", response_model=EmployeeDetail)
@limiter.limit(RateLimits.API_READ)
async def read_employee(
    request: Request,
    employee_id: int,
    repo: EmployeeRepository = Depends(get_employee_repository),
) -> Any:
    """
    Get employee by ID with department, job grade, salary and absence history.
    """
    return await repo.get_employee_with_details(employee_id)


@router.post("", response_model=EmployeeResponse, status_code=status.HTTP_201_CREATED)
@limiter.limit(RateLimits.API_WRITE)
async def create_employee(
    request: Request,
    payload: EmployeeCreate,
    service: EmployeeService = Depends(get_employee_service),
) -> Any:
    return await service.create_employee(payload)


@router.patch("/{employee_id}", response_model=EmployeeResponse)
@limiter.limit(RateLimits.API_WRITE)
async def update_employee(
    request: Request,
    employee_id: int,
    payload: EmployeeUpdate,
    service: EmployeeService = Depends(get_employee_service),
) -> Any:
    return await service.update_employee(employee_id, payload)


@router.delete("/{employee_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_employee(
    employee_id: int,
    service: EmployeeService = Depends(get_employee_service),
) -> Response:
    await service.delete_employee(employee_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{employee_id}/restore", response_model=EmployeeResponse)
async def restore_employee(
    employee_id: int,
    service: EmployeeService = Depends(get_employee_service),
) -> Any:
    return await service.restore_employee(employee_id)


@router.post(
    "/{employee_id}/salary-records",
    response_model=SalaryRecordResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_salary_record(
    employee_id: int,
    payload: SalaryRecordCreate,
    service: EmployeeService = Depends(get_employee_service),
) -> Any:
    return await service.add_salary_record(employee_id, payload)


@router.post(
    "/{employee_id}/absence-records",
    response_model=AbsenceRecordResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_absence_record(
    employee_id: int,
    payload: AbsenceRecordCreate,
    service: EmployeeService = Depends(get_employee_service),
) -> Any:
    return await service.add_absence_record(employee_id, payload)
