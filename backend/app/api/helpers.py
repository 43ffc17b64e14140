"""
Common API helper functions shared by the routers.
"""

import math
from typing import List, Optional

from fastapi import HTTPException, status

from app.core.config import settings
from app.models.employee import Employee
from app.schemas.employee import EmployeeListItem, EmployeePage


def total_pages(total: int, page_size: int) -> int:
    if total <= 0:
        return 0
    return math.ceil(total / page_size)


def clamp_page_size(page_size: Optional[int]) -> int:
    """Apply the configured default and reject sizes above MAX_PAGE_SIZE."""
    if page_size is None:
        return settings.DEFAULT_PAGE_SIZE
    if page_size > settings.MAX_PAGE_SIZE:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"page_size must be <= {settings.MAX_PAGE_SIZE}",
        )
    return page_size


def build_employee_page(
    employees: List[Employee],
    total: int,
    page: int,
    page_size: int,
) -> EmployeePage:
    return EmployeePage(
        items=[EmployeeListItem.model_validate(e) for e in employees],
        total=total,
        page=page,
        page_size=page_size,
        total_pages=total_pages(total, page_size),
    )
