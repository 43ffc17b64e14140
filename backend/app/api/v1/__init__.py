from fastapi import APIRouter

from app.api.v1 import employees, organization

api_router = APIRouter()
api_router.include_router(employees.router, prefix="/employees", tags=["employees"])
api_router.include_router(organization.departments_router, prefix="/departments", tags=["departments"])
api_router.include_router(organization.job_grades_router, prefix="/job-grades", tags=["job-grades"])
