# Services Package
# Write flows and business rules on top of app.repositories

from app.services.employee_service import EmployeeService

__all__ = ["EmployeeService"]
