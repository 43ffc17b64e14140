"""
Employee write flows.

Runs the advisory uniqueness pre-checks before writing and reports every
failed invariant at once through InvalidEntityStateException. The partial
unique indexes on employees remain the source of truth: a violation caught
at commit time is rolled back and reported the same way.
"""

import logging
from typing import Awaitable, List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import EntityNotFoundException, InvalidEntityStateException
from app.models.absence_record import AbsenceRecord
from app.models.employee import Employee
from app.models.salary_record import SalaryRecord
from app.repositories.employee_repository import EmployeeRepository
from app.repositories.organization_repository import DepartmentRepository, JobGradeRepository
from app.schemas.employee import (
    AbsenceRecordCreate,
    EmployeeCreate,
    EmployeeUpdate,
    SalaryRecordCreate,
)

logger = logging.getLogger("payroll.employee_service")


class EmployeeService:
    def __init__(self, db: AsyncSession):
        self.db = db
        self.employees = EmployeeRepository(db)
        self.departments = DepartmentRepository(db)
        self.job_grades = JobGradeRepository(db)

    async def _uniqueness_errors(
        self,
        employee_number: Optional[str],
        email: Optional[str],
        exclude_id: Optional[int] = None,
    ) -> List[str]:
        errors: List[str] = []
        if employee_number is not None and not await self.employees.is_employee_number_unique(
            employee_number, exclude_id=exclude_id
        ):
            errors.append(f"Employee number '{employee_number}' is already in use.")
        if email is not None and await self.employees.is_duplicate_email(email, exclude_id=exclude_id):
            errors.append(f"Email '{email}' is already in use.")
        return errors

    async def _ensure_references(
        self, department_id: Optional[int], job_grade_id: Optional[int]
    ) -> None:
        if department_id is not None:
            await self.departments.get_by_id_or_raise(department_id)
        if job_grade_id is not None:
            await self.job_grades.get_by_id_or_raise(job_grade_id)

    async def _save(self, entity_id, write: Awaitable) -> None:
        """Run a flushing repository write and commit, mapping unique index violations."""
        try:
            await write
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            logger.warning(f"Integrity violation while saving Employee {entity_id}: {e.orig}")
            raise InvalidEntityStateException(
                "Employee",
                entity_id,
                ["Employee number or email is already in use."],
            ) from e

    async def create_employee(self, data: EmployeeCreate) -> Employee:
        await self._ensure_references(data.department_id, data.job_grade_id)

        errors = await self._uniqueness_errors(data.employee_number, data.email)
        if errors:
            raise InvalidEntityStateException("Employee", data.employee_number, errors)

        employee = Employee(**data.model_dump(mode="python"))
        employee.status = data.status.value
        await self._save(data.employee_number, self.employees.add(employee))
        await self.db.refresh(employee)

        logger.info(f"Created employee id={employee.id} number={employee.employee_number}")
        return employee

    async def update_employee(self, employee_id: int, data: EmployeeUpdate) -> Employee:
        employee = await self.employees.get_by_id_or_raise(employee_id)
        changes = data.model_dump(exclude_unset=True)
        # Explicit nulls are not allowed for required columns
        for field in ("employee_number", "first_name", "last_name", "email", "status",
                      "department_id", "job_grade_id"):
            if field in changes and changes[field] is None:
                changes.pop(field)

        await self._ensure_references(changes.get("department_id"), changes.get("job_grade_id"))

        errors = await self._uniqueness_errors(
            changes.get("employee_number"), changes.get("email"), exclude_id=employee_id
        )
        if errors:
            raise InvalidEntityStateException("Employee", employee_id, errors)

        for field, value in changes.items():
            setattr(employee, field, value.value if field == "status" else value)

        await self._save(employee_id, self.employees.update(employee))
        await self.db.refresh(employee)

        logger.info(f"Updated employee id={employee_id} fields={sorted(changes)}")
        return employee

    async def delete_employee(self, employee_id: int) -> None:
        employee = await self.employees.get_by_id_or_raise(employee_id)
        await self.employees.soft_delete(employee)
        await self.db.commit()

    async def restore_employee(self, employee_id: int) -> Employee:
        employee = await self.employees.get_deleted_employee_by_id(employee_id)
        if employee is None:
            raise EntityNotFoundException("Employee", employee_id)

        # A live row may have claimed the number or email while this one was deleted
        errors = await self._uniqueness_errors(
            employee.employee_number, employee.email, exclude_id=employee_id
        )
        if errors:
            raise InvalidEntityStateException("Employee", employee_id, errors)

        await self._save(employee_id, self.employees.restore(employee))
        await self.db.refresh(employee)
        return employee

    async def add_salary_record(self, employee_id: int, data: SalaryRecordCreate) -> SalaryRecord:
        await self.employees.get_by_id_or_raise(employee_id)

        record = SalaryRecord(employee_id=employee_id, **data.model_dump())
        self.db.add(record)
        await self.db.commit()
        await self.db.refresh(record)
        return record

    async def add_absence_record(self, employee_id: int, data: AbsenceRecordCreate) -> AbsenceRecord:
        await self.employees.get_by_id_or_raise(employee_id)

        errors = []
        if not 1 <= data.month <= 12:
            errors.append(f"Month must be between 1 and 12, got {data.month}.")
        if await self.employees.has_absence_record(employee_id, data.year, data.month):
            errors.append(f"An absence record for {data.year}-{data.month:02d} already exists.")
        if errors:
            raise InvalidEntityStateException("Employee", employee_id, errors)

        record = AbsenceRecord(employee_id=employee_id, **data.model_dump())
        self.db.add(record)
        await self.db.commit()
        await self.db.refresh(record)
        return record

