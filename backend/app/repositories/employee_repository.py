"""
Employee query repository.

Read access patterns over the employee set with consistent filtering,
ordering and pagination. Soft-deleted employees are excluded from every
query except `get_deleted_employee_by_id`.

Ordering:
- name-ordered results: last name, first name, then id (ascending)
- "recent" results: created_at descending, then id descending
"""

from typing import Any, List, Optional

from sqlalchemy import Select, String, func, or_, select
from sqlalchemy.orm import selectinload

from app.core.exceptions import EntityNotFoundException
from app.models.absence_record import AbsenceRecord
from app.models.employee import Employee, EmployeeStatus
from app.repositories.base import BaseRepository

# Loader option sets; relationship ordering (salary by effective date desc,
# absences by year/month desc) is declared on the model.
_SUMMARY = (selectinload(Employee.department), selectinload(Employee.job_grade))
_WITH_SALARIES = _SUMMARY + (selectinload(Employee.salary_records),)
_FULL = _WITH_SALARIES + (selectinload(Employee.absence_records),)


def _normalize_search_term(search_term: Optional[str]) -> Optional[str]:
    if search_term is None:
        return None
    term = search_term.strip()
    return term.lower() if term else None


def _lower(column):
    return func.lower(column, type_=String)


class EmployeeRepository(BaseRepository[Employee]):
    model = Employee
    entity_name = "Employee"

    @staticmethod
    def _name_order(stmt: Select) -> Select:
        return stmt.order_by(Employee.last_name, Employee.first_name, Employee.id)

    @staticmethod
    def _filter_criteria(
        search_term: Optional[str] = None,
        department_id: Optional[int] = None,
        job_grade_id: Optional[int] = None,
    ) -> List[Any]:
        """Predicates shared by the paginated list and the total count."""
        criteria: List[Any] = []

        term = _normalize_search_term(search_term)
        if term:
            criteria.append(
                or_(
                    _lower(Employee.first_name).contains(term, autoescape=True),
                    _lower(Employee.last_name).contains(term, autoescape=True),
                    _lower(Employee.employee_number).contains(term, autoescape=True),
                    _lower(Employee.email).contains(term, autoescape=True),
                )
            )

        if department_id is not None:
            criteria.append(Employee.department_id == department_id)

        if job_grade_id is not None:
            criteria.append(Employee.job_grade_id == job_grade_id)

        return criteria

    async def get_employees_with_details(
        self,
        page: int,
        page_size: int,
        search_term: Optional[str] = None,
        department_id: Optional[int] = None,
        job_grade_id: Optional[int] = None,
    ) -> List[Employee]:
        criteria = self._filter_criteria(search_term, department_id, job_grade_id)
        stmt = self._select().options(*_WITH_SALARIES)
        if criteria:
            stmt = stmt.where(*criteria)
        stmt = self._paginate(self._name_order(stmt), page, page_size)
        return await self._all(stmt)

    async def get_total_count(
        self,
        search_term: Optional[str] = None,
        department_id: Optional[int] = None,
        job_grade_id: Optional[int] = None,
    ) -> int:
        return await self.count(*self._filter_criteria(search_term, department_id, job_grade_id))

    async def get_employee_with_details(self, employee_id: int) -> Employee:
        """Load one employee with full history; raises EntityNotFoundException if missing."""
        employee = await self.get_by_id_with_details(employee_id, include_absences=True)
        if employee is None:
            raise EntityNotFoundException(self.entity_name, employee_id)
        return employee

    async def get_by_id_with_details(
        self, employee_id: int, include_absences: bool = True
    ) -> Optional[Employee]:
        options = _FULL if include_absences else _WITH_SALARIES
        stmt = self._select().options(*options).where(Employee.id == employee_id)
        return await self._first(stmt)

    async def get_all_with_details(self) -> List[Employee]:
        return await self._all(self._name_order(self._select().options(*_FULL)))

    async def get_by_department(self, department_id: int) -> List[Employee]:
        stmt = (
            self._select()
            .options(selectinload(Employee.job_grade))
            .where(Employee.department_id == department_id)
        )
        return await self._all(self._name_order(stmt))

    async def get_by_job_grade(self, job_grade_id: int) -> List[Employee]:
        stmt = (
            self._select()
            .options(selectinload(Employee.department))
            .where(Employee.job_grade_id == job_grade_id)
        )
        return await self._all(self._name_order(stmt))

    async def get_all_active_employees(self) -> List[Employee]:
        stmt = (
            self._select()
            .options(*_SUMMARY)
            .where(Employee.status == EmployeeStatus.ACTIVE.value)
        )
        return await self._all(self._name_order(stmt))

    async def get_employee_by_employee_number(self, employee_number: str) -> Optional[Employee]:
        stmt = (
            self._select()
            .options(*_WITH_SALARIES)
            .where(Employee.employee_number == employee_number)
        )
        return await self._first(stmt)

    async def is_employee_number_unique(
        self, employee_number: str, exclude_id: Optional[int] = None
    ) -> bool:
        """True when no other live employee uses this number. Advisory only."""
        criteria = [Employee.employee_number == employee_number]
        if exclude_id is not None:
            criteria.append(Employee.id != exclude_id)
        return not await self.exists(*criteria)

    async def is_duplicate_email(self, email: str, exclude_id: Optional[int] = None) -> bool:
        """True when another live employee already uses this email. Advisory only."""
        criteria = [Employee.email == email]
        if exclude_id is not None:
            criteria.append(Employee.id != exclude_id)
        return await self.exists(*criteria)

    async def get_deleted_employee_by_id(self, employee_id: int) -> Optional[Employee]:
        stmt = self._select(include_deleted=True).where(
            Employee.id == employee_id, Employee.is_deleted.is_(True)
        )
        return await self._first(stmt)

    async def get_recent_employees_with_details(self, count: int) -> List[Employee]:
        if count < 1:
            return []
        stmt = (
            self._select()
            .options(*_SUMMARY)
            .order_by(Employee.created_at.desc(), Employee.id.desc())
            .limit(count)
        )
        return await self._all(stmt)

    async def get_employee_count_by_department(self, department_id: int) -> int:
        return await self.count(Employee.department_id == department_id)

    async def get_employee_count_by_job_grade(self, job_grade_id: int) -> int:
        return await self.count(Employee.job_grade_id == job_grade_id)

    async def has_absence_record(self, employee_id: int, year: int, month: int) -> bool:
        stmt = select(AbsenceRecord.id).where(
            AbsenceRecord.employee_id == employee_id,
            AbsenceRecord.year == year,
            AbsenceRecord.month == month,
        )
        result = await self.db.execute(select(stmt.exists()))
        return bool(result.scalar())
