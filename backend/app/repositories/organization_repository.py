from typing import List, Optional

from app.models.department import Department
from app.models.job_grade import JobGrade
from app.repositories.base import BaseRepository


class DepartmentRepository(BaseRepository[Department]):
    model = Department
    entity_name = "Department"

    async def get_all_ordered(self) -> List[Department]:
        return await self._all(self._select().order_by(Department.name, Department.id))

    async def is_name_unique(self, name: str, exclude_id: Optional[int] = None) -> bool:
        criteria = [Department.name == name]
        if exclude_id is not None:
            criteria.append(Department.id != exclude_id)
        # name is unique across all rows, deleted included
        return not await self.exists(*criteria, include_deleted=True)


class JobGradeRepository(BaseRepository[JobGrade]):
    model = JobGrade
    entity_name = "JobGrade"

    async def get_all_ordered(self) -> List[JobGrade]:
        return await self._all(self._select().order_by(JobGrade.name, JobGrade.id))

    async def is_name_unique(self, name: str, exclude_id: Optional[int] = None) -> bool:
        criteria = [JobGrade.name == name]
        if exclude_id is not None:
            criteria.append(JobGrade.id != exclude_id)
        return not await self.exists(*criteria, include_deleted=True)
