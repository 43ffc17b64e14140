# Import all the models, so that Base has them before metadata.create_all
from app.db.base_class import Base  # noqa

from app.models.department import Department  # noqa
from app.models.job_grade import JobGrade  # noqa
from app.models.employee import Employee, EmployeeStatus  # noqa
from app.models.salary_record import SalaryRecord  # noqa
from app.models.absence_record import AbsenceRecord  # noqa
