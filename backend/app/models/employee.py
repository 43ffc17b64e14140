from enum import Enum

from sqlalchemy import Column, Date, ForeignKey, Index, Integer, String, false
from sqlalchemy.orm import relationship

from app.db.base_class import Base, SoftDeleteMixin, TimestampMixin


class EmployeeStatus(str, Enum):
    ACTIVE = "Active"
    INACTIVE = "Inactive"
    ON_LEAVE = "OnLeave"
    TERMINATED = "Terminated"


class Employee(SoftDeleteMixin, TimestampMixin, Base):
    __tablename__ = "employees"  # type: ignore[assignment]

    id = Column(Integer, primary_key=True, index=True)
    employee_number = Column(String(20), nullable=False)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    email = Column(String(255), nullable=False)
    phone_number = Column(String(30), nullable=True)
    hire_date = Column(Date, nullable=True)
    status = Column(String(20), nullable=False, default=EmployeeStatus.ACTIVE.value)

    department_id = Column(Integer, ForeignKey("departments.id"), nullable=False)
    job_grade_id = Column(Integer, ForeignKey("job_grades.id"), nullable=False)

    # Related rows are only attached through explicit loader options
    department = relationship("Department", back_populates="employees", lazy="raise")
    job_grade = relationship("JobGrade", back_populates="employees", lazy="raise")
    salary_records = relationship(
        "SalaryRecord",
        back_populates="employee",
        cascade="all, delete-orphan",
        order_by="[SalaryRecord.effective_date.desc(), SalaryRecord.id.desc()]",
        lazy="raise",
    )
    absence_records = relationship(
        "AbsenceRecord",
        back_populates="employee",
        cascade="all, delete-orphan",
        order_by="[AbsenceRecord.year.desc(), AbsenceRecord.month.desc()]",
        lazy="raise",
    )

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def __repr__(self) -> str:
        return f"<Employee {self.employee_number} {self.last_name}, {self.first_name}>"


# Uniqueness holds among live rows only; soft-deleted rows keep their values
Index(
    "ux_employees_employee_number_live",
    Employee.employee_number,
    unique=True,
    postgresql_where=Employee.is_deleted == false(),
    sqlite_where=Employee.is_deleted == false(),
)
Index(
    "ux_employees_email_live",
    Employee.email,
    unique=True,
    postgresql_where=Employee.is_deleted == false(),
    sqlite_where=Employee.is_deleted == false(),
)
Index("idx_employees_name", Employee.last_name, Employee.first_name)
Index("idx_employees_department", Employee.department_id)
Index("idx_employees_job_grade", Employee.job_grade_id)
Index("idx_employees_created_at", Employee.created_at)
