from sqlalchemy import CheckConstraint, Column, Integer, Numeric, String, Text
from sqlalchemy.orm import relationship

from app.db.base_class import Base, SoftDeleteMixin, TimestampMixin


class JobGrade(SoftDeleteMixin, TimestampMixin, Base):
    __tablename__ = "job_grades"  # type: ignore[assignment]
    __table_args__ = (
        CheckConstraint("min_salary <= max_salary", name="ck_job_grades_salary_band"),
    )

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(50), nullable=False, unique=True)
    description = Column(Text, nullable=True)
    min_salary = Column(Numeric(12, 2), nullable=False, default=0)
    max_salary = Column(Numeric(12, 2), nullable=False, default=0)

    employees = relationship("Employee", back_populates="job_grade", lazy="raise")

    def __repr__(self) -> str:
        return f"<JobGrade {self.id} {self.name}>"
