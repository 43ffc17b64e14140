from sqlalchemy import Column, Date, DateTime, ForeignKey, Index, Integer, Numeric, Text, func
from sqlalchemy.orm import relationship

from app.db.base_class import Base


class SalaryRecord(Base):
    __tablename__ = "salary_records"  # type: ignore[assignment]

    id = Column(Integer, primary_key=True, index=True)
    employee_id = Column(Integer, ForeignKey("employees.id", ondelete="CASCADE"), nullable=False)
    base_salary = Column(Numeric(12, 2), nullable=False)
    effective_date = Column(Date, nullable=False)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    employee = relationship("Employee", back_populates="salary_records", lazy="raise")


Index("idx_salary_records_employee_effective", SalaryRecord.employee_id, SalaryRecord.effective_date)
