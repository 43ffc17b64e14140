from sqlalchemy import (
    CheckConstraint, Column, DateTime, ForeignKey, Integer, Numeric, Text, UniqueConstraint, func
)
from sqlalchemy.orm import relationship

from app.db.base_class import Base


class AbsenceRecord(Base):
    __tablename__ = "absence_records"  # type: ignore[assignment]
    __table_args__ = (
        UniqueConstraint("employee_id", "year", "month", name="uq_absence_records_employee_period"),
        CheckConstraint("month BETWEEN 1 AND 12", name="ck_absence_records_month"),
    )

    id = Column(Integer, primary_key=True, index=True)
    employee_id = Column(Integer, ForeignKey("employees.id", ondelete="CASCADE"), nullable=False)
    year = Column(Integer, nullable=False)
    month = Column(Integer, nullable=False)
    sick_leave_days = Column(Numeric(5, 2), nullable=False, default=0)
    vacation_days = Column(Numeric(5, 2), nullable=False, default=0)
    unpaid_leave_days = Column(Numeric(5, 2), nullable=False, default=0)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    employee = relationship("Employee", back_populates="absence_records", lazy="raise")

    @property
    def total_days(self):
        return self.sick_leave_days + self.vacation_days + self.unpaid_leave_days
