from sqlalchemy import Column, Integer, String, Text
from sqlalchemy.orm import relationship

from app.db.base_class import Base, SoftDeleteMixin, TimestampMixin


class Department(SoftDeleteMixin, TimestampMixin, Base):
    __tablename__ = "departments"  # type: ignore[assignment]

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False, unique=True)
    description = Column(Text, nullable=True)

    employees = relationship("Employee", back_populates="department", lazy="raise")

    def __repr__(self) -> str:
        return f"<Department {self.id} {self.name}>"
