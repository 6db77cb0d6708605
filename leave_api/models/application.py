from __future__ import annotations
from datetime import date
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import Integer, Date, ForeignKey

from .base import Base
from .employee import Employee


class Application(Base):
    __tablename__ = 'applications'
    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    leave_start_date: Mapped[date] = mapped_column(Date, nullable=False)
    leave_end_date: Mapped[date] = mapped_column(Date, nullable=False)
    employee_id: Mapped[int] = mapped_column('employeeId', ForeignKey('employees.id'), nullable=False, index=True)

    employee: Mapped[Employee] = relationship(back_populates='applications')

__all__ = ["Application"]
