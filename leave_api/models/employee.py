from __future__ import annotations
from datetime import datetime
from typing import List, TYPE_CHECKING
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import Integer, String, DateTime

from .base import Base

if TYPE_CHECKING:
    from .application import Application


class Employee(Base):
    __tablename__ = 'employees'
    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    first_name: Mapped[str] = mapped_column('firstName', String(128), nullable=False, index=True)
    last_name: Mapped[str] = mapped_column('lastName', String(128), nullable=False, index=True)
    date_of_birth: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    # never serialized
    secret: Mapped[str] = mapped_column(String(255), nullable=False)

    applications: Mapped[List["Application"]] = relationship(back_populates='employee')


__all__ = ["Employee"]
