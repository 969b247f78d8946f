"""Employee table.

Dates are kept as ``YYYY-MM-DD`` text and the status flag as a nullable
integer, so rows stay readable by any SQLite client.
"""

from sqlalchemy import Column, Float, Integer, String, Text

from models.base import Base


class Employee(Base):
    """Employee model mapping to the employees table."""

    __tablename__ = "employees"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text)
    surname = Column(Text)
    position = Column(Text, nullable=False)
    department = Column(Text)
    shift = Column(Text)
    salary = Column(Float)
    phone_number = Column(Text)
    email = Column(Text)
    status = Column(Integer)
    note = Column(Text)
    hire_date = Column(String(10))
