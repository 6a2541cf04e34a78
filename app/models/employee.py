from sqlalchemy import Column, Integer, String
from app.core.database import Base


class Employee(Base):
    """
    Employee record.

    The id is assigned by the database on first save and never changes.
    Email is unique across all employees.
    """
    __tablename__ = "employees"

    id = Column(Integer, primary_key=True, index=True)
    first_name = Column(String, nullable=False)
    last_name = Column(String, nullable=False)
    email = Column(String, unique=True, nullable=False, index=True)

    def __repr__(self):
        return f"<Employee(id={self.id}, email='{self.email}')>"
