"""
CRUD operations for Employee model.

Implements the Repository pattern to encapsulate all database operations
for employees, providing a clean interface for the service layer.

The three find_by_name* lookups return the same result; they exist to show
the ORM query API, select() with named bound parameters, and native SQL.
"""

from typing import List, Optional
from sqlalchemy import bindparam, select, text
from sqlalchemy.orm import Session
from app.models.employee import Employee


def save(db: Session, employee: Employee) -> Employee:
    """
    Persist an employee, inserting it if new.

    Args:
        db: Database session
        employee: Transient or already-loaded Employee instance

    Returns:
        The same Employee instance, refreshed, with its id assigned
    """
    db.add(employee)
    db.commit()
    db.refresh(employee)

    return employee


def get_by_id(db: Session, employee_id: int) -> Optional[Employee]:
    """
    Retrieve an employee by ID.

    Returns:
        Employee instance if found, None otherwise
    """
    return db.query(Employee).filter(Employee.id == employee_id).first()


def get_by_email(db: Session, email: str) -> Optional[Employee]:
    """
    Retrieve an employee by email address.

    Returns:
        Employee instance if found, None otherwise
    """
    return db.query(Employee).filter(Employee.email == email).first()


def get_all(db: Session) -> List[Employee]:
    """Retrieve every employee, ordered by ID."""
    return db.query(Employee).order_by(Employee.id).all()


def delete_by_id(db: Session, employee_id: int) -> None:
    """
    Delete an employee by ID.

    Deleting an ID that does not exist is a no-op.
    """
    employee = get_by_id(db, employee_id)
    if not employee:
        return

    db.delete(employee)
    db.commit()


def find_by_name(db: Session, first_name: str, last_name: str) -> Optional[Employee]:
    """Look up the employee with this first and last name using the ORM query API."""
    return (
        db.query(Employee)
        .filter(Employee.first_name == first_name, Employee.last_name == last_name)
        .one_or_none()
    )


def find_by_name_named_params(db: Session, first_name: str, last_name: str) -> Optional[Employee]:
    """Look up the employee with this first and last name using named bound parameters."""
    stmt = select(Employee).where(
        Employee.first_name == bindparam("first_name"),
        Employee.last_name == bindparam("last_name"),
    )
    return db.execute(
        stmt, {"first_name": first_name, "last_name": last_name}
    ).scalar_one_or_none()


def find_by_name_native_sql(db: Session, first_name: str, last_name: str) -> Optional[Employee]:
    """Look up the employee with this first and last name using a raw SQL statement."""
    sql = text(
        "SELECT * FROM employees e "
        "WHERE e.first_name = :first_name AND e.last_name = :last_name"
    )
    stmt = select(Employee).from_statement(sql)
    return db.execute(
        stmt, {"first_name": first_name, "last_name": last_name}
    ).scalar_one_or_none()
