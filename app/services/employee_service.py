"""
Business rules for employee records.

The only rule is email uniqueness on create; every other operation
passes straight through to the repository.
"""

import logging
from typing import List, Optional
from sqlalchemy.orm import Session

from app.crud import employee as employee_crud
from app.models.employee import Employee

logger = logging.getLogger(__name__)


class EmailAlreadyExistsError(Exception):
    """Raised when creating an employee whose email is already taken"""

    def __init__(self, email: str):
        self.email = email
        super().__init__(f"Employee already exists with given email: {email}")


def create_employee(db: Session, employee: Employee) -> Employee:
    """
    Create a new employee.

    Args:
        db: Database session
        employee: Unsaved Employee instance

    Returns:
        The saved Employee with its assigned id

    Raises:
        EmailAlreadyExistsError: If another employee already uses this email
    """
    if employee_crud.get_by_email(db, employee.email) is not None:
        logger.warning(f"Rejected employee create: email {employee.email} already in use")
        raise EmailAlreadyExistsError(employee.email)

    saved = employee_crud.save(db, employee)
    logger.info(f"Created employee {saved.id}")
    return saved


def get_all_employees(db: Session) -> List[Employee]:
    return employee_crud.get_all(db)


def get_employee_by_id(db: Session, employee_id: int) -> Optional[Employee]:
    return employee_crud.get_by_id(db, employee_id)


def update_employee(db: Session, employee: Employee) -> Employee:
    """Persist an already-loaded employee as-is. Email uniqueness is not re-checked."""
    updated = employee_crud.save(db, employee)
    logger.info(f"Updated employee {updated.id}")
    return updated


def delete_employee(db: Session, employee_id: int) -> None:
    """Delete an employee. Unknown ids are ignored."""
    employee_crud.delete_by_id(db, employee_id)
    logger.info(f"Deleted employee {employee_id}")
