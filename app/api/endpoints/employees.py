import logging
from typing import List
from fastapi import APIRouter, HTTPException, Depends, Path, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.models.employee import Employee
from app.schemas.employee import EmployeeCreateRequest, EmployeeUpdateRequest, EmployeeResponse
from app.services import employee_service
from app.services.employee_service import EmailAlreadyExistsError

router = APIRouter(prefix="/employees", tags=["Employees"])
logger = logging.getLogger(__name__)

EMPLOYEE_NOT_FOUND = "Employee not found"

# Ids are 64-bit signed integers in the database
MAX_EMPLOYEE_ID = 2**63 - 1


@router.post("", status_code=status.HTTP_201_CREATED, response_model=EmployeeResponse)
def create_employee(
    request: EmployeeCreateRequest,
    db: Session = Depends(get_db)
):
    """
    Create a new employee.

    The id is assigned by the database; any id in the body is ignored.
    Returns 409 if another employee already has the same email.
    """
    employee = Employee(
        first_name=request.first_name,
        last_name=request.last_name,
        email=request.email
    )

    try:
        return employee_service.create_employee(db, employee)
    except EmailAlreadyExistsError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except IntegrityError as e:
        # Unique index caught a duplicate the service check missed
        db.rollback()
        logger.warning(f"Integrity error creating employee {request.email}: {e.orig}")
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Employee already exists with given email: {request.email}"
        )


@router.get("", response_model=List[EmployeeResponse])
def list_employees(db: Session = Depends(get_db)):
    """List all employees."""
    return employee_service.get_all_employees(db)


@router.get("/{employee_id}", response_model=EmployeeResponse)
def get_employee(employee_id: int = Path(..., le=MAX_EMPLOYEE_ID), db: Session = Depends(get_db)):
    """Retrieve an employee by ID."""
    employee = employee_service.get_employee_by_id(db, employee_id)

    if not employee:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=EMPLOYEE_NOT_FOUND)

    return employee


@router.put("/{employee_id}", response_model=EmployeeResponse)
def update_employee(
    request: EmployeeUpdateRequest,
    employee_id: int = Path(..., le=MAX_EMPLOYEE_ID),
    db: Session = Depends(get_db)
):
    """
    Overwrite an employee's first name, last name and email.

    The id never changes. Returns 404 without touching anything if the
    employee does not exist.
    """
    saved_employee = employee_service.get_employee_by_id(db, employee_id)

    if not saved_employee:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=EMPLOYEE_NOT_FOUND)

    saved_employee.first_name = request.first_name
    saved_employee.last_name = request.last_name
    saved_employee.email = request.email

    try:
        return employee_service.update_employee(db, saved_employee)
    except IntegrityError as e:
        db.rollback()
        logger.warning(f"Integrity error updating employee {employee_id}: {e.orig}")
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Employee already exists with given email: {request.email}"
        )


@router.delete("/{employee_id}", response_model=str)
def delete_employee(employee_id: int = Path(..., le=MAX_EMPLOYEE_ID), db: Session = Depends(get_db)):
    """
    Delete an employee by ID.

    Idempotent: deleting an unknown ID still succeeds.
    """
    employee_service.delete_employee(db, employee_id)
    return "Deleted Successfully"
