from pydantic import BaseModel, EmailStr, Field


class EmployeeBase(BaseModel):
    """Fields shared by employee requests and responses (camelCase on the wire)"""
    first_name: str = Field(..., min_length=1, alias="firstName")
    last_name: str = Field(..., min_length=1, alias="lastName")
    email: EmailStr

    class Config:
        populate_by_name = True


class EmployeeCreateRequest(EmployeeBase):
    """Schema for creating an employee. Any client-supplied id is ignored."""
    pass


class EmployeeUpdateRequest(EmployeeBase):
    """Schema for overwriting an employee's name and email"""
    pass


class EmployeeResponse(EmployeeBase):
    """Schema for employee response"""
    id: int

    class Config:
        from_attributes = True  # Allows conversion from SQLAlchemy models
        populate_by_name = True
