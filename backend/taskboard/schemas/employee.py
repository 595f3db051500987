from pydantic import BaseModel, EmailStr, Field
from typing import Optional
from datetime import date, datetime
from decimal import Decimal
from ..enums import UserRole
from .auth import UserResponse


class EmployeeProfile(BaseModel):
    date_of_birth: Optional[date] = None
    joining_date: Optional[date] = None
    designation: Optional[str] = Field(None, max_length=255)
    salary: Optional[Decimal] = Field(None, ge=0, max_digits=10, decimal_places=2)
    address: Optional[str] = None
    phone: Optional[str] = Field(None, max_length=20)
    emergency_contact: Optional[str] = Field(None, max_length=20)
    notes: Optional[str] = None


class EmployeeCreate(EmployeeProfile):
    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    role: UserRole = UserRole.DEVELOPER


class EmployeeUpdate(BaseModel):
    """Partial update; only the fields sent are changed"""
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    email: Optional[EmailStr] = None
    role: Optional[UserRole] = None
    date_of_birth: Optional[date] = None
    joining_date: Optional[date] = None
    designation: Optional[str] = Field(None, max_length=255)
    salary: Optional[Decimal] = Field(None, ge=0, max_digits=10, decimal_places=2)
    address: Optional[str] = None
    phone: Optional[str] = Field(None, max_length=20)
    emergency_contact: Optional[str] = Field(None, max_length=20)
    notes: Optional[str] = None


class PerformanceUpdate(BaseModel):
    tasks_completed: Optional[int] = Field(None, ge=0)
    tasks_rejected: Optional[int] = Field(None, ge=0)
    client_satisfaction_points: Optional[int] = Field(None, ge=0)


class PromotionRequest(BaseModel):
    designation: str = Field(..., min_length=1, max_length=255)
    salary: Optional[Decimal] = Field(None, ge=0, max_digits=10, decimal_places=2)


class Employee(EmployeeProfile):
    id: int
    user_id: int
    user: UserResponse
    last_promotion_date: Optional[date] = None
    tasks_completed: int
    tasks_rejected: int
    client_satisfaction_points: int
    performance_score: int
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class EmployeeCreated(BaseModel):
    """New employee plus the generated password, shown once so an admin can pass it on"""
    employee: Employee
    password: str


class EmployeeStatistics(BaseModel):
    total_employees: int
    developers: int
    project_managers: int
    avg_performance: float
