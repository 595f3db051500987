from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from .. import models, schemas
from ..dependencies import get_db, require_manager
from ..services.employee_service import EmployeeService

router = APIRouter(
    prefix="/employees",
    tags=["Employees"],
    responses={404: {"description": "Not found"}},
)


@router.get("", response_model=List[schemas.Employee])
def list_employees(
    db: Session = Depends(get_db),
    current_user: models.User = Depends(require_manager)
):
    return EmployeeService.list_employees(db)


@router.post("", response_model=schemas.EmployeeCreated, status_code=201)
def create_employee(
    employee: schemas.EmployeeCreate,
    db: Session = Depends(get_db),
    current_user: models.User = Depends(require_manager)
):
    """Create the account and profile; the generated password is only returned here"""
    return EmployeeService.create_employee(db, employee)


@router.get("/statistics", response_model=schemas.EmployeeStatistics)
def employee_statistics(
    db: Session = Depends(get_db),
    current_user: models.User = Depends(require_manager)
):
    return EmployeeService.statistics(db)


@router.get("/{employee_id}", response_model=schemas.Employee)
def get_employee(
    employee_id: int,
    db: Session = Depends(get_db),
    current_user: models.User = Depends(require_manager)
):
    return EmployeeService.get_employee(db, employee_id)


@router.put("/{employee_id}", response_model=schemas.Employee)
def update_employee(
    employee_id: int,
    employee_update: schemas.EmployeeUpdate,
    db: Session = Depends(get_db),
    current_user: models.User = Depends(require_manager)
):
    employee = EmployeeService.get_employee(db, employee_id)
    return EmployeeService.update_employee(db, employee, employee_update)


@router.patch("/{employee_id}/performance", response_model=schemas.Employee)
def update_performance(
    employee_id: int,
    performance: schemas.PerformanceUpdate,
    db: Session = Depends(get_db),
    current_user: models.User = Depends(require_manager)
):
    """Update task counters and satisfaction points; the score is recalculated"""
    employee = EmployeeService.get_employee(db, employee_id)
    return EmployeeService.update_performance(db, employee, performance)


@router.patch("/{employee_id}/promote", response_model=schemas.Employee)
def promote_employee(
    employee_id: int,
    promotion: schemas.PromotionRequest,
    db: Session = Depends(get_db),
    current_user: models.User = Depends(require_manager)
):
    employee = EmployeeService.get_employee(db, employee_id)
    return EmployeeService.promote(db, employee, promotion)


@router.delete("/{employee_id}", response_model=schemas.MessageResponse)
def delete_employee(
    employee_id: int,
    db: Session = Depends(get_db),
    current_user: models.User = Depends(require_manager)
):
    employee = EmployeeService.get_employee(db, employee_id)
    EmployeeService.delete_employee(db, employee)
    return {"message": "Employee deleted successfully"}
