from sqlalchemy import Column, Integer, String, Text, Date, DateTime, Numeric, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from ..db import Base


class Employee(Base):
    """
    HR profile of a developer or project manager.
    The performance counters feed ``performance_score``, which is recalculated
    whenever they change.
    """
    __tablename__ = "employees"
    
    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, unique=True)
    date_of_birth = Column(Date, nullable=True)
    joining_date = Column(Date, nullable=True)
    last_promotion_date = Column(Date, nullable=True)
    designation = Column(String(255), nullable=True)
    salary = Column(Numeric(10, 2), nullable=True)
    address = Column(Text, nullable=True)
    phone = Column(String(20), nullable=True)
    emergency_contact = Column(String(20), nullable=True)
    tasks_completed = Column(Integer, nullable=False, default=0)
    tasks_rejected = Column(Integer, nullable=False, default=0)
    client_satisfaction_points = Column(Integer, nullable=False, default=0)
    performance_score = Column(Integer, nullable=False, default=0)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    
    user = relationship("User", back_populates="employee_profile")
