from pydantic import BaseModel, EmailStr, Field
from ..enums import UserRole


class UserSummary(BaseModel):
    """Compact user reference embedded in tasks and comments"""
    id: int
    name: str
    email: str
    role: UserRole

    model_config = {"from_attributes": True}


class UserCreate(BaseModel):
    """Account created by an administrator; any role is allowed"""
    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    password: str = Field(..., min_length=6)
    role: UserRole
