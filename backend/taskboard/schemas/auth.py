from pydantic import BaseModel, EmailStr, Field
from datetime import datetime
from typing import Optional
from ..enums import UserRole

class RegisterRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    password: str = Field(..., min_length=6)
    role: UserRole = UserRole.DEVELOPER

class LoginRequest(BaseModel):
    email: EmailStr
    password: str

class Token(BaseModel):
    access_token: str
    token_type: str

class UserResponse(BaseModel):
    id: int
    name: str
    email: str
    role: UserRole
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}

class AuthResponse(BaseModel):
    user: UserResponse
    access_token: str
    token_type: str
