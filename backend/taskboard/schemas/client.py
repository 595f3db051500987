from pydantic import BaseModel, EmailStr, Field, HttpUrl
from typing import Optional
from datetime import datetime
from .auth import UserResponse


class ClientCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    company: Optional[str] = Field(None, max_length=255)
    phone: Optional[str] = Field(None, max_length=20)
    address: Optional[str] = None
    website: Optional[HttpUrl] = None
    notes: Optional[str] = None


class ClientUpdate(BaseModel):
    """Partial update; only the fields sent are changed"""
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    email: Optional[EmailStr] = None
    company: Optional[str] = Field(None, max_length=255)
    phone: Optional[str] = Field(None, max_length=20)
    address: Optional[str] = None
    website: Optional[HttpUrl] = None
    notes: Optional[str] = None


class Client(BaseModel):
    id: int
    user_id: int
    user: UserResponse
    company: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    website: Optional[str] = None
    notes: Optional[str] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class ClientCreated(BaseModel):
    client: Client
    password: str
