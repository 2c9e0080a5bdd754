from pydantic import BaseModel, EmailStr, Field
from typing import Optional
from datetime import datetime


class UserRegister(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=6)
    name: str = Field(..., min_length=1)


class UserLogin(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


class UserResponse(BaseModel):
    id: int
    email: str
    name: str
    role: str
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class TokenResult(BaseModel):
    success: bool = True
    message: Optional[str] = None
    token: str
    user: UserResponse


class ProfileResult(BaseModel):
    success: bool = True
    user: UserResponse


class TokenData(BaseModel):
    user_id: Optional[int] = None
    email: Optional[str] = None
    role: Optional[str] = None
