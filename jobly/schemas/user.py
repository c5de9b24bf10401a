"""
Pydantic schemas for user registration, updates and profiles.
"""

from pydantic import BaseModel, EmailStr, Field
from typing import List, Optional


class UserRegisterRequest(BaseModel):
    """Input schema for user registration."""
    username: str = Field(..., min_length=1, max_length=25)
    password: str = Field(..., min_length=1)
    first_name: str = Field(..., min_length=1)
    last_name: str = Field(..., min_length=1)
    email: EmailStr
    is_admin: bool = False


class UserUpdateRequest(BaseModel):
    """
    Input schema for partial user updates.

    Only fields that are explicitly set are written; an update with no
    fields set is rejected by the repository.
    """
    password: Optional[str] = Field(None, min_length=1)
    first_name: Optional[str] = Field(None, min_length=1)
    last_name: Optional[str] = Field(None, min_length=1)
    email: Optional[EmailStr] = None
    is_admin: Optional[bool] = None


class UserResponse(BaseModel):
    """User profile (no password hash)."""
    username: str
    first_name: str
    last_name: str
    email: str
    is_admin: bool

    class Config:
        from_attributes = True


class UserWithJobsResponse(UserResponse):
    """User profile plus the ids of the jobs the user applied for."""
    jobs: List[int] = []
