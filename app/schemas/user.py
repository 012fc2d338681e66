from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime
from typing import Optional, List


class UserBase(BaseModel):
    username: str = Field(min_length=1)
    email: str = Field(min_length=3)
    display_name: Optional[str] = None
    profile_type: Optional[str] = None  # parent, caregiver, etc.
    child_ages: Optional[List[str]] = None
    location: Optional[str] = None


class UserCreate(UserBase):
    password: str = Field(min_length=1)


class UserUpdate(BaseModel):
    """Partial profile update for the current user. Username and password are not editable here."""
    email: Optional[str] = None
    display_name: Optional[str] = None
    profile_type: Optional[str] = None
    child_ages: Optional[List[str]] = None
    location: Optional[str] = None


class UserRead(UserBase):
    """User as returned by the API; password_hash is never part of the response."""
    id: int
    created_at: Optional[datetime] = None
    last_login: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class LoginRequest(BaseModel):
    # Optional so a missing field yields the 400 "required" message rather than a 422
    username: Optional[str] = None
    password: Optional[str] = None
