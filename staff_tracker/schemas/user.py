"""
Pydantic schemas for users
"""

from pydantic import Field

from staff_tracker.models.base import CamelModel


class UserCreate(CamelModel):
    """User creation schema"""
    username: str = Field(..., min_length=1, max_length=100)
    password: str = Field(..., min_length=1)


class UserResponse(CamelModel):
    """User response model, password omitted"""
    id: int
    username: str
