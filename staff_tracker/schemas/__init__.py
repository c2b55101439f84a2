"""
Schemas for API responses and requests
"""

from staff_tracker.schemas.employee import (
    EmployeeCreate,
    EmployeeUpdate,
    LocationUpdate,
    CustomerAssignment,
    StatusUpdate,
    StatusSummary,
)
from staff_tracker.schemas.user import UserCreate, UserResponse

__all__ = [
    "EmployeeCreate",
    "EmployeeUpdate",
    "LocationUpdate",
    "CustomerAssignment",
    "StatusUpdate",
    "StatusSummary",
    "UserCreate",
    "UserResponse",
]
