"""
Employee model with availability status
"""

from pydantic import Field
from datetime import datetime
from typing import Optional
from enum import Enum

from staff_tracker.models.base import CamelModel


class EmployeeStatus(str, Enum):
    """Availability of a field employee"""
    AVAILABLE = "available"     # Free to take a customer
    BUSY = "busy"               # Working for a customer
    OFFLINE = "offline"         # Not on duty


DEFAULT_STATUS = EmployeeStatus.AVAILABLE


class Employee(CamelModel):
    """Field employee tracked on the map"""

    id: int = Field(description="Sequential identifier, never reused")

    # Contact
    name: str
    phone: str

    # Availability
    status: EmployeeStatus = Field(default=DEFAULT_STATUS)

    # Position (decimal strings)
    latitude: Optional[str] = None
    longitude: Optional[str] = None
    location: Optional[str] = Field(default=None, description="Neighborhood label shown on the map")

    # References into the location hierarchy
    region_id: Optional[str] = None
    city_id: Optional[str] = None
    neighborhood_id: Optional[str] = None

    last_update: datetime = Field(description="Refreshed on every mutation")

    # Assignment
    customer_id: Optional[str] = None
    customer_name: Optional[str] = None

    # Skills
    languages: list[str] = Field(default_factory=list)
    training_courses: list[str] = Field(default_factory=list)
