"""
API routers
"""

from staff_tracker.api import employees, locations, users

__all__ = ["employees", "locations", "users"]
