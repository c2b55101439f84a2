"""
Dashboard user model
"""

from staff_tracker.models.base import CamelModel


class User(CamelModel):
    """Dashboard user. Password is stored as given."""

    id: int
    username: str
    password: str
