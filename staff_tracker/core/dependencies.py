"""
Request dependencies for FastAPI
"""

from fastapi import Request

from staff_tracker.services.store import EmployeeStore


def get_store(request: Request) -> EmployeeStore:
    """Store attached to the application at startup"""
    return request.app.state.store
