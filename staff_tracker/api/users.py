"""
Users API endpoints
"""

from fastapi import APIRouter, Depends, HTTPException, status
import structlog

from staff_tracker.core.dependencies import get_store
from staff_tracker.schemas.user import UserCreate, UserResponse
from staff_tracker.services.store import EmployeeStore

logger = structlog.get_logger(__name__)
router = APIRouter()


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(
    user_data: UserCreate,
    store: EmployeeStore = Depends(get_store)
):
    """Create a dashboard user"""
    return store.create_user(user_data)


@router.get("/by-username/{username}", response_model=UserResponse)
async def get_user_by_username(
    username: str,
    store: EmployeeStore = Depends(get_store)
):
    """Get user by exact username"""
    user = store.get_user_by_username(username)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found"
        )
    return user


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: int,
    store: EmployeeStore = Depends(get_store)
):
    """Get user by ID"""
    user = store.get_user(user_id)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found"
        )
    return user
