"""
Employee API endpoints
Handles CRUD, position reports, customer assignment and status changes
"""

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from typing import List, Optional
import re
import structlog

from staff_tracker.core.dependencies import get_store
from staff_tracker.models.employee import Employee, EmployeeStatus
from staff_tracker.schemas.employee import (
    EmployeeCreate, EmployeeUpdate, LocationUpdate,
    CustomerAssignment, StatusUpdate, StatusSummary
)
from staff_tracker.services.store import EmployeeStore

logger = structlog.get_logger(__name__)
router = APIRouter()

EMPLOYEE_NOT_FOUND = "Employee not found"

# Leading integer of the path segment: "12abc" -> 12
_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def _not_found() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=EMPLOYEE_NOT_FOUND
    )


def parse_employee_id(employee_id: str) -> int:
    """Read the id from the path; a segment without a leading integer matches no employee"""
    match = _LEADING_INT.match(employee_id)
    if not match:
        raise _not_found()
    return int(match.group(1))


@router.get("", response_model=List[Employee])
async def list_employees(
    region_id: Optional[str] = Query(None, alias="regionId", description="Filter by region"),
    city_id: Optional[str] = Query(None, alias="cityId", description="Filter by city"),
    neighborhood_id: Optional[str] = Query(None, alias="neighborhoodId", description="Filter by neighborhood"),
    search: Optional[str] = Query(None, description="Search by name, phone or location"),
    store: EmployeeStore = Depends(get_store)
):
    """List employees with optional filters"""
    try:
        if region_id or city_id or neighborhood_id or search:
            return store.search_employees(
                region_id=region_id,
                city_id=city_id,
                neighborhood_id=neighborhood_id,
                query=search,
            )
        return store.get_all_employees()

    except Exception as e:
        logger.error(f"Error listing employees: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch employees"
        )


@router.get("/summary", response_model=StatusSummary)
async def employee_summary(
    region_id: Optional[str] = Query(None, alias="regionId", description="Filter by region"),
    city_id: Optional[str] = Query(None, alias="cityId", description="Filter by city"),
    neighborhood_id: Optional[str] = Query(None, alias="neighborhoodId", description="Filter by neighborhood"),
    store: EmployeeStore = Depends(get_store)
):
    """Employee counts per status within the selected location"""
    employees = store.search_employees(
        region_id=region_id,
        city_id=city_id,
        neighborhood_id=neighborhood_id,
    )
    return StatusSummary(**store.count_by_status(employees))


@router.get("/status/{employee_status}", response_model=List[Employee])
async def list_employees_by_status(
    employee_status: str,
    store: EmployeeStore = Depends(get_store)
):
    """List employees with the given status, empty for unknown values"""
    try:
        return store.get_employees_by_status(employee_status)

    except Exception as e:
        logger.error(f"Error listing employees by status: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch employees by status"
        )


@router.get("/{employee_id}", response_model=Employee)
async def get_employee(
    employee_id: int = Depends(parse_employee_id),
    store: EmployeeStore = Depends(get_store)
):
    """Get employee by ID"""
    try:
        employee = store.get_employee(employee_id)
        if not employee:
            raise _not_found()

        return employee

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error getting employee: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch employee"
        )


@router.post("", response_model=Employee, status_code=status.HTTP_201_CREATED)
async def create_employee(
    employee_data: EmployeeCreate,
    store: EmployeeStore = Depends(get_store)
):
    """Create a new employee"""
    try:
        return store.create_employee(employee_data)

    except Exception as e:
        logger.error(f"Error creating employee: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create employee"
        )


@router.put("/{employee_id}", response_model=Employee)
async def update_employee(
    employee_update: EmployeeUpdate,
    employee_id: int = Depends(parse_employee_id),
    store: EmployeeStore = Depends(get_store)
):
    """Update employee fields"""
    try:
        employee = store.update_employee(employee_id, employee_update)
        if not employee:
            raise _not_found()

        return employee

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error updating employee: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update employee"
        )


@router.delete("/{employee_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_employee(
    employee_id: int = Depends(parse_employee_id),
    store: EmployeeStore = Depends(get_store)
):
    """Delete employee"""
    try:
        if not store.delete_employee(employee_id):
            raise _not_found()

        return Response(status_code=status.HTTP_204_NO_CONTENT)

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error deleting employee: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete employee"
        )


@router.put("/{employee_id}/location", response_model=Employee)
async def update_employee_location(
    location_update: LocationUpdate,
    employee_id: int = Depends(parse_employee_id),
    store: EmployeeStore = Depends(get_store)
):
    """Record a new position for an employee"""
    if not location_update.latitude or not location_update.longitude:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Latitude and longitude are required"
        )

    try:
        employee = store.update_employee_location(
            employee_id,
            location_update.latitude,
            location_update.longitude,
            location_update.location,
        )
        if not employee:
            raise _not_found()

        return employee

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error updating employee location: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update employee location"
        )


@router.put("/{employee_id}/assign", response_model=Employee)
async def assign_employee(
    assignment: CustomerAssignment,
    employee_id: int = Depends(parse_employee_id),
    store: EmployeeStore = Depends(get_store)
):
    """Assign employee to a customer, marking them busy"""
    if not assignment.customer_id or not assignment.customer_name:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Customer ID and name are required"
        )

    try:
        employee = store.update_employee(employee_id, EmployeeUpdate(
            status=EmployeeStatus.BUSY,
            customer_id=assignment.customer_id,
            customer_name=assignment.customer_name,
        ))
        if not employee:
            raise _not_found()

        logger.info(f"Employee {employee_id} assigned to customer {assignment.customer_id}")
        return employee

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error assigning employee: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to assign employee"
        )


@router.put("/{employee_id}/status", response_model=Employee)
async def update_employee_status(
    status_update: StatusUpdate,
    employee_id: int = Depends(parse_employee_id),
    store: EmployeeStore = Depends(get_store)
):
    """Change employee status.

    Leaving busy clears the customer assignment. Moving into busy here
    leaves the customer fields as they are; use the assign endpoint to
    set them.
    """
    if status_update.status not in {s.value for s in EmployeeStatus}:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid status"
        )

    new_status = EmployeeStatus(status_update.status)
    if new_status == EmployeeStatus.BUSY:
        update = EmployeeUpdate(status=new_status)
    else:
        update = EmployeeUpdate(status=new_status, customer_id=None, customer_name=None)

    try:
        employee = store.update_employee(employee_id, update)
        if not employee:
            raise _not_found()

        return employee

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error updating employee status: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update employee status"
        )
