"""
Pydantic schemas for employee requests and responses
"""

from pydantic import BeforeValidator, field_validator
from decimal import Decimal, InvalidOperation
from typing import Annotated, Any, Optional

from staff_tracker.models.base import CamelModel
from staff_tracker.models.employee import EmployeeStatus


def to_decimal_string(value: Any) -> Any:
    """Accept numbers or numeric strings, store them as fixed-point strings"""
    if value is None or isinstance(value, bool):
        return value
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
        if "_" in value:
            raise ValueError("must be a decimal number")
    elif not isinstance(value, (int, float)):
        return value

    try:
        number = Decimal(str(value))
    except InvalidOperation:
        raise ValueError("must be a decimal number")
    if not number.is_finite():
        raise ValueError("must be a finite decimal number")
    return format(number, "f")


def _to_reported_coordinate(value: Any) -> Any:
    """Like to_decimal_string, but a numeric zero counts as not reported"""
    if isinstance(value, (int, float)) and not isinstance(value, bool) and not value:
        return None
    return to_decimal_string(value)


DecimalString = Annotated[Optional[str], BeforeValidator(to_decimal_string)]
ReportedCoordinate = Annotated[Optional[str], BeforeValidator(_to_reported_coordinate)]


def _unique(values: Optional[list[str]]) -> list[str]:
    """Drop duplicates, keeping first occurrence"""
    if values is None:
        return []
    return list(dict.fromkeys(values))


class EmployeeBase(CamelModel):
    """Fields shared by create and update requests"""
    latitude: DecimalString = None
    longitude: DecimalString = None
    location: Optional[str] = None
    region_id: Optional[str] = None
    city_id: Optional[str] = None
    neighborhood_id: Optional[str] = None
    customer_id: Optional[str] = None
    customer_name: Optional[str] = None
    languages: Optional[list[str]] = None
    training_courses: Optional[list[str]] = None

    @field_validator("languages", "training_courses")
    @classmethod
    def as_set(cls, value: Optional[list[str]]) -> list[str]:
        return _unique(value)


class EmployeeCreate(EmployeeBase):
    """Employee creation schema. Store applies defaults for omitted fields."""
    name: str
    phone: str
    status: Optional[EmployeeStatus] = None

    @field_validator("status")
    @classmethod
    def status_not_null(cls, value: Optional[EmployeeStatus]) -> EmployeeStatus:
        if value is None:
            raise ValueError("status may not be null")
        return value


class EmployeeUpdate(EmployeeBase):
    """Partial employee update. Only fields sent by the client are applied."""
    name: Optional[str] = None
    phone: Optional[str] = None
    status: Optional[EmployeeStatus] = None

    @field_validator("name", "phone", "status")
    @classmethod
    def not_null(cls, value: Any) -> Any:
        if value is None:
            raise ValueError("field may not be null")
        return value


class LocationUpdate(CamelModel):
    """Position report. Presence is checked by the route."""
    latitude: ReportedCoordinate = None
    longitude: ReportedCoordinate = None
    location: Optional[str] = None


class CustomerAssignment(CamelModel):
    """Customer to assign an employee to"""
    customer_id: Optional[str] = None
    customer_name: Optional[str] = None


class StatusUpdate(CamelModel):
    """Raw status change. Checked against EmployeeStatus by the route."""
    status: Optional[str] = None


class StatusSummary(CamelModel):
    """Employee counts per status"""
    available: int
    busy: int
    offline: int
    total: int
