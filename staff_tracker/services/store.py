"""
In-memory employee and user store

Records live for the lifetime of the process. Lookups that miss return
None (or False for deletes) instead of raising, so callers decide how a
missing record is reported.
"""

from datetime import datetime, timezone
from typing import Dict, Iterable, List, Optional, Union
import structlog

from staff_tracker.models.employee import Employee, EmployeeStatus, DEFAULT_STATUS
from staff_tracker.models.user import User
from staff_tracker.schemas.employee import EmployeeCreate, EmployeeUpdate, to_decimal_string
from staff_tracker.schemas.user import UserCreate

logger = structlog.get_logger(__name__)


def _now() -> datetime:
    return datetime.now(timezone.utc)


class EmployeeStore:
    """Keyed employee and user records with sequential identifiers"""

    def __init__(self):
        self._employees: Dict[int, Employee] = {}
        self._users: Dict[int, User] = {}
        self._next_employee_id = 1
        self._next_user_id = 1

    # User methods

    def get_user(self, user_id: int) -> Optional[User]:
        return self._users.get(user_id)

    def get_user_by_username(self, username: str) -> Optional[User]:
        for user in self._users.values():
            if user.username == username:
                return user
        return None

    def create_user(self, data: UserCreate) -> User:
        """Insert a user. Usernames are not checked for uniqueness."""
        user = User(id=self._next_user_id, username=data.username, password=data.password)
        self._next_user_id += 1
        self._users[user.id] = user

        logger.info(f"User created: {user.id}")
        return user

    # Employee methods

    def get_all_employees(self) -> List[Employee]:
        return list(self._employees.values())

    def get_employee(self, employee_id: int) -> Optional[Employee]:
        return self._employees.get(employee_id)

    def get_employees_by_status(self, status: str) -> List[Employee]:
        """Employees whose status equals the given value exactly"""
        return [e for e in self._employees.values() if e.status == status]

    def search_employees(
        self,
        region_id: Optional[str] = None,
        city_id: Optional[str] = None,
        neighborhood_id: Optional[str] = None,
        query: Optional[str] = None,
    ) -> List[Employee]:
        """Filter employees by location references and a free-text query.

        Location ids must match exactly. The query matches name or location
        label case-insensitively, or any part of the phone number. Filters
        that are not given are ignored.
        """
        needle = query.lower() if query else None
        results = []
        for employee in self._employees.values():
            if region_id and employee.region_id != region_id:
                continue
            if city_id and employee.city_id != city_id:
                continue
            if neighborhood_id and employee.neighborhood_id != neighborhood_id:
                continue
            if needle and not (
                needle in employee.name.lower()
                or query in employee.phone
                or needle in (employee.location or "").lower()
            ):
                continue
            results.append(employee)
        return results

    def count_by_status(self, employees: Optional[Iterable[Employee]] = None) -> Dict[str, int]:
        """Counts per status over the given employees, or the whole roster"""
        if employees is None:
            employees = self._employees.values()
        counts = {status.value: 0 for status in EmployeeStatus}
        total = 0
        for employee in employees:
            counts[employee.status.value] += 1
            total += 1
        counts["total"] = total
        return counts

    def create_employee(self, data: EmployeeCreate) -> Employee:
        """Assign the next id, apply defaults and insert"""
        employee = Employee(
            id=self._take_employee_id(),
            name=data.name,
            phone=data.phone,
            status=data.status or DEFAULT_STATUS,
            latitude=data.latitude,
            longitude=data.longitude,
            location=data.location,
            region_id=data.region_id,
            city_id=data.city_id,
            neighborhood_id=data.neighborhood_id,
            last_update=_now(),
            customer_id=data.customer_id,
            customer_name=data.customer_name,
            languages=data.languages or [],
            training_courses=data.training_courses or [],
        )
        self._employees[employee.id] = employee

        logger.info(f"Employee created: {employee.id}")
        return employee

    def update_employee(self, employee_id: int, updates: EmployeeUpdate) -> Optional[Employee]:
        """Merge the fields the client sent onto the stored record"""
        employee = self._employees.get(employee_id)
        if employee is None:
            return None

        changes = updates.model_dump(exclude_unset=True)
        changes.update(id=employee_id, last_update=_now())

        updated = employee.model_copy(update=changes)
        self._employees[employee_id] = updated

        logger.info(f"Employee updated: {employee_id}")
        return updated

    def update_employee_location(
        self,
        employee_id: int,
        latitude: Union[str, float],
        longitude: Union[str, float],
        location: Optional[str] = None,
    ) -> Optional[Employee]:
        """Move an employee. An empty location keeps the current label."""
        employee = self._employees.get(employee_id)
        if employee is None:
            return None

        updated = employee.model_copy(update={
            "latitude": to_decimal_string(latitude),
            "longitude": to_decimal_string(longitude),
            "location": location or employee.location,
            "last_update": _now(),
        })
        self._employees[employee_id] = updated

        logger.info(f"Employee location updated: {employee_id}")
        return updated

    def delete_employee(self, employee_id: int) -> bool:
        if self._employees.pop(employee_id, None) is None:
            return False

        logger.info(f"Employee deleted: {employee_id}")
        return True

    def seed(self, records: Iterable[dict]) -> int:
        """Insert prebuilt employee records in order, returning how many"""
        count = 0
        for record in records:
            employee = Employee(id=self._take_employee_id(), **record)
            self._employees[employee.id] = employee
            count += 1

        logger.info(f"Seeded {count} employees")
        return count

    def _take_employee_id(self) -> int:
        employee_id = self._next_employee_id
        self._next_employee_id += 1
        return employee_id
