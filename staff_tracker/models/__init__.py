from staff_tracker.models.base import CamelModel
from staff_tracker.models.employee import Employee, EmployeeStatus, DEFAULT_STATUS
from staff_tracker.models.user import User
from staff_tracker.models.location import Coordinates, Region, City, Neighborhood
