"""
Test configuration for pytest
"""

import pytest
import os
from httpx import AsyncClient, ASGITransport

# Test environment variables
os.environ["SEED_SAMPLE_DATA"] = "false"
os.environ["ENVIRONMENT"] = "test"

from staff_tracker.main import create_app
from staff_tracker.schemas.employee import EmployeeCreate
from staff_tracker.services.store import EmployeeStore


@pytest.fixture
def store() -> EmployeeStore:
    """Empty store for each test"""
    return EmployeeStore()


@pytest.fixture
def app(store: EmployeeStore):
    """Application wired to the test store"""
    return create_app(store=store)


@pytest.fixture
async def client(app):
    """Create test client"""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest.fixture
def riyadh_employee(store: EmployeeStore):
    """Available employee in Olaya"""
    return store.create_employee(EmployeeCreate(
        name="Sara Ali",
        phone="0501234568",
        latitude="24.7000",
        longitude="46.6900",
        location="Olaya",
        region_id="riyadh",
        city_id="riyadh-city",
        neighborhood_id="olaya",
        languages=["Arabic", "English"],
    ))


@pytest.fixture
def busy_employee(store: EmployeeStore):
    """Busy employee working for a customer in Jeddah"""
    return store.create_employee(EmployeeCreate(
        name="Omar Ibrahim",
        phone="0501234573",
        status="busy",
        location="Jeddah",
        region_id="makkah",
        city_id="jeddah",
        neighborhood_id="jeddah-center",
        customer_id="CUST003",
        customer_name="Al Binaa",
    ))
