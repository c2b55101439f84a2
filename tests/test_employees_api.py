"""
Integration tests for the employee endpoints
"""

import pytest
from fastapi import status
from datetime import datetime
from httpx import AsyncClient

from staff_tracker.models.employee import Employee
from staff_tracker.schemas.employee import EmployeeUpdate
from staff_tracker.services.store import EmployeeStore


def _parse_time(value: str) -> datetime:
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


@pytest.fixture
async def created_employee(client: AsyncClient):
    """Create an employee through the API"""
    response = await client.post(
        "/api/employees",
        json={"name": "Test", "phone": "0500000000"}
    )
    return response.json()


# Listing

@pytest.mark.asyncio
async def test_list_empty(client: AsyncClient):
    response = await client.get("/api/employees")

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == []


@pytest.mark.asyncio
async def test_list_uses_camel_case(client: AsyncClient, riyadh_employee: Employee):
    response = await client.get("/api/employees")

    data = response.json()
    assert len(data) == 1
    assert data[0]["regionId"] == "riyadh"
    assert data[0]["neighborhoodId"] == "olaya"
    assert "lastUpdate" in data[0]
    assert data[0]["trainingCourses"] == []


@pytest.mark.asyncio
async def test_list_filters(client: AsyncClient, riyadh_employee: Employee, busy_employee: Employee):
    response = await client.get("/api/employees", params={"regionId": "makkah"})
    assert [e["id"] for e in response.json()] == [busy_employee.id]

    response = await client.get("/api/employees", params={"cityId": "riyadh-city", "search": "SARA"})
    assert [e["id"] for e in response.json()] == [riyadh_employee.id]

    response = await client.get("/api/employees", params={"neighborhoodId": "olaya", "search": "omar"})
    assert response.json() == []


@pytest.mark.asyncio
async def test_summary(client: AsyncClient, riyadh_employee: Employee, busy_employee: Employee):
    response = await client.get("/api/employees/summary")

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"available": 1, "busy": 1, "offline": 0, "total": 2}


@pytest.mark.asyncio
async def test_summary_counts_selected_location(client: AsyncClient, riyadh_employee: Employee, busy_employee: Employee):
    response = await client.get("/api/employees/summary", params={"regionId": "makkah"})
    assert response.json() == {"available": 0, "busy": 1, "offline": 0, "total": 1}

    response = await client.get("/api/employees/summary", params={"neighborhoodId": "nowhere"})
    assert response.json() == {"available": 0, "busy": 0, "offline": 0, "total": 0}


@pytest.mark.asyncio
async def test_list_by_status(client: AsyncClient, riyadh_employee: Employee, busy_employee: Employee):
    response = await client.get("/api/employees/status/busy")

    assert response.status_code == status.HTTP_200_OK
    assert [e["id"] for e in response.json()] == [busy_employee.id]


@pytest.mark.asyncio
async def test_list_by_unknown_status(client: AsyncClient, riyadh_employee: Employee):
    response = await client.get("/api/employees/status/vacation")

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == []


# Single employee

@pytest.mark.asyncio
async def test_get_employee(client: AsyncClient, riyadh_employee: Employee):
    response = await client.get(f"/api/employees/{riyadh_employee.id}")

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["name"] == "Sara Ali"


@pytest.mark.asyncio
async def test_get_missing_employee(client: AsyncClient):
    response = await client.get("/api/employees/999")

    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json() == {"message": "Employee not found"}


@pytest.mark.asyncio
async def test_get_non_integer_id(client: AsyncClient):
    response = await client.get("/api/employees/abc")

    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json() == {"message": "Employee not found"}


@pytest.mark.asyncio
async def test_get_uses_leading_integer(client: AsyncClient, created_employee: dict):
    response = await client.get(f"/api/employees/{created_employee['id']}abc")

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["id"] == created_employee["id"]


# Create

@pytest.mark.asyncio
async def test_create_applies_defaults(client: AsyncClient, created_employee: dict):
    assert created_employee["id"] == 1
    assert created_employee["status"] == "available"
    assert created_employee["languages"] == []
    assert created_employee["trainingCourses"] == []
    assert created_employee["customerId"] is None
    assert created_employee["lastUpdate"]


@pytest.mark.asyncio
async def test_create_returns_201(client: AsyncClient):
    response = await client.post(
        "/api/employees",
        json={
            "name": "Khalid",
            "phone": "0501234569",
            "status": "offline",
            "latitude": 24.6877,
            "longitude": 46.7219,
            "regionId": "riyadh",
            "languages": ["Arabic"],
        }
    )

    assert response.status_code == status.HTTP_201_CREATED
    data = response.json()
    assert data["status"] == "offline"
    assert data["latitude"] == "24.6877"
    assert data["regionId"] == "riyadh"


@pytest.mark.asyncio
async def test_create_round_trip(client: AsyncClient, created_employee: dict):
    response = await client.get(f"/api/employees/{created_employee['id']}")

    assert response.json() == created_employee


@pytest.mark.asyncio
async def test_create_ids_increase(client: AsyncClient, created_employee: dict):
    response = await client.post("/api/employees", json={"name": "Second", "phone": "1"})

    assert response.json()["id"] > created_employee["id"]


@pytest.mark.asyncio
async def test_create_missing_fields(client: AsyncClient):
    response = await client.post("/api/employees", json={"name": "No phone"})

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    data = response.json()
    assert data["message"] == "Invalid employee data"
    assert data["errors"][0]["path"] == ["body", "phone"]
    assert data["errors"][0]["code"] == "missing"


@pytest.mark.asyncio
async def test_create_invalid_status(client: AsyncClient):
    response = await client.post(
        "/api/employees",
        json={"name": "Test", "phone": "1", "status": "sleeping"}
    )

    assert response.status_code == status.HTTP_400_BAD_REQUEST


# Update

@pytest.mark.asyncio
async def test_update_employee(client: AsyncClient, created_employee: dict):
    response = await client.put(
        f"/api/employees/{created_employee['id']}",
        json={"phone": "0599999999", "id": 500, "trainingCourses": ["Sales"]}
    )

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["id"] == created_employee["id"]
    assert data["phone"] == "0599999999"
    assert data["name"] == "Test"
    assert data["trainingCourses"] == ["Sales"]
    assert _parse_time(data["lastUpdate"]) >= _parse_time(created_employee["lastUpdate"])


@pytest.mark.asyncio
async def test_update_invalid_data(client: AsyncClient, created_employee: dict):
    response = await client.put(
        f"/api/employees/{created_employee['id']}",
        json={"status": "lunch"}
    )

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["message"] == "Invalid employee data"


@pytest.mark.asyncio
async def test_update_missing_employee(client: AsyncClient):
    response = await client.put("/api/employees/999", json={"name": "Ghost"})

    assert response.status_code == status.HTTP_404_NOT_FOUND


# Delete

@pytest.mark.asyncio
async def test_delete_then_get(client: AsyncClient, created_employee: dict):
    response = await client.delete(f"/api/employees/{created_employee['id']}")

    assert response.status_code == status.HTTP_204_NO_CONTENT
    assert response.content == b""

    response = await client.get(f"/api/employees/{created_employee['id']}")
    assert response.status_code == status.HTTP_404_NOT_FOUND


@pytest.mark.asyncio
async def test_delete_missing_employee(client: AsyncClient):
    response = await client.delete("/api/employees/999")

    assert response.status_code == status.HTTP_404_NOT_FOUND


@pytest.mark.asyncio
async def test_delete_non_integer_id(client: AsyncClient, created_employee: dict):
    response = await client.delete("/api/employees/abc")

    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json() == {"message": "Employee not found"}

    response = await client.get(f"/api/employees/{created_employee['id']}")
    assert response.status_code == status.HTTP_200_OK


# Location

@pytest.mark.asyncio
async def test_update_location(client: AsyncClient, riyadh_employee: Employee):
    response = await client.put(
        f"/api/employees/{riyadh_employee.id}/location",
        json={"latitude": 24.745, "longitude": 46.655, "location": "Rabee"}
    )

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["latitude"] == "24.745"
    assert data["longitude"] == "46.655"
    assert data["location"] == "Rabee"


@pytest.mark.asyncio
async def test_update_location_keeps_label(client: AsyncClient, riyadh_employee: Employee):
    response = await client.put(
        f"/api/employees/{riyadh_employee.id}/location",
        json={"latitude": "24.1", "longitude": "46.2"}
    )

    assert response.json()["location"] == "Olaya"


@pytest.mark.asyncio
@pytest.mark.parametrize("body", [
    {"latitude": 24.1},
    {"longitude": 46.2},
    {"latitude": "", "longitude": "46.2"},
    {"latitude": 0, "longitude": 46.2},
    {"latitude": 24.1, "longitude": 0.0},
    {},
])
async def test_update_location_requires_coordinates(client: AsyncClient, riyadh_employee: Employee, body: dict):
    response = await client.put(f"/api/employees/{riyadh_employee.id}/location", json=body)

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json() == {"message": "Latitude and longitude are required"}


@pytest.mark.asyncio
async def test_update_location_stores_fixed_point(client: AsyncClient, riyadh_employee: Employee):
    response = await client.put(
        f"/api/employees/{riyadh_employee.id}/location",
        json={"latitude": "0", "longitude": 1e-7}
    )

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["latitude"] == "0"
    assert response.json()["longitude"] == "0.0000001"


@pytest.mark.asyncio
@pytest.mark.parametrize("latitude", ["nan", "inf", "north"])
async def test_update_location_rejects_non_decimal(client: AsyncClient, riyadh_employee: Employee, latitude: str):
    response = await client.put(
        f"/api/employees/{riyadh_employee.id}/location",
        json={"latitude": latitude, "longitude": 46.2}
    )

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    data = response.json()
    assert data["message"] == "Invalid location data"
    assert data["errors"][0]["path"] == ["body", "latitude"]


@pytest.mark.asyncio
async def test_update_location_missing_employee(client: AsyncClient):
    response = await client.put(
        "/api/employees/999/location",
        json={"latitude": 24.1, "longitude": 46.2}
    )

    assert response.status_code == status.HTTP_404_NOT_FOUND


# Assignment

@pytest.mark.asyncio
async def test_assign_marks_busy(client: AsyncClient, riyadh_employee: Employee):
    response = await client.put(
        f"/api/employees/{riyadh_employee.id}/assign",
        json={"customerId": "CUST042", "customerName": "Gulf Trading"}
    )

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["status"] == "busy"
    assert data["customerId"] == "CUST042"
    assert data["customerName"] == "Gulf Trading"


@pytest.mark.asyncio
async def test_assign_replaces_customer(client: AsyncClient, busy_employee: Employee):
    response = await client.put(
        f"/api/employees/{busy_employee.id}/assign",
        json={"customerId": "CUST100", "customerName": "New Client"}
    )

    assert response.json()["customerId"] == "CUST100"


@pytest.mark.asyncio
@pytest.mark.parametrize("body", [
    {"customerId": "CUST042"},
    {"customerName": "Gulf Trading"},
    {"customerId": "", "customerName": "Gulf Trading"},
])
async def test_assign_requires_customer(client: AsyncClient, riyadh_employee: Employee, body: dict):
    response = await client.put(f"/api/employees/{riyadh_employee.id}/assign", json=body)

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json() == {"message": "Customer ID and name are required"}


@pytest.mark.asyncio
async def test_assign_malformed_body(client: AsyncClient, riyadh_employee: Employee):
    response = await client.put(
        f"/api/employees/{riyadh_employee.id}/assign",
        json={"customerId": ["CUST042"], "customerName": "Gulf Trading"}
    )

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["message"] == "Invalid assignment data"


@pytest.mark.asyncio
async def test_assign_missing_employee(client: AsyncClient):
    response = await client.put(
        "/api/employees/999/assign",
        json={"customerId": "CUST042", "customerName": "Gulf Trading"}
    )

    assert response.status_code == status.HTTP_404_NOT_FOUND


# Status

@pytest.mark.asyncio
@pytest.mark.parametrize("new_status", ["available", "offline"])
async def test_leaving_busy_clears_customer(client: AsyncClient, busy_employee: Employee, new_status: str):
    response = await client.put(
        f"/api/employees/{busy_employee.id}/status",
        json={"status": new_status}
    )

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["status"] == new_status
    assert data["customerId"] is None
    assert data["customerName"] is None


@pytest.mark.asyncio
async def test_status_busy_leaves_customer_untouched(client: AsyncClient, created_employee: dict):
    """Test moving into busy without assign sets no customer"""
    response = await client.put(
        f"/api/employees/{created_employee['id']}/status",
        json={"status": "busy"}
    )

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["status"] == "busy"
    assert data["customerId"] is None
    assert data["customerName"] is None


@pytest.mark.asyncio
async def test_status_busy_keeps_existing_customer(client: AsyncClient, store: EmployeeStore, riyadh_employee: Employee):
    store.update_employee(riyadh_employee.id, EmployeeUpdate(customer_id="CUST007", customer_name="Kept"))

    response = await client.put(
        f"/api/employees/{riyadh_employee.id}/status",
        json={"status": "busy"}
    )

    assert response.json()["customerId"] == "CUST007"


@pytest.mark.asyncio
@pytest.mark.parametrize("body", [{"status": "vacation"}, {"status": "BUSY"}, {"status": 5}, {}])
async def test_invalid_status(client: AsyncClient, riyadh_employee: Employee, body: dict):
    response = await client.put(f"/api/employees/{riyadh_employee.id}/status", json=body)

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json() == {"message": "Invalid status"}


@pytest.mark.asyncio
async def test_status_missing_employee(client: AsyncClient):
    response = await client.put("/api/employees/999/status", json={"status": "offline"})

    assert response.status_code == status.HTTP_404_NOT_FOUND


# Users and service endpoints

@pytest.mark.asyncio
async def test_user_endpoints(client: AsyncClient):
    response = await client.post("/api/users", json={"username": "dispatcher", "password": "secret"})

    assert response.status_code == status.HTTP_201_CREATED
    assert response.json() == {"id": 1, "username": "dispatcher"}

    response = await client.get("/api/users/1")
    assert response.json()["username"] == "dispatcher"

    response = await client.get("/api/users/by-username/dispatcher")
    assert response.json()["id"] == 1

    response = await client.get("/api/users/by-username/nobody")
    assert response.status_code == status.HTTP_404_NOT_FOUND


@pytest.mark.asyncio
async def test_create_user_invalid(client: AsyncClient):
    response = await client.post("/api/users", json={"username": "dispatcher"})

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["message"] == "Invalid user data"


@pytest.mark.asyncio
async def test_health(client: AsyncClient):
    response = await client.get("/health")

    assert response.json() == {"status": "healthy", "service": "staff-tracker-api"}
