"""
Location hierarchy API endpoints (read-only)
"""

from fastapi import APIRouter, HTTPException, status
from typing import List

from staff_tracker.models.location import City, Neighborhood, Region
from staff_tracker.services import locations

router = APIRouter()


@router.get("/regions", response_model=List[Region])
async def list_regions():
    """List all regions with their cities and neighborhoods"""
    return locations.get_regions()


@router.get("/regions/{region_id}", response_model=Region)
async def get_region(region_id: str):
    """Get region by ID"""
    region = locations.get_region_by_id(region_id)
    if not region:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Region not found"
        )
    return region


@router.get("/regions/{region_id}/cities", response_model=List[City])
async def list_region_cities(region_id: str):
    return locations.get_cities_by_region(region_id)


@router.get("/cities/{city_id}", response_model=City)
async def get_city(city_id: str):
    """Get city by ID"""
    city = locations.get_city_by_id(city_id)
    if not city:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="City not found"
        )
    return city


@router.get("/cities/{city_id}/neighborhoods", response_model=List[Neighborhood])
async def list_city_neighborhoods(city_id: str):
    return locations.get_neighborhoods_by_city(city_id)


@router.get("/neighborhoods/{neighborhood_id}", response_model=Neighborhood)
async def get_neighborhood(neighborhood_id: str):
    """Get neighborhood by ID"""
    neighborhood = locations.get_neighborhood_by_id(neighborhood_id)
    if not neighborhood:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Neighborhood not found"
        )
    return neighborhood
