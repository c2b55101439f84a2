"""
Region, city and neighborhood reference models
"""

from pydantic import Field

from staff_tracker.models.base import CamelModel


class Coordinates(CamelModel):
    """Default map viewport for a region"""
    lat: float
    lng: float
    zoom: int


class Neighborhood(CamelModel):
    id: str
    name: str
    city_id: str


class City(CamelModel):
    id: str
    name: str
    region_id: str
    neighborhoods: list[Neighborhood] = Field(default_factory=list)


class Region(CamelModel):
    id: str
    name: str
    coordinates: Coordinates
    cities: list[City] = Field(default_factory=list)
