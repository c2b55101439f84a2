"""
Saudi Arabia regions, cities and neighborhoods

Static, read-only reference data. Employee region/city/neighborhood ids
point into this tree but are not checked against it.
"""

from typing import List, Optional

from staff_tracker.models.location import City, Coordinates, Neighborhood, Region


# (region id, name, (lat, lng, zoom), [(city id, name, [(neighborhood id, name), ...]), ...])
_LOCATION_TREE = [
    ("riyadh", "منطقة الرياض", (24.7136, 46.6753, 10), [
        ("riyadh-city", "الرياض", [
            ("olaya", "حي العليا"),
            ("malaz", "حي الملز"),
            ("rawda", "حي الروضة"),
            ("nakheel", "حي النخيل"),
            ("sulaimaniya", "حي السليمانية"),
            ("naseem", "حي النسيم"),
            ("sahafa", "حي الصحافة"),
            ("murabba", "حي المربع"),
            ("batha", "حي البطحاء"),
            ("yamama", "حي اليمامة"),
            ("munsiyah", "حي المونسية"),
            ("qurtuba", "حي قرطبة"),
            ("ramal", "حي الرمال"),
            ("rawabi", "حي الروابي"),
        ]),
        ("kharj", "الخرج", [
            ("kharj-center", "وسط الخرج"),
            ("saih", "حي السيح"),
            ("yamama-kharj", "حي اليمامة"),
        ]),
        ("diriyah", "الدرعية", [
            ("turaif", "حي طريف"),
            ("ghusaiba", "حي الغصيبة"),
            ("bujairi", "حي البجيري"),
        ]),
    ]),
    ("qassim", "منطقة القصيم", (26.0667, 43.9667, 9), [
        ("buraidah", "بريدة", [
            ("rawabi", "حي الروابي"),
            ("salamah", "حي السلامة"),
            ("jubail", "حي الجبيل"),
            ("sadiq", "حي الصديق"),
            ("faruq", "حي الفاروق"),
            ("nakheel-buraidah", "حي النخيل"),
            ("andalus", "حي الأندلس"),
        ]),
        ("unaizah", "عنيزة", [
            ("wassat-unaizah", "وسط عنيزة"),
            ("faihaa", "حي الفيحاء"),
            ("qadisiyah", "حي القادسية"),
            ("sultan", "حي السلطان"),
        ]),
        ("rass", "الرس", [
            ("rawdah-rass", "حي الروضة"),
            ("salamah-rass", "حي السلامة"),
            ("wassat-rass", "وسط الرس"),
        ]),
    ]),
    ("makkah", "منطقة مكة المكرمة", (21.4225, 39.8262, 8), [
        ("makkah-city", "مكة المكرمة", [
            ("aziziyah", "حي العزيزية"),
            ("misfalah", "حي المسفلة"),
            ("sharaie", "حي الشرائع"),
            ("maabdah", "حي المعابدة"),
        ]),
        ("jeddah", "جدة", [
            ("balad", "حي البلد"),
            ("hamra", "حي الحمراء"),
            ("salamah-jeddah", "حي السلامة"),
            ("corniche", "حي الكورنيش"),
            ("rawdah-jeddah", "حي الروضة"),
        ]),
        ("taif", "الطائف", [
            ("wassat-taif", "وسط الطائف"),
            ("shafa", "حي الشفا"),
            ("hada", "حي الهدا"),
        ]),
    ]),
    ("eastern", "المنطقة الشرقية", (26.4282, 50.0647, 8), [
        ("dammam", "الدمام", [
            ("corniche-dammam", "حي الكورنيش"),
            ("jalawiya", "حي الجلوية"),
            ("fanateer", "حي الفناتير"),
            ("badiyah", "حي البادية"),
        ]),
        ("khobar", "الخبر", [
            ("aqrabiyah", "حي العقربية"),
            ("thuqbah", "حي الثقبة"),
            ("rakah", "حي الركة"),
        ]),
        ("jubail", "الجبيل", [
            ("fanateer-jubail", "حي الفناتير"),
            ("danah", "حي الدانة"),
            ("sinaiyah", "المنطقة الصناعية"),
        ]),
    ]),
]


def _build_regions() -> List[Region]:
    regions = []
    for region_id, region_name, (lat, lng, zoom), cities in _LOCATION_TREE:
        regions.append(Region(
            id=region_id,
            name=region_name,
            coordinates=Coordinates(lat=lat, lng=lng, zoom=zoom),
            cities=[
                City(
                    id=city_id,
                    name=city_name,
                    region_id=region_id,
                    neighborhoods=[
                        Neighborhood(id=n_id, name=n_name, city_id=city_id)
                        for n_id, n_name in neighborhoods
                    ],
                )
                for city_id, city_name, neighborhoods in cities
            ],
        ))
    return regions


SAUDI_LOCATIONS: List[Region] = _build_regions()


def get_regions() -> List[Region]:
    return list(SAUDI_LOCATIONS)


def get_region_by_id(region_id: str) -> Optional[Region]:
    for region in SAUDI_LOCATIONS:
        if region.id == region_id:
            return region
    return None


def get_cities_by_region(region_id: str) -> List[City]:
    """Cities of a region, empty for an unknown region"""
    region = get_region_by_id(region_id)
    return list(region.cities) if region else []


def get_city_by_id(city_id: str) -> Optional[City]:
    for region in SAUDI_LOCATIONS:
        for city in region.cities:
            if city.id == city_id:
                return city
    return None


def get_neighborhoods_by_city(city_id: str) -> List[Neighborhood]:
    """Neighborhoods of a city, empty for an unknown city"""
    city = get_city_by_id(city_id)
    return list(city.neighborhoods) if city else []


def get_neighborhood_by_id(neighborhood_id: str) -> Optional[Neighborhood]:
    """First neighborhood with this id, searching regions in order"""
    for region in SAUDI_LOCATIONS:
        for city in region.cities:
            for neighborhood in city.neighborhoods:
                if neighborhood.id == neighborhood_id:
                    return neighborhood
    return None
