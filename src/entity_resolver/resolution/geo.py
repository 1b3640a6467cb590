"""
Great-circle distance and the static city gazetteer used for location boosts.
"""
import math
from typing import NamedTuple, Optional

from .normalizer import normalize

EARTH_RADIUS_KM = 6371.0


class LatLon(NamedTuple):
    lat: float
    lon: float


# Keys are normalized city/region names as they appear in catalog records.
CITY_COORDINATES = {
    # North American pro-sports markets
    "kansas city": LatLon(39.0997, -94.5786),
    "new york": LatLon(40.7128, -74.0060),
    "brooklyn": LatLon(40.6782, -73.9442),
    "los angeles": LatLon(34.0522, -118.2437),
    "chicago": LatLon(41.8781, -87.6298),
    "boston": LatLon(42.3601, -71.0589),
    "philadelphia": LatLon(39.9526, -75.1652),
    "dallas": LatLon(32.7767, -96.7970),
    "houston": LatLon(29.7604, -95.3698),
    "san francisco": LatLon(37.7749, -122.4194),
    "miami": LatLon(25.7617, -80.1918),
    "denver": LatLon(39.7392, -104.9903),
    "seattle": LatLon(47.6062, -122.3321),
    "atlanta": LatLon(33.7490, -84.3880),
    "phoenix": LatLon(33.4484, -112.0740),
    "detroit": LatLon(42.3314, -83.0458),
    "minneapolis": LatLon(44.9778, -93.2650),
    "minnesota": LatLon(44.9778, -93.2650),
    "tampa bay": LatLon(27.9506, -82.4572),
    "tampa": LatLon(27.9506, -82.4572),
    "pittsburgh": LatLon(40.4406, -79.9959),
    "cleveland": LatLon(41.4993, -81.6944),
    "baltimore": LatLon(39.2904, -76.6122),
    "indianapolis": LatLon(39.7684, -86.1581),
    "indiana": LatLon(39.7684, -86.1581),
    "cincinnati": LatLon(39.1031, -84.5120),
    "las vegas": LatLon(36.1699, -115.1398),
    "green bay": LatLon(44.5133, -88.0133),
    "jacksonville": LatLon(30.3322, -81.6557),
    "tennessee": LatLon(36.1627, -86.7816),
    "nashville": LatLon(36.1627, -86.7816),
    "new orleans": LatLon(29.9511, -90.0715),
    "carolina": LatLon(35.2271, -80.8431),
    "charlotte": LatLon(35.2271, -80.8431),
    "arizona": LatLon(33.4484, -112.0740),
    "new england": LatLon(42.3601, -71.0589),
    "washington": LatLon(38.9072, -77.0369),
    "buffalo": LatLon(42.8864, -78.8784),
    "sacramento": LatLon(38.5816, -121.4944),
    "san antonio": LatLon(29.4241, -98.4936),
    "orlando": LatLon(28.5383, -81.3792),
    "portland": LatLon(45.5051, -122.6750),
    "memphis": LatLon(35.1495, -90.0490),
    "oklahoma city": LatLon(35.4676, -97.5164),
    "salt lake city": LatLon(40.7608, -111.8910),
    "utah": LatLon(40.7608, -111.8910),
    "milwaukee": LatLon(43.0389, -87.9065),
    "st louis": LatLon(38.6270, -90.1994),
    "san diego": LatLon(32.7157, -117.1611),
    "san jose": LatLon(37.3382, -121.8863),
    "anaheim": LatLon(33.8366, -117.9143),
    "golden state": LatLon(37.7749, -122.4194),
    "colorado": LatLon(39.7392, -104.9903),
    "columbus": LatLon(39.9612, -82.9988),
    "raleigh": LatLon(35.7796, -78.6382),
    "austin": LatLon(30.2672, -97.7431),
    # Canada
    "toronto": LatLon(43.6532, -79.3832),
    "montreal": LatLon(45.5017, -73.5673),
    "ottawa": LatLon(45.4215, -75.6972),
    "vancouver": LatLon(49.2827, -123.1207),
    "winnipeg": LatLon(49.8951, -97.1384),
    "edmonton": LatLon(53.5461, -113.4938),
    "calgary": LatLon(51.0447, -114.0719),
    # European football cities
    "london": LatLon(51.5074, -0.1278),
    "manchester": LatLon(53.4808, -2.2426),
    "liverpool": LatLon(53.4084, -2.9916),
    "birmingham": LatLon(52.4862, -1.8904),
    "madrid": LatLon(40.4168, -3.7038),
    "barcelona": LatLon(41.3874, 2.1686),
    "seville": LatLon(37.3891, -5.9845),
    "munich": LatLon(48.1351, 11.5820),
    "dortmund": LatLon(51.5136, 7.4653),
    "berlin": LatLon(52.5200, 13.4050),
    "milan": LatLon(45.4642, 9.1900),
    "rome": LatLon(41.9028, 12.4964),
    "naples": LatLon(40.8518, 14.2681),
    "turin": LatLon(45.0703, 7.6869),
}


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle distance between two points in kilometres."""
    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)
    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lon / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def lookup_city(city: str) -> Optional[LatLon]:
    """Coordinates for a city name, or None when it is not in the gazetteer."""
    return CITY_COORDINATES.get(normalize(city))


def locate(location_name: str) -> Optional[LatLon]:
    """
    Coordinates for a free-text location such as "Overland Park, Kansas City".

    The first gazetteer key that is contained in the location, or that
    contains it, wins.
    """
    location = normalize(location_name)
    if not location:
        return None
    for key, coords in CITY_COORDINATES.items():
        if key in location or location in key:
            return coords
    return None
