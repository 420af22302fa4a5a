"""Fixed table of UK cities shown on the browse-by-city pages."""

from __future__ import annotations

from ..models.domain import City

_CITY_ROWS: tuple[tuple[str, str, float, float, str], ...] = (
    ("london", "London", 51.5074, -0.1278, "Greater London"),
    ("manchester", "Manchester", 53.4808, -2.2426, "Greater Manchester"),
    ("birmingham", "Birmingham", 52.4862, -1.8904, "West Midlands"),
    ("leeds", "Leeds", 53.8008, -1.5491, "West Yorkshire"),
    ("liverpool", "Liverpool", 53.4084, -2.9916, "Merseyside"),
    ("sheffield", "Sheffield", 53.3811, -1.4701, "South Yorkshire"),
    ("bristol", "Bristol", 51.4545, -2.5879, "South West"),
    ("newcastle", "Newcastle", 54.9783, -1.6178, "Tyne and Wear"),
    ("nottingham", "Nottingham", 52.9548, -1.1581, "East Midlands"),
    ("plymouth", "Plymouth", 50.3755, -4.1427, "Devon"),
    ("southampton", "Southampton", 50.9097, -1.4044, "Hampshire"),
    ("portsmouth", "Portsmouth", 50.8198, -1.0880, "Hampshire"),
    ("leicester", "Leicester", 52.6369, -1.1398, "Leicestershire"),
    ("coventry", "Coventry", 52.4068, -1.5197, "West Midlands"),
    ("cardiff", "Cardiff", 51.4816, -3.1791, "Wales"),
    ("swansea", "Swansea", 51.6214, -3.9436, "Wales"),
    ("bradford", "Bradford", 53.7960, -1.7594, "West Yorkshire"),
    ("brighton", "Brighton & Hove", 50.8225, -0.1372, "East Sussex"),
    ("oxford", "Oxford", 51.7520, -1.2577, "Oxfordshire"),
    ("cambridge", "Cambridge", 52.2053, 0.1218, "Cambridgeshire"),
    ("exeter", "Exeter", 50.7256, -3.5269, "Devon"),
    ("york", "York", 53.9600, -1.0873, "North Yorkshire"),
    ("bath", "Bath", 51.3811, -2.3590, "Somerset"),
    ("norwich", "Norwich", 52.6309, 1.2974, "Norfolk"),
    ("reading", "Reading", 51.4543, -0.9781, "Berkshire"),
    ("derby", "Derby", 52.9226, -1.4746, "Derbyshire"),
    ("stoke", "Stoke-on-Trent", 53.0027, -2.1794, "Staffordshire"),
    ("wolverhampton", "Wolverhampton", 52.5865, -2.1288, "West Midlands"),
    ("milton-keynes", "Milton Keynes", 52.0406, -0.7594, "Buckinghamshire"),
    ("newport", "Newport", 51.5842, -2.9977, "Wales"),
)

CITIES: dict[str, City] = {
    slug: City(slug=slug, name=name, lat=lat, lng=lng, region=region)
    for slug, name, lat, lng, region in _CITY_ROWS
}


class CityNotFound(LookupError):
    """Raised when a slug does not match any known city."""


def list_cities() -> list[City]:
    return list(CITIES.values())


def city_slugs() -> list[str]:
    return list(CITIES)


def get_city(slug: str) -> City:
    """Case-insensitive lookup of a city by slug."""
    city = CITIES.get((slug or "").strip().lower())
    if city is None:
        raise CityNotFound(f"Unknown city: {slug!r}")
    return city
