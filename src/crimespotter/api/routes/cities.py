"""City table endpoints, as JSON and as page context for the city pages."""

from __future__ import annotations

from fastapi import APIRouter

from ...data.cities import CityNotFound, get_city, list_cities
from ...errors import NotFound
from ...models.domain import City
from ...schemas.site import CitiesPageModel, CitiesResponse, CityModel, CityPageModel, CityResponse

SITE_NAME = "CrimeSpotter UK"

router = APIRouter(tags=["cities"])
pages_router = APIRouter(tags=["pages"])


def _city_model(city: City) -> CityModel:
    return CityModel(slug=city.slug, name=city.name, lat=city.lat, lng=city.lng, region=city.region)


def _lookup(slug: str) -> City:
    try:
        return get_city(slug)
    except CityNotFound as exc:
        raise NotFound("City not found") from exc


@router.get("/cities", response_model=CitiesResponse)
def cities() -> CitiesResponse:
    return CitiesResponse(cities=[_city_model(city) for city in list_cities()])


@router.get("/cities/{slug}", response_model=CityResponse)
def city(slug: str) -> CityResponse:
    return CityResponse(city=_city_model(_lookup(slug)))


@pages_router.get("/cities", response_model=CitiesPageModel)
def cities_page() -> CitiesPageModel:
    return CitiesPageModel(
        title=f"Browse by City - {SITE_NAME}",
        cities={city.slug: _city_model(city) for city in list_cities()},
    )


@pages_router.get("/city/{slug}", response_model=CityPageModel)
def city_page(slug: str) -> CityPageModel:
    found = _lookup(slug)
    return CityPageModel(
        title=f"{found.name} Crime Statistics - {SITE_NAME}",
        cityName=found.name,
        cityLat=found.lat,
        cityLng=found.lng,
        cityRegion=found.region,
    )
