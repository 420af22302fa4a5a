"""Sitemap and robots.txt."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse, Response

from ...config import Settings
from ...data.cities import city_slugs
from ...services.police import DatesCache
from ...services.sitemap import build_robots, build_sitemap
from ..dependencies import get_dates_cache, get_settings

router = APIRouter(tags=["seo"])

CACHE_CONTROL = "public, max-age=3600"


@router.get("/sitemap.xml", response_class=Response)
def sitemap(
    request: Request,
    settings: Settings = Depends(get_settings),
    dates_cache: DatesCache = Depends(get_dates_cache),
) -> Response:
    host = settings.canonical_host or request.headers.get("host") or request.url.netloc
    xml = build_sitemap(
        base_url=f"https://{host}",
        city_slugs=city_slugs(),
        latest_month=dates_cache.resolve_latest_date(),
    )
    return Response(
        content=xml,
        media_type="application/xml; charset=utf-8",
        headers={"Cache-Control": CACHE_CONTROL},
    )


@router.get("/robots.txt", response_class=PlainTextResponse)
def robots(settings: Settings = Depends(get_settings)) -> PlainTextResponse:
    return PlainTextResponse(build_robots(settings.sitemap_hosts), headers={"Cache-Control": CACHE_CONTROL})
