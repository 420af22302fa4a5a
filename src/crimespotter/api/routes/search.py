"""Location search endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Query

from ...schemas.site import SearchResponse
from ...services.search import search_locations

router = APIRouter(tags=["search"])


@router.get("/search", response_model=SearchResponse)
def search(q: str | None = Query(default=None, description="Search text, at least 3 characters")) -> SearchResponse:
    return SearchResponse(suggestions=search_locations(q))
