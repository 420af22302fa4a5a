"""Location search suggestions for the map search box."""

from __future__ import annotations

MIN_QUERY_LENGTH = 3

SUGGESTIONS: tuple[dict, ...] = (
    {"name": "London", "coords": [51.5074, -0.1278]},
    {"name": "Manchester", "coords": [53.4808, -2.2426]},
    {"name": "Birmingham", "coords": [52.4862, -1.8904]},
    {"name": "Leeds", "coords": [53.8008, -1.5491]},
    {"name": "Liverpool", "coords": [53.4084, -2.9916]},
)


def search_locations(query: str | None) -> list[dict]:
    if not query or len(query) < MIN_QUERY_LENGTH:
        return []
    needle = query.lower()
    return [
        {"name": entry["name"], "coords": list(entry["coords"])}
        for entry in SUGGESTIONS
        if needle in entry["name"].lower()
    ]
