from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from crimespotter.config import Settings
from crimespotter.main import create_app
from crimespotter.services.police import UpstreamError


def crime(category: str | None, lat: str | None = None, lng: str | None = None) -> dict:
    record: dict = {"persistent_id": "", "month": "2025-06"}
    if category is not None:
        record["category"] = category
    if lat is not None and lng is not None:
        record["location"] = {"latitude": lat, "longitude": lng, "street": {"id": 1, "name": "On or near High Street"}}
    return record


class FakeClock:
    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class DummyPoliceClient:
    """Stands in for PoliceAPIClient; records calls and replays canned payloads or errors."""

    def __init__(
        self,
        dates: list[dict] | Exception | None = None,
        crimes: list[dict] | Exception | None = None,
        forces: list[dict] | Exception | None = None,
    ) -> None:
        self.dates = dates if dates is not None else [{"date": "2025-08"}, {"date": "2025-07"}]
        self.crimes = crimes if crimes is not None else []
        self.forces = forces if forces is not None else [{"id": "avon-and-somerset", "name": "Avon and Somerset Constabulary"}]
        self.dates_calls = 0
        self.crime_calls: list[tuple[str, str, str]] = []

    @staticmethod
    def _replay(value):
        if isinstance(value, Exception):
            raise value
        return value

    def fetch_dates(self) -> list[dict]:
        self.dates_calls += 1
        return self._replay(self.dates)

    def fetch_crimes(self, lat: str, lng: str, date: str) -> list[dict]:
        self.crime_calls.append((lat, lng, date))
        return self._replay(self.crimes)

    def fetch_forces(self) -> list[dict]:
        return self._replay(self.forces)


@pytest.fixture
def police_client() -> DummyPoliceClient:
    return DummyPoliceClient(
        crimes=[
            crime("burglary", "51.5080", "-0.1290"),
            crime("burglary", "51.5060", "-0.1260"),
            crime("anti-social-behaviour", "51.5071", "-0.1281"),
        ]
    )


@pytest.fixture
def test_settings() -> Settings:
    return Settings(environment="development", warm_dates_cache=False, frontend_allowed_origins=("*",))


@pytest.fixture
def api_client(police_client: DummyPoliceClient, test_settings: Settings) -> TestClient:
    app = create_app(app_settings=test_settings, police_client=police_client)
    return TestClient(app)


@pytest.fixture
def failing_dates_client() -> DummyPoliceClient:
    return DummyPoliceClient(dates=UpstreamError("UK Police API error: 503 Service Unavailable", status=503))
