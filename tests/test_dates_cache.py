import threading

import pytest

from crimespotter.services.police import DatesCache, UpstreamError, UpstreamTimeout

from conftest import DummyPoliceClient, FakeClock


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


def test_first_call_fetches_and_caches(clock):
    client = DummyPoliceClient(dates=[{"date": "2025-08"}, {"date": "2025-07"}])
    cache = DatesCache(client, ttl=3600, fallback_date="2025-06", clock=clock)

    assert cache.resolve_latest_date() == "2025-08"
    assert client.dates_calls == 1
    entry = cache.peek()
    assert entry is not None
    assert entry.value == "2025-08"
    assert entry.fetched_at == clock.now


def test_call_within_ttl_does_not_refetch(clock):
    client = DummyPoliceClient()
    cache = DatesCache(client, ttl=3600, clock=clock)

    cache.resolve_latest_date()
    clock.advance(3599)
    cache.resolve_latest_date()

    assert client.dates_calls == 1


def test_call_after_ttl_triggers_exactly_one_refetch(clock):
    client = DummyPoliceClient(dates=[{"date": "2025-08"}])
    cache = DatesCache(client, ttl=3600, clock=clock)
    cache.resolve_latest_date()

    client.dates = [{"date": "2025-09"}]
    clock.advance(3600)

    assert cache.resolve_latest_date() == "2025-09"
    assert cache.resolve_latest_date() == "2025-09"
    assert client.dates_calls == 2


def test_failure_without_cached_value_returns_fallback(clock):
    client = DummyPoliceClient(dates=UpstreamError("UK Police API error: 500 Internal Server Error", status=500))
    cache = DatesCache(client, ttl=3600, fallback_date="2025-06", clock=clock)

    assert cache.resolve_latest_date() == "2025-06"
    assert cache.peek() is None


def test_failure_after_expiry_keeps_stale_entry_untouched(clock):
    client = DummyPoliceClient(dates=[{"date": "2025-08"}])
    cache = DatesCache(client, ttl=60, fallback_date="2025-06", clock=clock)
    cache.resolve_latest_date()
    stale = cache.peek()

    client.dates = UpstreamTimeout("UK Police API timeout after 10s: /crimes-street-dates")
    clock.advance(120)

    assert cache.resolve_latest_date() == "2025-06"
    assert cache.peek() is stale
    # the miss is retried on every call while upstream stays down
    cache.resolve_latest_date()
    assert client.dates_calls == 3


def test_refresh_propagates_upstream_errors(clock):
    client = DummyPoliceClient(dates=UpstreamError("boom"))
    cache = DatesCache(client, clock=clock)

    with pytest.raises(UpstreamError):
        cache.refresh()


def test_empty_dates_list_caches_fallback(clock):
    client = DummyPoliceClient(dates=[])
    cache = DatesCache(client, ttl=3600, fallback_date="2025-06", clock=clock)

    assert cache.resolve_latest_date() == "2025-06"
    assert cache.resolve_latest_date() == "2025-06"
    assert client.dates_calls == 1


def test_concurrent_misses_refresh_once(clock):
    release = threading.Event()

    class SlowClient(DummyPoliceClient):
        def fetch_dates(self):
            release.wait(timeout=5)
            return super().fetch_dates()

    client = SlowClient(dates=[{"date": "2025-08"}])
    cache = DatesCache(client, ttl=3600, clock=clock)
    results: list[str] = []

    threads = [threading.Thread(target=lambda: results.append(cache.resolve_latest_date())) for _ in range(5)]
    for thread in threads:
        thread.start()
    release.set()
    for thread in threads:
        thread.join(timeout=5)

    assert results == ["2025-08"] * 5
    assert client.dates_calls == 1


@pytest.mark.parametrize("dates", [["2025-08"], [None], [{"date": 202508}], [{"stop-and-search": []}]])
def test_malformed_first_entry_falls_back_without_raising(clock, dates):
    client = DummyPoliceClient(dates=dates)
    cache = DatesCache(client, ttl=3600, fallback_date="2025-06", clock=clock)

    assert cache.resolve_latest_date() == "2025-06"
    assert cache.peek().value == "2025-06"
