from crimespotter.models.domain import BoundingBox
from crimespotter.services.crimes.aggregation import calculate_bounds, count_categories

from conftest import crime


def test_count_categories_defaults_missing_to_unknown():
    crimes = [{"category": "burglary"}, {"category": "burglary"}, {}]

    assert count_categories(crimes) == {"burglary": 2, "unknown": 1}


def test_count_categories_treats_empty_category_as_unknown():
    assert count_categories([{"category": ""}, {"category": None}]) == {"unknown": 2}


def test_count_categories_empty_list():
    assert count_categories([]) == {}


def test_calculate_bounds_min_max():
    crimes = [crime("burglary", "51.0", "-1.0"), crime("robbery", "52.0", "-2.0")]

    assert calculate_bounds(crimes) == BoundingBox(north=52.0, south=51.0, east=-1.0, west=-2.0)


def test_calculate_bounds_single_point():
    bounds = calculate_bounds([crime("drugs", "53.4808", "-2.2426")])

    assert bounds == BoundingBox(north=53.4808, south=53.4808, east=-2.2426, west=-2.2426)


def test_calculate_bounds_skips_records_without_usable_coordinates():
    crimes = [
        crime("burglary"),
        {"category": "robbery", "location": {"latitude": "abc", "longitude": "-1.0"}},
        {"category": "robbery", "location": None},
        crime("theft-from-the-person", "50.5", "-3.5"),
    ]

    assert calculate_bounds(crimes) == BoundingBox(north=50.5, south=50.5, east=-3.5, west=-3.5)


def test_calculate_bounds_none_when_no_coordinates():
    assert calculate_bounds([]) is None
    assert calculate_bounds([crime("burglary"), {}]) is None
