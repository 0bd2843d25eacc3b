from datetime import timezone

import pytest

from pincode_validator.config import PACKAGE_DATA_DIR
from pincode_validator.data.pincode_repository import load_pincode_table
from pincode_validator.services.search import (
    get_metro_cities,
    get_tier_cities,
    search_by_city,
    search_by_state,
    validate_bulk,
)


@pytest.fixture
def table():
    return load_pincode_table(PACKAGE_DATA_DIR / "pincodes.csv")


def test_search_by_city_is_case_insensitive_substring(table):
    results = search_by_city("mumbai", table)

    assert [item.city for item in results] == ["Mumbai", "Mumbai", "Mumbai", "Navi Mumbai"]
    assert [item.pincode for item in results[:3]] == ["400001", "400050", "400070"]
    assert all(item.valid for item in results)


def test_search_by_city_trims_query(table):
    results = search_by_city("  DELHI ", table)

    assert len(results) == 6
    assert {item.city for item in results} == {"New Delhi"}


def test_search_by_city_without_match(table):
    assert search_by_city("Atlantis", table) == []


def test_search_by_state_sorted_by_city(table):
    results = search_by_state("maharashtra", table)
    cities = [item.city for item in results]

    assert cities == sorted(cities, key=str.lower)
    assert cities[0] == "Aurangabad"
    assert all(item.state == "Maharashtra" for item in results)
    assert len(results) == 8


def test_metro_cities_keep_table_order(table):
    metros = get_metro_cities(table)

    assert metros
    assert all(item.is_metro for item in metros)
    assert [item.pincode for item in metros] == [pin for pin, record in table.items() if record.is_metro]


@pytest.mark.parametrize("tier", [1, 2, 3])
def test_tier_cities_sorted_by_city(table, tier):
    results = get_tier_cities(tier, table)
    cities = [item.city for item in results]

    assert results
    assert all(item.tier == tier for item in results)
    assert cities == sorted(cities, key=str.lower)


def test_tier_cities_rejects_unknown_tier(table):
    with pytest.raises(ValueError):
        get_tier_cities(4, table)


def test_validate_bulk_resolves_each_pincode(table):
    results = validate_bulk(["110001", "400001", "000000"], table)

    assert len(results) == 3
    assert [item.valid for item in results] == [True, True, False]
    assert results[2].error == "Pincode cannot start with 0"
    for item in results:
        assert item.processing_time is not None
        assert item.processing_time.tzinfo == timezone.utc


def test_validate_bulk_isolates_failures(table):
    results = validate_bulk([110001, "abc", " 799999 "], table)

    assert results[0].city == "New Delhi"
    assert results[1].valid is False
    assert results[2].pincode == "799999"
    assert results[2].possible_states


def test_validate_bulk_results_match_single_lookup_except_timestamp(table):
    from pincode_validator.services.resolver import resolve_location

    bulk = validate_bulk(["560001"], table)[0]
    single = resolve_location("560001", table)

    assert bulk.model_dump(exclude={"processing_time"}) == single.model_dump(exclude={"processing_time"})
