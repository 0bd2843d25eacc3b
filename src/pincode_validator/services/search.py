"""Name and classification search over the reference table, plus bulk resolution."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable, Iterable, Mapping

from ..models.domain import PincodeRecord
from ..schemas.responses import LocationDetails, ResolvedLocation
from .resolver import location_from_record, resolve_location
from .validation import PincodeInput

VALID_TIERS = (1, 2, 3)


def _by_city(locations: list[ResolvedLocation]) -> list[ResolvedLocation]:
    return sorted(locations, key=lambda item: item.city.lower())


def _matching(
    table: Mapping[str, PincodeRecord],
    predicate: Callable[[PincodeRecord], bool],
) -> list[ResolvedLocation]:
    return [location_from_record(pin, record) for pin, record in table.items() if predicate(record)]


def search_by_city(city_name: str, table: Mapping[str, PincodeRecord]) -> list[ResolvedLocation]:
    needle = city_name.strip().lower()
    return _by_city(_matching(table, lambda record: needle in record.city.lower()))


def search_by_state(state_name: str, table: Mapping[str, PincodeRecord]) -> list[ResolvedLocation]:
    needle = state_name.strip().lower()
    return _by_city(_matching(table, lambda record: needle in record.state.lower()))


def get_metro_cities(table: Mapping[str, PincodeRecord]) -> list[ResolvedLocation]:
    return _matching(table, lambda record: record.is_metro)


def get_tier_cities(tier: int, table: Mapping[str, PincodeRecord]) -> list[ResolvedLocation]:
    if tier not in VALID_TIERS:
        raise ValueError(f"tier must be one of {VALID_TIERS}, got {tier!r}")
    return _by_city(_matching(table, lambda record: record.tier == tier))


def validate_bulk(
    pincodes: Iterable[PincodeInput],
    table: Mapping[str, PincodeRecord],
) -> list[LocationDetails]:
    """Resolve each pincode independently and stamp it with its processing time."""

    results: list[LocationDetails] = []
    for pincode in pincodes:
        location = resolve_location(pincode, table)
        results.append(location.model_copy(update={"processing_time": datetime.now(timezone.utc)}))
    return results
