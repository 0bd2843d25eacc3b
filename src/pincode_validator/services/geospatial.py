"""Geospatial helpers: great-circle distance, nearby search and shipping estimates."""

from __future__ import annotations

import logging
import math
from typing import Mapping, Optional

from ..config import settings
from ..errors import InvalidPincodeError
from ..models.domain import PincodeRecord, Region
from ..schemas.responses import DistanceResponse, NearbyPincode, ResolvedLocation
from . import lookup_tables as tables
from .delivery import recommend_courier, round_half_up
from .resolver import resolve_location
from .validation import PincodeInput, normalize_pincode

EARTH_RADIUS_KM = 6371.0

# (days, cost) by locality level, most local first.
SAME_CITY_ESTIMATE = (1, 40)
SAME_STATE_ESTIMATE = (2, 70)
SAME_REGION_ESTIMATE = (3, 100)
NATIONAL_ESTIMATE = (5, 150)
TIER3_SURCHARGE = (1, 30)
NORTHEAST_SURCHARGE = (2, 50)
EXPRESS_MAX_DAYS = 2


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Compute distance between two coordinates using the Haversine formula."""

    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lon2 - lon1)

    a = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def find_nearby_pincodes(
    pincode: PincodeInput,
    table: Mapping[str, PincodeRecord],
    radius_km: Optional[float] = None,
    limit: Optional[int] = None,
) -> list[NearbyPincode]:
    """Return known pincodes within ``radius_km`` of ``pincode``, nearest first."""

    radius_km = settings.nearby_radius_km if radius_km is None else radius_km
    limit = settings.nearby_max_results if limit is None else limit
    if radius_km < 0:
        raise ValueError("radius_km must be >= 0")

    origin = resolve_location(pincode, table)
    if not origin.valid or origin.coordinates is None:
        return []

    origin_pin = normalize_pincode(pincode)
    center_lat, center_lon = origin.coordinates.latitude, origin.coordinates.longitude

    nearby: list[NearbyPincode] = []
    for pin, record in table.items():
        if pin == origin_pin or record.coordinates is None:
            continue
        lat, lon = record.coordinates
        distance = haversine_km(center_lat, center_lon, lat, lon)
        if distance > radius_km:
            continue
        nearby.append(
            NearbyPincode(
                pincode=pin,
                distance_km=math.floor(distance * 10 + 0.5) / 10,
                city=record.city,
                state=record.state,
                region=record.region,
                zone=record.zone,
                tier=record.tier,
                is_metro=record.is_metro,
                latitude=lat,
                longitude=lon,
                courier_services=list(record.courier_services),
                delivery_days=record.delivery_days,
            )
        )

    nearby.sort(key=lambda item: item.distance_km)
    return nearby[: max(limit, 0)]


def _locality_estimate(same_city: bool, same_state: bool, same_region: bool) -> tuple[int, int]:
    if same_city:
        return SAME_CITY_ESTIMATE
    if same_state:
        return SAME_STATE_ESTIMATE
    if same_region:
        return SAME_REGION_ESTIMATE
    return NATIONAL_ESTIMATE


def _distance_between(origin: ResolvedLocation, destination: ResolvedLocation) -> float:
    if origin.coordinates is None or destination.coordinates is None:
        return 0.0
    return haversine_km(
        origin.coordinates.latitude,
        origin.coordinates.longitude,
        destination.coordinates.latitude,
        destination.coordinates.longitude,
    )


def estimate_distance(
    from_pincode: PincodeInput,
    to_pincode: PincodeInput,
    table: Mapping[str, PincodeRecord],
) -> DistanceResponse:
    """Estimate distance, transit days and shipping cost between two pincodes.

    Raises InvalidPincodeError when either side fails format validation.
    """

    origin = resolve_location(from_pincode, table)
    destination = resolve_location(to_pincode, table)

    invalid = [location for location in (origin, destination) if not location.valid]
    if invalid:
        logging.warning(f"Rejected distance estimate {origin.pincode!r} -> {destination.pincode!r}")
        raise InvalidPincodeError(
            [location.pincode for location in invalid],
            [location.error for location in invalid],
        )

    same_city = origin.city == destination.city
    same_state = origin.state == destination.state
    same_region = origin.region == destination.region

    days, cost = _locality_estimate(same_city, same_state, same_region)
    if origin.tier == 3 or destination.tier == 3:
        days += TIER3_SURCHARGE[0]
        cost += TIER3_SURCHARGE[1]
    if Region.NORTHEAST in (origin.region, destination.region):
        days += NORTHEAST_SURCHARGE[0]
        cost += NORTHEAST_SURCHARGE[1]

    combined_services = list(dict.fromkeys([*origin.courier_services, *destination.courier_services]))
    worst_tier = max(origin.tier or tables.DEFAULT_TIER, destination.tier or tables.DEFAULT_TIER)

    return DistanceResponse(
        from_location=origin,
        to_location=destination,
        distance_km=round_half_up(_distance_between(origin, destination)),
        estimated_delivery_days=days,
        estimated_shipping_cost=cost,
        same_city=same_city,
        same_state=same_state,
        same_region=same_region,
        express_delivery_available=days <= EXPRESS_MAX_DAYS and origin.tier <= 2 and destination.tier <= 2,
        recommended_courier=recommend_courier(combined_services, worst_tier),
    )
