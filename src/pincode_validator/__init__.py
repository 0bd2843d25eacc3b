"""Indian pincode validation and delivery estimates over a static reference table."""

from __future__ import annotations

from typing import Iterable, Optional

from .data.pincode_repository import load_pincode_table, set_active_pincode_file
from .errors import InvalidPincodeError
from .models.domain import PincodeRecord, Region, ValidationFailure, Zone
from .schemas.responses import (
    CODResponse,
    Coordinates,
    CourierServicesResponse,
    DeliveryResponse,
    DistanceResponse,
    InvalidLocation,
    LocationDetails,
    NearbyPincode,
    ResolvedLocation,
    ValidationResult,
)
from .services.geospatial import haversine_km
from .services.validation import PincodeInput
from .validator import IndianPincodeValidator

default_validator = IndianPincodeValidator()


def validate(pincode: PincodeInput) -> ValidationResult:
    return default_validator.is_valid_format(pincode)


def get_details(pincode: PincodeInput) -> LocationDetails:
    return default_validator.get_location_details(pincode)


def check_cod(pincode: PincodeInput) -> CODResponse:
    return default_validator.is_cod_available(pincode)


def get_couriers(pincode: PincodeInput) -> CourierServicesResponse:
    return default_validator.get_courier_services(pincode)


def check_delivery(pincode: PincodeInput, courier: Optional[str] = None) -> DeliveryResponse:
    return default_validator.is_delivery_available(pincode, courier)


def validate_multiple(pincodes: Iterable[PincodeInput]) -> list[LocationDetails]:
    return default_validator.validate_bulk(pincodes)


def get_distance(from_pincode: PincodeInput, to_pincode: PincodeInput) -> DistanceResponse:
    """Raises InvalidPincodeError if either pincode is malformed."""
    return default_validator.get_distance_estimate(from_pincode, to_pincode)


def find_nearby_pincodes(pincode: PincodeInput, radius_km: Optional[float] = None) -> list[NearbyPincode]:
    return default_validator.find_nearby_pincodes(pincode, radius_km)


def search_by_city(city_name: str) -> list[ResolvedLocation]:
    return default_validator.search_by_city(city_name)


def search_by_state(state_name: str) -> list[ResolvedLocation]:
    return default_validator.search_by_state(state_name)


def get_metro_cities() -> list[ResolvedLocation]:
    return default_validator.get_metro_cities()


def get_tier_cities(tier: int) -> list[ResolvedLocation]:
    return default_validator.get_tier_cities(tier)


__all__ = [
    "CODResponse",
    "Coordinates",
    "CourierServicesResponse",
    "DeliveryResponse",
    "DistanceResponse",
    "IndianPincodeValidator",
    "InvalidLocation",
    "InvalidPincodeError",
    "LocationDetails",
    "NearbyPincode",
    "PincodeRecord",
    "Region",
    "ResolvedLocation",
    "ValidationFailure",
    "ValidationResult",
    "Zone",
    "check_cod",
    "check_delivery",
    "find_nearby_pincodes",
    "get_couriers",
    "get_details",
    "get_distance",
    "get_metro_cities",
    "get_tier_cities",
    "haversine_km",
    "load_pincode_table",
    "search_by_city",
    "search_by_state",
    "set_active_pincode_file",
    "validate",
    "validate_multiple",
    "default_validator",
]
