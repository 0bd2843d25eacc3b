"""Object facade bundling every pincode operation over one reference table."""

from __future__ import annotations

from typing import Iterable, Mapping, Optional

from .data.pincode_repository import load_pincode_table
from .models.domain import PincodeRecord
from .schemas.responses import (
    CODResponse,
    CourierServicesResponse,
    DeliveryResponse,
    DistanceResponse,
    LocationDetails,
    NearbyPincode,
    ResolvedLocation,
    ValidationResult,
)
from .services import delivery, geospatial, search
from .services.resolver import resolve_location
from .services.validation import PincodeInput, validate_format


class IndianPincodeValidator:
    """Pincode queries against a reference table.

    Without an explicit ``table`` the configured dataset is used, loaded lazily
    so that ``set_active_pincode_file`` takes effect on the next call.
    """

    def __init__(self, table: Optional[Mapping[str, PincodeRecord]] = None) -> None:
        self._table = table

    @property
    def table(self) -> Mapping[str, PincodeRecord]:
        if self._table is not None:
            return self._table
        return load_pincode_table()

    def is_valid_format(self, pincode: PincodeInput) -> ValidationResult:
        return validate_format(pincode)

    def get_location_details(self, pincode: PincodeInput) -> LocationDetails:
        return resolve_location(pincode, self.table)

    def is_cod_available(self, pincode: PincodeInput) -> CODResponse:
        return delivery.check_cod(pincode, self.table)

    def get_courier_services(self, pincode: PincodeInput) -> CourierServicesResponse:
        return delivery.get_courier_services(pincode, self.table)

    def is_delivery_available(self, pincode: PincodeInput, courier: Optional[str] = None) -> DeliveryResponse:
        return delivery.check_delivery(pincode, self.table, courier)

    def validate_bulk(self, pincodes: Iterable[PincodeInput]) -> list[LocationDetails]:
        return search.validate_bulk(pincodes, self.table)

    def get_distance_estimate(self, from_pincode: PincodeInput, to_pincode: PincodeInput) -> DistanceResponse:
        return geospatial.estimate_distance(from_pincode, to_pincode, self.table)

    def find_nearby_pincodes(
        self,
        pincode: PincodeInput,
        radius_km: Optional[float] = None,
        limit: Optional[int] = None,
    ) -> list[NearbyPincode]:
        return geospatial.find_nearby_pincodes(pincode, self.table, radius_km=radius_km, limit=limit)

    def search_by_city(self, city_name: str) -> list[ResolvedLocation]:
        return search.search_by_city(city_name, self.table)

    def search_by_state(self, state_name: str) -> list[ResolvedLocation]:
        return search.search_by_state(state_name, self.table)

    def get_metro_cities(self) -> list[ResolvedLocation]:
        return search.get_metro_cities(self.table)

    def get_tier_cities(self, tier: int) -> list[ResolvedLocation]:
        return search.get_tier_cities(tier, self.table)
