"""COD eligibility, courier coverage and delivery availability."""

from __future__ import annotations

import math
from typing import Mapping, Optional, Sequence

from ..models.domain import PincodeRecord, Region
from ..schemas.responses import (
    CODResponse,
    CourierServicesResponse,
    DeliveryResponse,
    LocationDetails,
    ResolvedLocation,
)
from . import lookup_tables as tables
from .resolver import resolve_location
from .validation import PincodeInput

MAX_ALTERNATIVES = 3

COD_REASON_NORTHEAST = "COD service limited in Northeast region due to connectivity issues"
COD_REASON_JAMMU_KASHMIR = "COD service limited in J&K due to security restrictions"
COD_REASON_ISLANDS = "COD not available for island territories"
COD_REASON_GENERIC = "COD not serviceable in this specific area"


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def recommend_courier(services: Sequence[str], tier: int) -> str:
    """Pick the preferred courier from ``services`` for a destination of ``tier``."""

    if "FedEx" in services and tier <= 2:
        return "FedEx"
    for courier in ("BlueDart", "Delhivery", "DTDC"):
        if courier in services:
            return courier
    return services[0] if services else tables.NOT_AVAILABLE


def shipping_cost(courier: str, tier: int) -> int:
    base = tables.COURIER_BASE_COST.get(courier, tables.DEFAULT_COURIER_BASE_COST)
    multiplier = tables.TIER_COST_MULTIPLIER.get(tier, tables.DEFAULT_TIER_COST_MULTIPLIER)
    return round_half_up(base * multiplier)


def _cod_unavailable_reason(location: ResolvedLocation) -> str:
    if location.region == Region.NORTHEAST:
        return COD_REASON_NORTHEAST
    if location.state == "Jammu & Kashmir":
        return COD_REASON_JAMMU_KASHMIR
    if location.state == "Andaman & Nicobar Islands":
        return COD_REASON_ISLANDS
    return COD_REASON_GENERIC


def check_cod(pincode: PincodeInput, table: Mapping[str, PincodeRecord]) -> CODResponse:
    location = resolve_location(pincode, table)

    if not location.valid:
        return CODResponse(
            pincode=location.pincode,
            cod_available=False,
            reason=location.error or "Invalid pincode",
            max_cod_amount=0,
            cod_charges=None,
        )

    cod_available = location.cod_available if location.cod_available is not None else True
    if not cod_available:
        return CODResponse(
            pincode=location.pincode,
            cod_available=False,
            reason=_cod_unavailable_reason(location),
            max_cod_amount=0,
            cod_charges=None,
        )

    return CODResponse(
        pincode=location.pincode,
        cod_available=True,
        reason=None,
        max_cod_amount=tables.MAX_COD_AMOUNT_BY_TIER.get(location.tier, tables.MAX_COD_AMOUNT_BY_TIER[3]),
        cod_charges=tables.COD_CHARGES_BY_TIER.get(location.tier, tables.COD_CHARGES_BY_TIER[3]),
    )


def courier_summary(location: LocationDetails) -> CourierServicesResponse:
    if not location.valid:
        return CourierServicesResponse(
            pincode=location.pincode,
            services=[],
            total_services=0,
            delivery_days=0,
            express_delivery=False,
            international_couriers=[],
            domestic_couriers=[],
            tier=tables.DEFAULT_TIER,
            service_level=tables.DEFAULT_SERVICE_LEVEL,
        )

    services = list(location.courier_services)
    delivery_days = location.delivery_days or tables.delivery_days_for_region(location.region)

    return CourierServicesResponse(
        pincode=location.pincode,
        services=services,
        total_services=len(services),
        delivery_days=delivery_days,
        express_delivery=any(name in tables.EXPRESS_COURIERS for name in services),
        international_couriers=[name for name in services if name in tables.INTERNATIONAL_COURIERS],
        domestic_couriers=[name for name in services if name in tables.DOMESTIC_COURIERS],
        tier=location.tier,
        service_level=tables.SERVICE_LEVEL_BY_TIER.get(location.tier, tables.DEFAULT_SERVICE_LEVEL),
    )


def get_courier_services(pincode: PincodeInput, table: Mapping[str, PincodeRecord]) -> CourierServicesResponse:
    return courier_summary(resolve_location(pincode, table))


def check_delivery(
    pincode: PincodeInput,
    table: Mapping[str, PincodeRecord],
    courier: Optional[str] = None,
) -> DeliveryResponse:
    """Report whether any courier, or a specific one, delivers to ``pincode``."""

    location = resolve_location(pincode, table)
    if not location.valid:
        return DeliveryResponse(available=False, courier=courier or None, reason=location.error or "Invalid pincode")

    summary = courier_summary(location)
    services = summary.services

    if not courier:
        return DeliveryResponse(
            available=bool(services),
            services=list(services),
            delivery_days=summary.delivery_days,
            express_available=summary.express_delivery,
            recommended_courier=recommend_courier(services, summary.tier),
        )

    if courier in services:
        return DeliveryResponse(
            available=True,
            courier=courier,
            delivery_days=summary.delivery_days,
            estimated_cost=shipping_cost(courier, summary.tier),
            reason=None,
            alternatives=[],
        )

    return DeliveryResponse(
        available=False,
        courier=courier,
        delivery_days=None,
        estimated_cost=None,
        reason=f"{courier} does not service this pincode",
        alternatives=list(services[:MAX_ALTERNATIVES]),
    )
