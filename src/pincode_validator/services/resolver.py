"""Resolve a pincode to its reference record or a first-digit approximation."""

from __future__ import annotations

import logging
from typing import Mapping

from ..models.domain import PincodeRecord, Region
from ..schemas.responses import Coordinates, InvalidLocation, LocationDetails, ResolvedLocation
from . import lookup_tables as tables
from .validation import PincodeInput, normalize_pincode, validate_format

APPROXIMATE_LOCATION_MESSAGE = "Exact location data not available in database, but pincode format is valid"


def location_from_record(pincode: str, record: PincodeRecord) -> ResolvedLocation:
    """Build the exact location for a pincode present in the reference table."""

    coordinates = None
    if record.coordinates is not None:
        latitude, longitude = record.coordinates
        coordinates = Coordinates(latitude=latitude, longitude=longitude)

    return ResolvedLocation(
        pincode=pincode,
        city=record.city,
        state=record.state,
        region=record.region,
        zone=record.zone,
        tier=record.tier,
        is_metro=record.is_metro,
        coordinates=coordinates,
        courier_services=list(record.courier_services),
        delivery_days=record.delivery_days,
        cod_available=record.cod_available,
    )


def synthesize_location(pincode: str) -> ResolvedLocation:
    """Approximate a location for a well-formed pincode missing from the table."""

    first_digit = pincode[0]
    region = tables.region_for_digit(first_digit)
    return ResolvedLocation(
        pincode=pincode,
        city="",
        state="",
        region=region,
        zone=tables.zone_for_digit(first_digit),
        tier=tables.DEFAULT_TIER,
        is_metro=False,
        possible_states=list(tables.STATES_BY_DIGIT.get(first_digit, ())),
        estimated_delivery_days=tables.delivery_days_for_region(region),
        message=APPROXIMATE_LOCATION_MESSAGE,
        cod_available=region != Region.NORTHEAST,
        courier_services=list(tables.FALLBACK_COURIERS.get(region, tables.DEFAULT_FALLBACK_COURIERS)),
    )


def resolve_location(pincode: PincodeInput, table: Mapping[str, PincodeRecord]) -> LocationDetails:
    value = normalize_pincode(pincode)
    validation = validate_format(value)
    if not validation.valid:
        return InvalidLocation(pincode=value, error=validation.error or "Invalid pincode")

    record = table.get(value)
    if record is not None:
        return location_from_record(value, record)

    logging.debug(f"Pincode {value} not in reference table, synthesizing from first digit")
    return synthesize_location(value)
