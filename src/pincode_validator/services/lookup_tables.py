"""Static lookup tables keyed by pincode first digit, courier and tier."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from ..models.domain import Region, Zone

STATES_BY_DIGIT: Mapping[str, tuple[str, ...]] = MappingProxyType(
    {
        "1": ("Delhi", "Haryana", "Punjab", "Himachal Pradesh", "Jammu & Kashmir", "Chandigarh", "Uttarakhand"),
        "2": ("Uttar Pradesh", "Uttarakhand"),
        "3": ("Rajasthan", "Gujarat"),
        "4": ("Maharashtra", "Madhya Pradesh", "Chhattisgarh", "Goa"),
        "5": ("Andhra Pradesh", "Karnataka", "Telangana"),
        "6": ("Tamil Nadu", "Kerala", "Puducherry"),
        "7": (
            "West Bengal",
            "Odisha",
            "Assam",
            "Meghalaya",
            "Manipur",
            "Nagaland",
            "Tripura",
            "Mizoram",
            "Arunachal Pradesh",
            "Sikkim",
        ),
        "8": ("Bihar", "Jharkhand"),
        "9": ("Assam", "Manipur", "Nagaland", "Mizoram", "Arunachal Pradesh", "Meghalaya", "Tripura", "Sikkim"),
    }
)

REGION_BY_DIGIT: Mapping[str, Region] = MappingProxyType(
    {
        "1": Region.NORTH,
        "2": Region.NORTH,
        "3": Region.WEST,
        "4": Region.WEST,
        "5": Region.SOUTH,
        "6": Region.SOUTH,
        "7": Region.EAST,
        "8": Region.EAST,
        "9": Region.NORTHEAST,
    }
)

# Digit 4 is Central here even though its region is West.
ZONE_BY_DIGIT: Mapping[str, Zone] = MappingProxyType(
    {
        "1": Zone.NORTHERN,
        "2": Zone.NORTHERN,
        "3": Zone.WESTERN,
        "4": Zone.CENTRAL,
        "5": Zone.SOUTHERN,
        "6": Zone.SOUTHERN,
        "7": Zone.EASTERN,
        "8": Zone.EASTERN,
        "9": Zone.NORTHEASTERN,
    }
)

DELIVERY_DAYS_BY_REGION: Mapping[Region, int] = MappingProxyType(
    {
        Region.NORTH: 2,
        Region.SOUTH: 2,
        Region.EAST: 3,
        Region.WEST: 2,
        Region.NORTHEAST: 5,
        Region.CENTRAL: 3,
    }
)
DEFAULT_DELIVERY_DAYS = 3

COURIER_BASE_COST: Mapping[str, int] = MappingProxyType(
    {
        "FedEx": 200,
        "BlueDart": 150,
        "DHL": 180,
        "Delhivery": 80,
        "DTDC": 70,
        "Ecom": 60,
    }
)
DEFAULT_COURIER_BASE_COST = 80

TIER_COST_MULTIPLIER: Mapping[int, float] = MappingProxyType({1: 1.0, 2: 1.2, 3: 1.5})
DEFAULT_TIER_COST_MULTIPLIER = 1.5

MAX_COD_AMOUNT_BY_TIER: Mapping[int, int] = MappingProxyType({1: 50000, 2: 25000, 3: 10000})
COD_CHARGES_BY_TIER: Mapping[int, int] = MappingProxyType({1: 25, 2: 35, 3: 50})

SERVICE_LEVEL_BY_TIER: Mapping[int, str] = MappingProxyType({1: "Premium", 2: "Standard"})
DEFAULT_SERVICE_LEVEL = "Basic"

INTERNATIONAL_COURIERS = frozenset({"FedEx", "DHL", "BlueDart"})
DOMESTIC_COURIERS = frozenset({"DTDC", "Delhivery", "Ecom"})
EXPRESS_COURIERS = frozenset({"BlueDart", "FedEx"})

# Couriers assumed for a pincode that is valid but missing from the reference table.
FALLBACK_COURIERS: Mapping[Region, tuple[str, ...]] = MappingProxyType({Region.NORTHEAST: ("DTDC",)})
DEFAULT_FALLBACK_COURIERS: tuple[str, ...] = ("DTDC", "Delhivery")

DEFAULT_TIER = 3
NOT_AVAILABLE = "Not Available"


def region_for_digit(digit: str) -> Region:
    return REGION_BY_DIGIT.get(digit, Region.UNKNOWN)


def zone_for_digit(digit: str) -> Zone:
    return ZONE_BY_DIGIT.get(digit, Zone.UNKNOWN)


def delivery_days_for_region(region: Region | str) -> int:
    try:
        return DELIVERY_DAYS_BY_REGION.get(Region(region), DEFAULT_DELIVERY_DAYS)
    except ValueError:
        return DEFAULT_DELIVERY_DAYS
