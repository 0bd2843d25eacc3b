"""Domain models for pincode reference records."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class Region(str, Enum):
    NORTH = "North"
    SOUTH = "South"
    EAST = "East"
    WEST = "West"
    NORTHEAST = "Northeast"
    CENTRAL = "Central"
    UNKNOWN = "Unknown"


class Zone(str, Enum):
    NORTHERN = "Northern"
    SOUTHERN = "Southern"
    EASTERN = "Eastern"
    WESTERN = "Western"
    CENTRAL = "Central"
    NORTHEASTERN = "Northeastern"
    UNKNOWN = "Unknown"


@dataclass(slots=True, frozen=True)
class PincodeRecord:
    """Represents one known pincode from the reference table."""

    city: str
    state: str
    region: Region
    zone: Zone
    tier: int
    is_metro: bool
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    courier_services: tuple[str, ...] = field(default_factory=tuple)
    delivery_days: Optional[int] = None
    cod_available: Optional[bool] = None

    def __post_init__(self) -> None:
        if self.tier not in (1, 2, 3):
            raise ValueError(f"tier must be 1, 2 or 3, got {self.tier!r}")

    @property
    def coordinates(self) -> Optional[tuple[float, float]]:
        """Return (latitude, longitude) only when both values are present."""
        if self.latitude is None or self.longitude is None:
            return None
        return (self.latitude, self.longitude)


class ValidationFailure(str, Enum):
    """Reason a pincode failed the format check, in evaluation order."""

    EMPTY_INPUT = "EmptyInput"
    NON_NUMERIC = "NonNumeric"
    WRONG_LENGTH = "WrongLength"
    LEADING_ZERO = "LeadingZero"
    UNKNOWN_REGION_DIGIT = "UnknownRegionDigit"
