"""Pydantic response models returned by the pincode services."""

from __future__ import annotations

from datetime import datetime
from typing import List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ..models.domain import Region, ValidationFailure, Zone


class _Response(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class ValidationResult(_Response):
    valid: bool
    error: Optional[str] = None
    failure: Optional[ValidationFailure] = None


class Coordinates(_Response):
    latitude: float
    longitude: float


class ResolvedLocation(_Response):
    """Location for a well-formed pincode, exact or synthesized from its first digit."""

    valid: Literal[True] = True
    pincode: str
    city: str
    state: str
    region: Region
    zone: Zone
    tier: int
    is_metro: bool
    coordinates: Optional[Coordinates] = None
    courier_services: List[str] = Field(default_factory=list)
    delivery_days: Optional[int] = None
    cod_available: Optional[bool] = None
    possible_states: Optional[List[str]] = None
    estimated_delivery_days: Optional[int] = None
    message: Optional[str] = None
    processing_time: Optional[datetime] = None

    @property
    def is_synthesized(self) -> bool:
        return self.possible_states is not None


class InvalidLocation(_Response):
    """Location placeholder for input that failed the format check."""

    valid: Literal[False] = False
    pincode: str
    error: str
    city: Literal[""] = ""
    state: Literal[""] = ""
    region: Literal[""] = ""
    zone: Literal[""] = ""
    tier: int = 3
    is_metro: bool = False
    processing_time: Optional[datetime] = None


LocationDetails = Union[ResolvedLocation, InvalidLocation]


class CODResponse(_Response):
    pincode: str
    cod_available: bool
    reason: Optional[str] = None
    max_cod_amount: int
    cod_charges: Optional[int] = None


class CourierServicesResponse(_Response):
    pincode: str
    services: List[str]
    total_services: int
    delivery_days: int
    express_delivery: bool
    international_couriers: List[str]
    domestic_couriers: List[str]
    tier: int
    service_level: str


class DeliveryResponse(_Response):
    available: bool
    courier: Optional[str] = None
    delivery_days: Optional[int] = None
    estimated_cost: Optional[int] = None
    reason: Optional[str] = None
    alternatives: Optional[List[str]] = None
    services: Optional[List[str]] = None
    express_available: Optional[bool] = None
    recommended_courier: Optional[str] = None


class DistanceResponse(_Response):
    from_location: ResolvedLocation = Field(..., alias="from")
    to_location: ResolvedLocation = Field(..., alias="to")
    distance_km: int
    estimated_delivery_days: int
    estimated_shipping_cost: int
    same_city: bool
    same_state: bool
    same_region: bool
    express_delivery_available: bool
    recommended_courier: str


class NearbyPincode(_Response):
    pincode: str
    distance_km: float
    city: str
    state: str
    region: Region
    zone: Zone
    tier: int
    is_metro: bool
    latitude: float
    longitude: float
    courier_services: List[str] = Field(default_factory=list)
    delivery_days: Optional[int] = None
