import math
from types import MappingProxyType

import pytest

from pincode_validator.config import PACKAGE_DATA_DIR
from pincode_validator.data.pincode_repository import load_pincode_table
from pincode_validator.errors import InvalidPincodeError
from pincode_validator.models.domain import PincodeRecord, Region, Zone
from pincode_validator.services.geospatial import estimate_distance, find_nearby_pincodes, haversine_km


def _record(city: str, state: str, region: Region = Region.NORTH, **overrides) -> PincodeRecord:
    values = dict(
        city=city,
        state=state,
        region=region,
        zone=Zone.NORTHERN,
        tier=2,
        is_metro=False,
        latitude=None,
        longitude=None,
        courier_services=("DTDC", "Delhivery"),
    )
    values.update(overrides)
    return PincodeRecord(**values)


@pytest.fixture
def table():
    return load_pincode_table(PACKAGE_DATA_DIR / "pincodes.csv")


def test_haversine_one_degree_on_equator():
    assert haversine_km(0.0, 0.0, 0.0, 1.0) == pytest.approx(6371.0 * math.pi / 180, rel=1e-12)


def test_haversine_is_symmetric_and_zero_for_same_point():
    assert haversine_km(28.6328, 77.2197, 28.6328, 77.2197) == 0.0
    forward = haversine_km(28.6328, 77.2197, 18.9388, 72.8354)
    backward = haversine_km(18.9388, 72.8354, 28.6328, 77.2197)
    assert forward == pytest.approx(backward)
    assert 1150 < forward < 1180


def test_find_nearby_pincodes_within_radius(table):
    nearby = find_nearby_pincodes("110001", table, radius_km=50)
    pins = [item.pincode for item in nearby]

    assert "110001" not in pins
    assert {"110002", "110005", "110011", "122001", "201301"} <= set(pins)
    assert "250001" not in pins
    assert len(nearby) <= 20
    assert all(item.distance_km <= 50 for item in nearby)
    distances = [item.distance_km for item in nearby]
    assert distances == sorted(distances)


def test_find_nearby_rounds_to_one_decimal(table):
    nearby = find_nearby_pincodes("110001", table, radius_km=5)

    assert {item.pincode for item in nearby} == {"110002", "110005", "110011"}
    for item in nearby:
        assert item.distance_km == round(item.distance_km, 1)
        assert item.city == "New Delhi"


def test_find_nearby_caps_results():
    records = {
        f"5600{index:02d}": _record("Bangalore", "Karnataka", latitude=12.97 + index * 0.001, longitude=77.59)
        for index in range(1, 31)
    }
    nearby = find_nearby_pincodes("560001", MappingProxyType(records), radius_km=50)

    assert len(nearby) == 20
    assert nearby[0].pincode == "560002"
    assert nearby[0].distance_km == 0.1


def test_find_nearby_without_origin_coordinates(table):
    assert find_nearby_pincodes("403507", table) == []
    assert find_nearby_pincodes("799999", table) == []
    assert find_nearby_pincodes("12345", table) == []


def test_find_nearby_rejects_negative_radius(table):
    with pytest.raises(ValueError):
        find_nearby_pincodes("110001", table, radius_km=-1)


def test_distance_between_metros(table):
    estimate = estimate_distance("110001", "400001", table)

    assert estimate.distance_km > 1000
    assert estimate.same_city is False
    assert estimate.same_state is False
    assert estimate.same_region is False
    assert estimate.estimated_delivery_days == 5
    assert estimate.estimated_shipping_cost == 150
    assert estimate.express_delivery_available is False
    assert estimate.recommended_courier == "FedEx"
    assert estimate.from_location.city == "New Delhi"
    assert estimate.to_location.city == "Mumbai"


def test_distance_within_same_city(table):
    estimate = estimate_distance("400001", "400050", table)

    assert estimate.same_city is True
    assert estimate.estimated_delivery_days == 1
    assert estimate.estimated_shipping_cost == 40
    assert estimate.express_delivery_available is True


def test_same_city_estimate_ignores_coordinates():
    records = MappingProxyType(
        {
            "110001": _record("Delhi", "Delhi", tier=1, latitude=28.6, longitude=77.2),
            "110002": _record("Delhi", "Delhi", tier=1, latitude=10.0, longitude=70.0),
            "110003": _record("Delhi", "Delhi", tier=1),
        }
    )

    far = estimate_distance("110001", "110002", records)
    unknown = estimate_distance("110001", "110003", records)

    assert (far.estimated_delivery_days, far.estimated_shipping_cost) == (1, 40)
    assert (unknown.estimated_delivery_days, unknown.estimated_shipping_cost) == (1, 40)
    assert unknown.distance_km == 0


@pytest.mark.parametrize(
    "second_city, second_state, base_days, base_cost",
    [("Agra", "UP", 2, 70), ("Jaipur", "Rajasthan", 3, 100)],
)
def test_northeast_adds_two_days_and_fifty(second_city, second_state, base_days, base_cost):
    plain = MappingProxyType(
        {
            "210001": _record("Lucknow", "UP"),
            "210002": _record(second_city, second_state),
        }
    )
    northeast = MappingProxyType(
        {
            "210001": _record("Lucknow", "UP", region=Region.NORTHEAST),
            "210002": _record(second_city, second_state, region=Region.NORTHEAST),
        }
    )

    base = estimate_distance("210001", "210002", plain)
    remote = estimate_distance("210001", "210002", northeast)

    assert (base.estimated_delivery_days, base.estimated_shipping_cost) == (base_days, base_cost)
    assert remote.estimated_delivery_days == base.estimated_delivery_days + 2
    assert remote.estimated_shipping_cost == base.estimated_shipping_cost + 50


def test_tier3_and_northeast_surcharges_accumulate(table):
    estimate = estimate_distance("110001", "795001", table)

    assert estimate.estimated_delivery_days == 5 + 1 + 2
    assert estimate.estimated_shipping_cost == 150 + 30 + 50
    assert estimate.express_delivery_available is False
    assert estimate.recommended_courier == "BlueDart"


def test_recommended_courier_uses_union_of_services():
    records = MappingProxyType(
        {
            "310001": _record("A", "S1", tier=1, courier_services=("Ecom",)),
            "320001": _record("B", "S2", tier=1, courier_services=("Ecom", "FedEx")),
        }
    )

    assert estimate_distance("310001", "320001", records).recommended_courier == "FedEx"


def test_distance_with_invalid_pincode_raises(table):
    with pytest.raises(InvalidPincodeError) as excinfo:
        estimate_distance("123", "110001", table)

    assert excinfo.value.pincodes == ("123",)
    assert "got 3" in str(excinfo.value)
    assert isinstance(excinfo.value, ValueError)


def test_distance_with_both_sides_invalid(table):
    with pytest.raises(InvalidPincodeError) as excinfo:
        estimate_distance("123", "456", table)

    assert excinfo.value.pincodes == ("123", "456")
