import pytest

from shipping_rates.exceptions import InvalidSpeedTier
from shipping_rates.services.pricing import (
    AIR,
    EXPRESS,
    LOCAL,
    ROAD,
    STANDARD,
    TRANSPORT_TIERS,
    parse_speed_tier,
    select_transport_tier,
    speed_surcharge,
)


@pytest.mark.parametrize(
    "distance, expected",
    [
        (0.0, LOCAL),
        (50.0, LOCAL),
        (99.999, LOCAL),
        (100.0, ROAD),
        (250.0, ROAD),
        (499.999, ROAD),
        (500.0, AIR),
        (2500.0, AIR),
    ],
)
def test_select_transport_tier_thresholds(distance, expected):
    assert select_transport_tier(distance) is expected


def test_tier_rates():
    assert (AIR.rate_per_km_per_kg, ROAD.rate_per_km_per_kg, LOCAL.rate_per_km_per_kg) == (1.0, 2.0, 3.0)


def test_tiers_are_ordered_by_descending_threshold():
    thresholds = [tier.min_distance_km for tier in TRANSPORT_TIERS]
    assert thresholds == sorted(thresholds, reverse=True)


def test_speed_surcharge():
    assert speed_surcharge(STANDARD, 5.0) == 10.0
    assert speed_surcharge(EXPRESS, 5.0) == pytest.approx(16.0)
    assert speed_surcharge(EXPRESS, 0.5) == pytest.approx(10.6)


@pytest.mark.parametrize("token, expected", [("STANDARD", STANDARD), ("express", EXPRESS), ("  Express ", EXPRESS)])
def test_parse_speed_tier_is_case_insensitive(token, expected):
    assert parse_speed_tier(token) is expected


@pytest.mark.parametrize("token", ["overnight", "", "   ", None])
def test_parse_speed_tier_rejects_unknown_tokens(token):
    with pytest.raises(InvalidSpeedTier) as excinfo:
        parse_speed_tier(token)
    assert excinfo.value.field == "deliverySpeed"
    assert "STANDARD, EXPRESS" in excinfo.value.message
