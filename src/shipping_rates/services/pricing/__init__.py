"""Tiered pricing."""

from .engine import RateBreakdown, breakdown, quote, to_money
from .rate_table import (
    AIR,
    EXPRESS,
    LOCAL,
    ROAD,
    SPEED_TIERS,
    STANDARD,
    TRANSPORT_TIERS,
    SpeedTier,
    TransportTier,
    parse_speed_tier,
    select_transport_tier,
    speed_surcharge,
)

__all__ = [
    "AIR",
    "ROAD",
    "LOCAL",
    "STANDARD",
    "EXPRESS",
    "TRANSPORT_TIERS",
    "SPEED_TIERS",
    "TransportTier",
    "SpeedTier",
    "RateBreakdown",
    "select_transport_tier",
    "speed_surcharge",
    "parse_speed_tier",
    "breakdown",
    "quote",
    "to_money",
]
