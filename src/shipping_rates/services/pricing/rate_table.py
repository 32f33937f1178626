"""Static rate tables: transport mode by distance and delivery speed surcharges."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ...exceptions import InvalidSpeedTier


@dataclass(frozen=True, slots=True)
class TransportTier:
    code: str
    display_name: str
    rate_per_km_per_kg: float
    min_distance_km: float

    def charge(self, distance_km: float, weight_kg: float) -> float:
        return self.rate_per_km_per_kg * distance_km * weight_kg


@dataclass(frozen=True, slots=True)
class SpeedTier:
    code: str
    display_name: str
    base_charge: float
    extra_per_kg: float
    description: str


AIR = TransportTier("AIR", "Aeroplane", rate_per_km_per_kg=1.0, min_distance_km=500.0)
ROAD = TransportTier("ROAD", "Truck", rate_per_km_per_kg=2.0, min_distance_km=100.0)
LOCAL = TransportTier("LOCAL", "Mini Van", rate_per_km_per_kg=3.0, min_distance_km=0.0)

# Largest threshold first; the first tier whose threshold is reached wins.
TRANSPORT_TIERS: tuple[TransportTier, ...] = (AIR, ROAD, LOCAL)

STANDARD = SpeedTier("STANDARD", "Standard", 10.0, 0.0, "Regular delivery (3-5 business days)")
EXPRESS = SpeedTier("EXPRESS", "Express", 10.0, 1.2, "Priority delivery (1-2 business days)")

SPEED_TIERS: dict[str, SpeedTier] = {tier.code: tier for tier in (STANDARD, EXPRESS)}


def select_transport_tier(distance_km: float) -> TransportTier:
    """Pick the carrier class for a distance; boundary values belong to the higher tier."""

    for tier in TRANSPORT_TIERS:
        if distance_km >= tier.min_distance_km:
            return tier
    # Only reachable for negative distances, which pricing rejects earlier.
    return TRANSPORT_TIERS[-1]


def speed_surcharge(tier: SpeedTier, weight_kg: float) -> float:
    return tier.base_charge + tier.extra_per_kg * weight_kg


def parse_speed_tier(token: Optional[str]) -> SpeedTier:
    """Parse a delivery speed token case-insensitively."""

    valid = ", ".join(SPEED_TIERS)
    if token is None or not str(token).strip():
        raise InvalidSpeedTier(
            f"Delivery speed cannot be empty. Valid values: {valid}",
            field="deliverySpeed",
            value=token,
        )
    tier = SPEED_TIERS.get(str(token).strip().upper())
    if tier is None:
        raise InvalidSpeedTier(
            f"Invalid delivery speed: '{token}'. Valid values: {valid}",
            field="deliverySpeed",
            value=token,
        )
    return tier
