"""Charge computation combining distance, weight and delivery speed."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from ...exceptions import InvalidInput
from .rate_table import SpeedTier, TransportTier, select_transport_tier, speed_surcharge

logger = logging.getLogger(__name__)

CENTS = Decimal("0.01")


@dataclass(frozen=True, slots=True)
class RateBreakdown:
    """Priced shipment.

    ``total`` is the unrounded sum rounded once, so it is always equal to
    ``quote``. The two components are rounded on their own for display and may
    differ from ``total`` by a paisa on a half-paisa tie.
    """

    transport_tier: TransportTier
    speed_tier: SpeedTier
    transport_charge: Decimal
    speed_charge: Decimal
    total: Decimal


def to_money(amount: float) -> Decimal:
    """Round to paise with ties away from zero.

    Goes through ``repr`` so that 2.675 rounds to 2.68 the way a human reads
    it rather than on its binary expansion.
    """
    return Decimal(repr(amount)).quantize(CENTS, rounding=ROUND_HALF_UP)


def _validate(distance_km: float, weight_kg: float) -> None:
    if distance_km is None or not math.isfinite(distance_km) or distance_km < 0:
        raise InvalidInput(
            f"Distance must be a non-negative number, got {distance_km}",
            field="distanceKm",
            value=distance_km,
        )
    if weight_kg is None or not math.isfinite(weight_kg) or weight_kg <= 0:
        raise InvalidInput(
            f"Weight must be greater than zero, got {weight_kg}",
            field="weightKg",
            value=weight_kg,
        )


def breakdown(distance_km: float, weight_kg: float, speed: SpeedTier) -> RateBreakdown:
    """Price a shipment and keep the transport and speed components apart."""

    _validate(distance_km, weight_kg)
    tier = select_transport_tier(distance_km)
    transport_charge = tier.charge(distance_km, weight_kg)
    speed_charge = speed_surcharge(speed, weight_kg)
    total = transport_charge + speed_charge

    logger.debug(
        f"Charge breakdown: tier={tier.code} distance={distance_km:.2f} km weight={weight_kg:.3f} kg "
        f"transport={transport_charge:.2f} speed={speed_charge:.2f} total={total:.2f}"
    )
    return RateBreakdown(
        transport_tier=tier,
        speed_tier=speed,
        transport_charge=to_money(transport_charge),
        speed_charge=to_money(speed_charge),
        total=to_money(total),
    )


def quote(distance_km: float, weight_kg: float, speed: SpeedTier) -> Decimal:
    return breakdown(distance_km, weight_kg, speed).total
