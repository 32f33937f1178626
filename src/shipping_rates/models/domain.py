"""Domain models for warehouses, marketplace parties and products."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True, slots=True)
class Coordinate:
    """A point on the Earth's surface in decimal degrees."""

    latitude: float
    longitude: float


@dataclass(slots=True)
class Warehouse:
    """A fulfillment node that sellers drop parcels at."""

    id: int
    code: str
    name: str
    location: Optional[Coordinate]
    city: Optional[str] = None
    state: Optional[str] = None
    is_active: bool = True


@dataclass(slots=True)
class Seller:
    id: int
    seller_code: str
    name: str
    location: Optional[Coordinate]
    city: Optional[str] = None
    state: Optional[str] = None
    is_active: bool = True


@dataclass(slots=True)
class Customer:
    id: int
    customer_code: str
    name: str
    location: Optional[Coordinate]
    city: Optional[str] = None
    state: Optional[str] = None
    is_active: bool = True


@dataclass(frozen=True, slots=True)
class Dimensions:
    length_cm: float
    width_cm: float
    height_cm: float

    def volumetric_weight_kg(self, divisor: float = 5000.0) -> float:
        return (self.length_cm * self.width_cm * self.height_cm) / divisor


@dataclass(slots=True)
class Product:
    """A catalogue item with the physical attributes used for pricing."""

    id: int
    product_code: str
    name: str
    weight_kg: float
    dimensions: Optional[Dimensions] = None
    category: Optional[str] = None
    is_active: bool = True

    def chargeable_weight(self, divisor: float = 5000.0) -> float:
        """Greater of actual and volumetric weight; actual weight when dimensions are unknown."""
        if self.dimensions is None:
            return self.weight_kg
        return max(self.weight_kg, self.dimensions.volumetric_weight_kg(divisor))
