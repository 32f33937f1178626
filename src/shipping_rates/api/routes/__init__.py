"""Route group exports."""

from . import data, health, shipping, warehouses

__all__ = ["data", "health", "shipping", "warehouses"]
