"""Facility resolution helpers."""

from .resolver import NearestFacility, nearest

__all__ = ["NearestFacility", "nearest"]
