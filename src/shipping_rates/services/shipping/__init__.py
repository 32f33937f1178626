"""Shipping service exports."""

from .service import SellerShippingQuote, ShippingQuote, ShippingService

__all__ = ["ShippingService", "ShippingQuote", "SellerShippingQuote"]
