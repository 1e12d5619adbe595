"""Error taxonomy for backend calls."""

from __future__ import annotations


class StorefrontError(Exception):
    """Base class for failures talking to the restaurant service."""


class CatalogLoadError(StorefrontError):
    """The restaurant list could not be fetched or parsed."""


class MenuLoadError(StorefrontError):
    """A restaurant's menu could not be fetched or parsed."""


class OrderSubmitError(StorefrontError):
    """The order service rejected the order or answered with garbage."""


class SeedError(StorefrontError):
    """Demo-data seeding failed."""
