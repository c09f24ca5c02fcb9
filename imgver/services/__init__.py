"""Application services."""

from .discover import DiscoverRequest, DiscoverService

__all__ = ["DiscoverRequest", "DiscoverService"]
