"""Ports (interfaces) for the ports-and-adapters architecture."""

from transit_agencies.domain.ports.transit_client import ClientFactory, TransitClient

__all__ = [
    "ClientFactory",
    "TransitClient",
]
