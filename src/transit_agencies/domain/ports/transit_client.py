"""Wire client port.

Implemented outside this package by the protocol-specific clients (EFA,
HAFAS, Navitia, ...). The core only forwards calls after capability checks
and passes results through unchanged.
"""

from collections.abc import Callable
from datetime import datetime
from typing import Any, Protocol

from transit_agencies.domain.models.agency_config import AgencyConfig


class TransitClient(Protocol):
    """Port for talking to an agency backend."""

    async def suggest_locations(self, constraint: str, max_locations: int = 10) -> list[dict[str, Any]]:
        """Suggest locations matching free-text input."""
        ...

    async def nearby_locations(
        self,
        latitude: float,
        longitude: float,
        max_distance: int = 0,
        max_locations: int = 0,
    ) -> list[dict[str, Any]]:
        """Find locations near a coordinate."""
        ...

    async def departures(
        self,
        station_id: str,
        time: datetime | None = None,
        max_departures: int = 10,
        equivs: bool = False,
    ) -> list[dict[str, Any]]:
        """Get departures for a station."""
        ...

    async def trips(
        self,
        origin: str,
        destination: str,
        via: str | None = None,
        time: datetime | None = None,
        departure: bool = True,
    ) -> list[dict[str, Any]]:
        """Plan trips between two locations."""
        ...


ClientFactory = Callable[[AgencyConfig], TransitClient | None]
