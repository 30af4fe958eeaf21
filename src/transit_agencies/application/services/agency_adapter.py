"""Agency adapter: capability-gated operations over a wire client."""

import logging
from datetime import datetime
from typing import Any

from transit_agencies.application.services.line_normalizer import normalize_line
from transit_agencies.application.services.mode_lookup import mode_of
from transit_agencies.application.services.position_normalizer import normalize_position
from transit_agencies.application.services.style_registry import style_for_line
from transit_agencies.domain.exceptions import MissingClientError, UnsupportedCapabilityError
from transit_agencies.domain.models.agency_config import AgencyConfig
from transit_agencies.domain.models.agency_id import AgencyId
from transit_agencies.domain.models.capability import Capability
from transit_agencies.domain.models.line import Line
from transit_agencies.domain.models.position import Position
from transit_agencies.domain.models.raw_line import RawLine
from transit_agencies.domain.models.style import Style
from transit_agencies.domain.models.transport_mode import TransportMode
from transit_agencies.domain.ports.transit_client import TransitClient

logger = logging.getLogger(__name__)


class AgencyAdapter:
    """Configured adapter for one agency.

    Holds no mutable state, so one instance may be shared by any number of
    concurrent callers.
    """

    def __init__(self, config: AgencyConfig, client: TransitClient | None = None) -> None:
        """Initialize with the agency configuration and an optional wire client.

        Args:
            config: Static agency configuration.
            client: Wire client used for network operations. Adapters without
                a client can still normalize raw codes.
        """
        self._config = config
        self._client = client

    @property
    def agency_id(self) -> AgencyId:
        return self._config.agency_id

    @property
    def config(self) -> AgencyConfig:
        return self._config

    @property
    def capabilities(self) -> frozenset[Capability]:
        return self._config.capabilities

    def supports(self, *capabilities: Capability) -> bool:
        """Return True if every requested capability is declared."""
        return all(capability in self._config.capabilities for capability in capabilities)

    def require(self, *capabilities: Capability) -> None:
        """Raise UnsupportedCapabilityError unless every capability is declared."""
        missing = [c for c in capabilities if c not in self._config.capabilities]
        if missing:
            logger.warning(
                f"Rejected request to {self.agency_id}: unsupported {[c.name for c in missing]}"
            )
            raise UnsupportedCapabilityError(self.agency_id, missing)

    def _client_for(self, *capabilities: Capability) -> TransitClient:
        self.require(*capabilities)
        if self._client is None:
            raise MissingClientError(self.agency_id)
        return self._client

    # Normalization

    def mode_of(self, index: int | None) -> TransportMode | None:
        return mode_of(self._config, index)

    def normalize_line(self, raw: RawLine) -> Line:
        return normalize_line(self._config, raw)

    def normalize_position(self, raw: str | None) -> Position | None:
        return normalize_position(self._config, raw)

    def style_for(self, line: Line) -> Style:
        return style_for_line(self._config, line)

    # Network operations

    async def suggest_locations(self, constraint: str, max_locations: int = 10) -> list[dict[str, Any]]:
        """Suggest locations for free-text input."""
        client = self._client_for(Capability.SUGGEST_LOCATIONS)
        return await client.suggest_locations(constraint, max_locations)

    async def nearby_locations(
        self,
        latitude: float,
        longitude: float,
        max_distance: int = 0,
        max_locations: int = 0,
    ) -> list[dict[str, Any]]:
        """Find locations near a coordinate."""
        client = self._client_for(Capability.NEARBY_LOCATIONS)
        return await client.nearby_locations(latitude, longitude, max_distance, max_locations)

    async def departures(
        self,
        station_id: str,
        time: datetime | None = None,
        max_departures: int = 10,
        equivs: bool = False,
    ) -> list[dict[str, Any]]:
        """Get departures for a station."""
        client = self._client_for(Capability.DEPARTURES)
        return await client.departures(station_id, time, max_departures, equivs)

    async def trips(
        self,
        origin: str,
        destination: str,
        via: str | None = None,
        time: datetime | None = None,
        departure: bool = True,
    ) -> list[dict[str, Any]]:
        """Plan trips; routing via an intermediate location also needs TRIPS_VIA."""
        required = (Capability.TRIPS, Capability.TRIPS_VIA) if via else (Capability.TRIPS,)
        client = self._client_for(*required)
        return await client.trips(origin, destination, via, time, departure)

    def __repr__(self) -> str:
        return f"AgencyAdapter({self.agency_id})"
