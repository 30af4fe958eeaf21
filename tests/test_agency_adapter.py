"""Tests for capability negotiation in the agency adapter."""

from unittest.mock import AsyncMock

import pytest

from transit_agencies.adapters.agencies.efa import TFI, TLEM
from transit_agencies.application.services import AgencyAdapter
from transit_agencies.domain.exceptions import (
    ConfigurationError,
    MissingClientError,
    UnsupportedCapabilityError,
)
from transit_agencies.domain.models import (
    AgencyConfig,
    AgencyId,
    Capability,
    Line,
    Position,
    RawLine,
    TransportMode,
)


@pytest.fixture
def departures_only_config() -> AgencyConfig:
    """Agency that can search locations and show departures, but not plan trips."""
    return AgencyConfig(
        agency_id=AgencyId.SEPTA,
        region="septa",
        timezone="America/New_York",
        language="en",
        capabilities={Capability.SUGGEST_LOCATIONS, Capability.DEPARTURES},
    )


@pytest.fixture
def client() -> AsyncMock:
    """Wire client double returning canned results."""
    mock = AsyncMock()
    mock.suggest_locations.return_value = [{"id": "1", "name": "Suburban Station"}]
    mock.departures.return_value = [{"line": "AIR"}]
    mock.trips.return_value = [{"legs": []}]
    mock.nearby_locations.return_value = []
    return mock


class TestSupports:
    """Tests for AgencyAdapter.supports."""

    def test_tlem_cannot_search_nearby_or_route_via(self) -> None:
        """Given the TLEM catalog row, when asking, then only search, departures and trips are supported."""
        adapter = AgencyAdapter(TLEM)

        assert adapter.supports(
            Capability.SUGGEST_LOCATIONS, Capability.DEPARTURES, Capability.TRIPS
        )
        assert not adapter.supports(Capability.NEARBY_LOCATIONS)
        assert not adapter.supports(Capability.TRIPS_VIA)

    def test_declared_capability(self, departures_only_config: AgencyConfig) -> None:
        """Given a declared capability, when asking, then it is supported."""
        adapter = AgencyAdapter(departures_only_config)

        assert adapter.supports(Capability.DEPARTURES)

    def test_all_requested_must_be_declared(self, departures_only_config: AgencyConfig) -> None:
        """Given one undeclared capability among several, when asking, then it is not supported."""
        adapter = AgencyAdapter(departures_only_config)

        assert not adapter.supports(Capability.DEPARTURES, Capability.TRIPS)
        assert adapter.supports(Capability.DEPARTURES, Capability.SUGGEST_LOCATIONS)

    def test_empty_request_is_supported(self, departures_only_config: AgencyConfig) -> None:
        """Given no capabilities, when asking, then the answer is True."""
        assert AgencyAdapter(departures_only_config).supports()

    def test_capabilities_are_fixed(self, departures_only_config: AgencyConfig) -> None:
        """Given an adapter, when reading capabilities, then an immutable set is returned."""
        capabilities = AgencyAdapter(departures_only_config).capabilities

        assert isinstance(capabilities, frozenset)


class TestNetworkOperations:
    """Tests for capability-gated network operations."""

    @pytest.mark.asyncio
    async def test_unsupported_trips_rejected_before_network(
        self, departures_only_config: AgencyConfig, client: AsyncMock
    ) -> None:
        """Given an agency without TRIPS, when planning a trip, then the client is never called."""
        adapter = AgencyAdapter(departures_only_config, client)

        with pytest.raises(UnsupportedCapabilityError) as exc_info:
            await adapter.trips("A", "B")

        assert exc_info.value.capabilities == (Capability.TRIPS,)
        assert exc_info.value.agency_id == AgencyId.SEPTA
        client.trips.assert_not_called()
        client.assert_not_called()

    @pytest.mark.asyncio
    async def test_supported_operation_passes_results_through(
        self, departures_only_config: AgencyConfig, client: AsyncMock
    ) -> None:
        """Given a supported operation, when called, then the client's result is returned unchanged."""
        adapter = AgencyAdapter(departures_only_config, client)

        result = await adapter.departures("10264", max_departures=5)

        assert result == [{"line": "AIR"}]
        client.departures.assert_awaited_once_with("10264", None, 5, False)

    @pytest.mark.asyncio
    async def test_suggest_locations(
        self, departures_only_config: AgencyConfig, client: AsyncMock
    ) -> None:
        """Given free text, when suggesting locations, then the client is asked."""
        adapter = AgencyAdapter(departures_only_config, client)

        result = await adapter.suggest_locations("Suburban")

        assert result[0]["name"] == "Suburban Station"
        client.suggest_locations.assert_awaited_once_with("Suburban", 10)

    @pytest.mark.asyncio
    async def test_nearby_locations_unsupported(
        self, departures_only_config: AgencyConfig, client: AsyncMock
    ) -> None:
        """Given an agency without NEARBY_LOCATIONS, when searching nearby, then it is rejected."""
        adapter = AgencyAdapter(departures_only_config, client)

        with pytest.raises(UnsupportedCapabilityError, match="NEARBY_LOCATIONS"):
            await adapter.nearby_locations(39.95, -75.16)

        client.nearby_locations.assert_not_called()

    @pytest.mark.asyncio
    async def test_trip_via_requires_trips_via(self, client: AsyncMock) -> None:
        """Given TRIPS without TRIPS_VIA, when routing via a stop, then only that request is rejected."""
        config = AgencyConfig(
            agency_id=AgencyId.BART,
            region="bart",
            timezone="America/Los_Angeles",
            capabilities={Capability.TRIPS},
        )
        adapter = AgencyAdapter(config, client)

        with pytest.raises(UnsupportedCapabilityError) as exc_info:
            await adapter.trips("A", "B", via="C")

        assert exc_info.value.capabilities == (Capability.TRIPS_VIA,)
        client.trips.assert_not_called()

        assert await adapter.trips("A", "B") == [{"legs": []}]

    @pytest.mark.asyncio
    async def test_missing_client(self, departures_only_config: AgencyConfig) -> None:
        """Given no wire client, when calling a supported operation, then a configuration error is raised."""
        adapter = AgencyAdapter(departures_only_config)

        with pytest.raises(MissingClientError) as exc_info:
            await adapter.departures("10264")

        assert isinstance(exc_info.value, ConfigurationError)

    @pytest.mark.asyncio
    async def test_capability_checked_before_missing_client(
        self, departures_only_config: AgencyConfig
    ) -> None:
        """Given no client and an unsupported operation, when called, then the capability error wins."""
        adapter = AgencyAdapter(departures_only_config)

        with pytest.raises(UnsupportedCapabilityError):
            await adapter.trips("A", "B")


def test_adapter_normalization_delegates() -> None:
    """Given an adapter for TFI, when normalizing, then the agency's rules apply."""
    adapter = AgencyAdapter(TFI)

    assert adapter.normalize_line(RawLine(name="DART")) == Line(
        id=None, network=None, mode=TransportMode.SUBURBAN_TRAIN, label="DART"
    )
    assert adapter.normalize_position("3") == Position(name="3")
    assert adapter.normalize_position(None) is None
    assert adapter.mode_of(1) is TransportMode.SUBURBAN_TRAIN
    assert adapter.style_for(Line(id=None, network=None, mode=None, label="Train")) is not None
    assert repr(adapter) == "AgencyAdapter(TFI)"
