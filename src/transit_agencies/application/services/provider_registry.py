"""Provider registry: agency id -> configured adapter."""

import logging
from collections.abc import Iterable, Iterator
from types import MappingProxyType

import pytz

from transit_agencies.application.services.agency_adapter import AgencyAdapter
from transit_agencies.domain.exceptions import (
    ConfigurationError,
    DuplicateAgencyError,
    MalformedTableError,
    UnknownAgencyError,
)
from transit_agencies.domain.models.agency_config import AgencyConfig
from transit_agencies.domain.models.agency_id import AgencyId
from transit_agencies.domain.models.capability import Capability
from transit_agencies.domain.models.mode_code_table import ModeCodeTable
from transit_agencies.domain.models.rules import LineRule, PositionRule
from transit_agencies.domain.models.style import StyleTable
from transit_agencies.domain.models.transport_mode import TransportMode
from transit_agencies.domain.ports.transit_client import ClientFactory

logger = logging.getLogger(__name__)


def validate_config(config: AgencyConfig) -> None:
    """Check an agency configuration before it is registered.

    Raises:
        ConfigurationError: If any part of the static configuration is invalid.
    """
    if not isinstance(config.agency_id, AgencyId):
        raise UnknownAgencyError(str(config.agency_id))
    agency = config.agency_id

    if not config.region or config.region != config.region.lower() or " " in config.region:
        raise ConfigurationError(f"{agency}: region must be a short lowercase code, got {config.region!r}")

    try:
        pytz.timezone(config.timezone)
    except pytz.UnknownTimeZoneError:
        raise ConfigurationError(f"{agency}: unknown timezone {config.timezone!r}") from None

    if not isinstance(config.mode_table, ModeCodeTable):
        raise MalformedTableError(f"{agency}: mode table must be a ModeCodeTable")
    if config.styles is not None and not isinstance(config.styles, StyleTable):
        raise MalformedTableError(f"{agency}: styles must be a StyleTable or None")
    if not all(isinstance(c, Capability) for c in config.capabilities):
        raise MalformedTableError(f"{agency}: capabilities must be Capability members")
    if not all(isinstance(m, TransportMode) for m in config.default_modes):
        raise MalformedTableError(f"{agency}: default modes must be TransportMode members")
    if not all(isinstance(r, LineRule) for r in config.line_rules):
        raise MalformedTableError(f"{agency}: line rules must be LineRule instances")
    if not all(isinstance(r, PositionRule) for r in config.position_rules):
        raise MalformedTableError(f"{agency}: position rules must be PositionRule instances")


class ProviderRegistry:
    """Read-only mapping from agency id to adapter.

    Built once at startup. Every configuration problem surfaces here, so a
    registry that was built successfully never fails a lookup for an
    agency it was built with.
    """

    def __init__(self, adapters: Iterable[AgencyAdapter]) -> None:
        """Register adapters.

        Raises:
            DuplicateAgencyError: If two adapters share an agency id.
            ConfigurationError: If an adapter's configuration is invalid.
        """
        registered: dict[AgencyId, AgencyAdapter] = {}
        for adapter in adapters:
            validate_config(adapter.config)
            if adapter.agency_id in registered:
                raise DuplicateAgencyError(adapter.agency_id)
            registered[adapter.agency_id] = adapter

        self._adapters = MappingProxyType(registered)
        logger.info(f"Registered {len(registered)} agenc{'y' if len(registered) == 1 else 'ies'}")

    @classmethod
    def from_configs(
        cls,
        configs: Iterable[AgencyConfig],
        client_factory: ClientFactory | None = None,
    ) -> "ProviderRegistry":
        """Build a registry from agency configurations.

        Args:
            configs: One configuration per agency.
            client_factory: Creates the wire client for an agency. Without it,
                adapters can normalize but not perform network operations.
        """
        return cls(
            AgencyAdapter(config, client_factory(config) if client_factory else None)
            for config in configs
        )

    def get(self, agency_id: AgencyId | str) -> AgencyAdapter:
        """Return the adapter for an agency.

        Raises:
            UnknownAgencyError: If the agency is not registered.
        """
        key = AgencyId.parse(agency_id)
        adapter = self._adapters.get(key)
        if adapter is None:
            raise UnknownAgencyError(key)
        return adapter

    def require(self, *agency_ids: AgencyId | str) -> None:
        """Validate at startup that all given agencies are registered."""
        for agency_id in agency_ids:
            self.get(agency_id)

    def agency_ids(self) -> list[AgencyId]:
        return sorted(self._adapters)

    def __contains__(self, agency_id: object) -> bool:
        if not isinstance(agency_id, (AgencyId, str)):
            return False
        try:
            return AgencyId.parse(agency_id) in self._adapters
        except UnknownAgencyError:
            return False

    def __iter__(self) -> Iterator[AgencyAdapter]:
        return iter(self._adapters[agency_id] for agency_id in self.agency_ids())

    def __len__(self) -> int:
        return len(self._adapters)
