"""Mode code table lookup."""

from transit_agencies.domain.models.agency_config import AgencyConfig
from transit_agencies.domain.models.transport_mode import TransportMode


def mode_of(config: AgencyConfig, index: int | None) -> TransportMode | None:
    """Canonical mode for a protocol-local code of an agency, or ``None`` if absent."""
    return config.mode_table.mode_of(index)
