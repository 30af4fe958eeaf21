"""Domain layer - canonical model, error taxonomy and ports."""

from transit_agencies.domain.exceptions import (
    ConfigurationError,
    DuplicateAgencyError,
    MalformedTableError,
    MissingClientError,
    TransitAgencyError,
    UnknownAgencyError,
    UnsupportedCapabilityError,
)
from transit_agencies.domain.models import (
    AgencyConfig,
    AgencyId,
    Capability,
    Line,
    Position,
    RawLine,
    Style,
    TransportMode,
)
from transit_agencies.domain.ports import TransitClient

__all__ = [
    "AgencyConfig",
    "AgencyId",
    "Capability",
    "ConfigurationError",
    "DuplicateAgencyError",
    "Line",
    "MalformedTableError",
    "MissingClientError",
    "Position",
    "RawLine",
    "Style",
    "TransitAgencyError",
    "TransitClient",
    "TransportMode",
    "UnknownAgencyError",
    "UnsupportedCapabilityError",
]
