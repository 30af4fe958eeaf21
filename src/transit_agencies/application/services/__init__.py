"""Normalization and capability negotiation services."""

from transit_agencies.application.services.agency_adapter import AgencyAdapter
from transit_agencies.application.services.line_normalizer import generic_line, normalize_line
from transit_agencies.application.services.mode_lookup import mode_of
from transit_agencies.application.services.position_normalizer import (
    generic_position,
    normalize_position,
)
from transit_agencies.application.services.provider_registry import (
    ProviderRegistry,
    validate_config,
)
from transit_agencies.application.services.style_registry import (
    DEFAULT_STYLES,
    NEUTRAL_STYLE,
    style_for,
    style_for_line,
)

__all__ = [
    "DEFAULT_STYLES",
    "NEUTRAL_STYLE",
    "AgencyAdapter",
    "ProviderRegistry",
    "generic_line",
    "generic_position",
    "mode_of",
    "normalize_line",
    "normalize_position",
    "style_for",
    "style_for_line",
    "validate_config",
]
