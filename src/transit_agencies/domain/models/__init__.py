"""Canonical domain models shared by all agencies."""

from transit_agencies.domain.models.agency_config import AgencyConfig
from transit_agencies.domain.models.agency_id import AgencyId
from transit_agencies.domain.models.capability import Capability
from transit_agencies.domain.models.line import Line
from transit_agencies.domain.models.mode_code_table import ModeCodeTable
from transit_agencies.domain.models.position import Position
from transit_agencies.domain.models.raw_line import RawLine
from transit_agencies.domain.models.rules import LineRule, PositionRule
from transit_agencies.domain.models.style import Shape, Style, StyleTable
from transit_agencies.domain.models.transport_mode import ALL_MODES, TransportMode

__all__ = [
    "ALL_MODES",
    "AgencyConfig",
    "AgencyId",
    "Capability",
    "Line",
    "LineRule",
    "ModeCodeTable",
    "Position",
    "PositionRule",
    "RawLine",
    "Shape",
    "Style",
    "StyleTable",
    "TransportMode",
]
