"""Agency configuration domain model."""

from collections.abc import Iterable
from dataclasses import dataclass, field

from transit_agencies.domain.models.agency_id import AgencyId
from transit_agencies.domain.models.capability import Capability
from transit_agencies.domain.models.mode_code_table import ModeCodeTable
from transit_agencies.domain.models.rules import LineRule, PositionRule
from transit_agencies.domain.models.style import StyleTable
from transit_agencies.domain.models.transport_mode import ALL_MODES, TransportMode


@dataclass(frozen=True)
class AgencyConfig:
    """Static, immutable configuration of one agency.

    Created once at startup and owned by its registry entry. Collections are
    frozen on construction, so callers may pass lists or sets.
    """

    agency_id: AgencyId
    region: str  # operator cluster of the protocol family, opaque to the core
    timezone: str  # IANA name, e.g. "Europe/London"
    language: str = "de"
    default_modes: frozenset[TransportMode] = ALL_MODES
    capabilities: frozenset[Capability] = frozenset()
    mode_table: ModeCodeTable = field(default_factory=ModeCodeTable)
    line_rules: tuple[LineRule, ...] = ()
    position_rules: tuple[PositionRule, ...] = ()
    styles: StyleTable | None = None  # None means the shared default table

    def __post_init__(self) -> None:
        object.__setattr__(self, "default_modes", _frozen(self.default_modes))
        object.__setattr__(self, "capabilities", _frozen(self.capabilities))
        object.__setattr__(self, "line_rules", tuple(self.line_rules))
        object.__setattr__(self, "position_rules", tuple(self.position_rules))


def _frozen(items: Iterable) -> frozenset:  # type: ignore[type-arg]
    return items if isinstance(items, frozenset) else frozenset(items)
