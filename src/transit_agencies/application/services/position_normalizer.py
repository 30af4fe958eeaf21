"""Position normalization: agency rules first, raw text as fallback."""

import logging

from transit_agencies.domain.models.agency_config import AgencyConfig
from transit_agencies.domain.models.position import Position

logger = logging.getLogger(__name__)


def generic_position(raw: str) -> Position:
    """Terminal rule: keep the text, no parsed direction."""
    return Position(name=raw)


def normalize_position(config: AgencyConfig, raw: str | None) -> Position | None:
    """Parse a free-text platform or bound descriptor.

    ``None`` input yields ``None``; any other input yields a position.
    """
    if raw is None:
        return None

    for rule in config.position_rules:
        if not rule.matches(raw):
            continue
        logger.debug(f"{config.agency_id}: position rule '{rule.name}' matched {raw!r}")
        outcome = rule.result(raw)
        if isinstance(outcome, Position):
            return outcome
        return generic_position(outcome)

    return generic_position(raw)
