"""Line normalization: agency rules first, generic rule last."""

import logging

from transit_agencies.application.services.mode_lookup import mode_of
from transit_agencies.domain.models.agency_config import AgencyConfig
from transit_agencies.domain.models.line import Line
from transit_agencies.domain.models.raw_line import RawLine

logger = logging.getLogger(__name__)


def _first_not_empty(*values: str | None) -> str | None:
    for value in values:
        if value:
            return value
    return None


def generic_line(config: AgencyConfig, raw: RawLine) -> Line:
    """Terminal rule of every chain.

    The label is the most specific non-empty field of symbol, name and long
    name; the mode comes from the agency's mode code table.
    """
    return Line(
        id=raw.id,
        network=raw.network,
        mode=mode_of(config, raw.mode_hint),
        label=_first_not_empty(raw.symbol, raw.name, raw.long_name),
    )


def normalize_line(config: AgencyConfig, raw: RawLine) -> Line:
    """Resolve a raw line descriptor to a canonical line.

    Agency rules are evaluated in declaration order and the first match wins.
    A rule may also rewrite the descriptor and hand it on to the generic rule.
    """
    for rule in config.line_rules:
        if not rule.matches(raw):
            continue
        logger.debug(f"{config.agency_id}: line rule '{rule.name}' matched {raw.describe()}")
        outcome = rule.result(raw)
        if isinstance(outcome, RawLine):
            return generic_line(config, outcome)
        return outcome

    return generic_line(config, raw)
