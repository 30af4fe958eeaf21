"""Built-in agency catalog."""

from transit_agencies.adapters.agencies.efa import EFA_AGENCIES, EFA_MODE_TABLE
from transit_agencies.adapters.agencies.hafas import HAFAS_AGENCIES
from transit_agencies.domain.models.agency_config import AgencyConfig
from transit_agencies.domain.models.agency_id import AgencyId

BUILTIN_AGENCIES: tuple[AgencyConfig, ...] = EFA_AGENCIES + HAFAS_AGENCIES


def builtin_agency(agency_id: AgencyId) -> AgencyConfig | None:
    """Return the built-in configuration of an agency, if the catalog has one."""
    for config in BUILTIN_AGENCIES:
        if config.agency_id == agency_id:
            return config
    return None


__all__ = ["BUILTIN_AGENCIES", "EFA_MODE_TABLE", "builtin_agency"]
