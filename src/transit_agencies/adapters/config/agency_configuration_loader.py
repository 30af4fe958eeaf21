"""Agency configuration loader."""

import logging
import tomllib

from pydantic import ValidationError

from transit_agencies.adapters.agencies import BUILTIN_AGENCIES
from transit_agencies.adapters.agencies.rules import (
    ABSENT,
    PRESENT,
    bound_suffix,
    fixed_line,
    strip_prefix,
    template_line,
    when,
)
from transit_agencies.adapters.config.agency_file_models import (
    AgencyFileModel,
    AgencyModel,
    LineRuleModel,
)
from transit_agencies.adapters.config.app_config import AppConfig
from transit_agencies.domain.exceptions import (
    ConfigurationError,
    DuplicateAgencyError,
    UnknownAgencyError,
)
from transit_agencies.domain.models.agency_config import AgencyConfig
from transit_agencies.domain.models.agency_id import AgencyId
from transit_agencies.domain.models.mode_code_table import ModeCodeTable
from transit_agencies.domain.models.rules import LineRule, PositionRule
from transit_agencies.domain.models.style import Style, StyleTable, derive_foreground_color
from transit_agencies.domain.models.transport_mode import ALL_MODES

logger = logging.getLogger(__name__)


class AgencyConfigurationLoader:
    """Loads agency configurations from the built-in catalog and the agency file."""

    @staticmethod
    def load(config: AppConfig) -> list[AgencyConfig]:
        """Load agency configurations from app config.

        Agencies from the file replace built-in agencies with the same id.

        Raises:
            ConfigurationError: If the agency file is missing or invalid, or an
                enabled agency is not configured.
        """
        agencies: dict[AgencyId, AgencyConfig] = {}
        if config.include_builtin_agencies:
            agencies.update((agency.agency_id, agency) for agency in BUILTIN_AGENCIES)

        for agency in AgencyConfigurationLoader.load_file(config):
            if agency.agency_id in agencies:
                logger.info(f"Agency file replaces configuration of {agency.agency_id}")
            agencies[agency.agency_id] = agency

        enabled = [AgencyId.parse(name) for name in config.get_enabled_agencies()]
        if not enabled:
            return list(agencies.values())

        for agency_id in enabled:
            if agency_id not in agencies:
                raise UnknownAgencyError(agency_id)
        return [agencies[agency_id] for agency_id in dict.fromkeys(enabled)]

    @staticmethod
    def load_file(config: AppConfig) -> list[AgencyConfig]:
        """Load the agencies declared in the TOML agency file, if one is configured."""
        path = config.agencies_file
        try:
            document = AgencyFileModel.model_validate(config.load_agencies_file())
        except FileNotFoundError as e:
            raise ConfigurationError(str(e)) from e
        except OSError as e:
            raise ConfigurationError(f"Cannot read agency file {path}: {e}") from e
        except tomllib.TOMLDecodeError as e:
            raise ConfigurationError(f"Invalid TOML in agency file {path}: {e}") from e
        except ValidationError as e:
            raise ConfigurationError(f"Invalid agency file {path}: {e}") from e

        agencies: list[AgencyConfig] = []
        seen: set[AgencyId] = set()
        for model in document.agencies:
            agency = AgencyConfigurationLoader.agency_from_model(model)
            if agency.agency_id in seen:
                raise DuplicateAgencyError(agency.agency_id)
            seen.add(agency.agency_id)
            agencies.append(agency)

        if path:
            logger.info(f"Loaded {len(agencies)} agencies from {path}")
        return agencies

    @staticmethod
    def agency_from_model(model: AgencyModel) -> AgencyConfig:
        """Build an agency configuration from a validated file entry."""
        position_rules: list[PositionRule] = []
        if model.bound_suffix_positions:
            position_rules.append(bound_suffix())
        position_rules.extend(strip_prefix(prefix) for prefix in model.position_prefixes)

        styles = None
        if model.styles:
            styles = StyleTable(
                {
                    key: Style(
                        style.background,
                        style.foreground
                        if style.foreground is not None
                        else derive_foreground_color(style.background),
                        shape=style.shape,
                        border_color=style.border or 0,
                        background_color2=style.background2 or 0,
                    )
                    for key, style in model.styles.items()
                }
            )

        return AgencyConfig(
            agency_id=AgencyId.parse(model.id),
            region=model.region,
            timezone=model.timezone,
            language=model.language,
            default_modes=ALL_MODES if model.default_modes is None else model.default_modes,
            capabilities=model.capabilities,
            mode_table=ModeCodeTable.from_sequence(model.mode_codes),
            line_rules=[
                AgencyConfigurationLoader.line_rule_from_model(rule, index)
                for index, rule in enumerate(model.line_rules)
            ],
            position_rules=position_rules,
            styles=styles,
        )

    @staticmethod
    def line_rule_from_model(model: LineRuleModel, index: int) -> LineRule:
        conditions: dict[str, object] = dict(model.when)
        conditions.update((field, ABSENT) for field in model.absent)
        conditions.update((field, PRESENT) for field in model.present)

        if model.label is None:
            result = fixed_line(model.mode, None)
        else:
            result = template_line(model.mode, model.label)

        return LineRule(
            name=model.name or f"rule {index + 1}",
            predicate=when(**conditions),
            result=result,
        )
