"""Configuration adapters."""

from transit_agencies.adapters.config.agency_configuration_loader import AgencyConfigurationLoader
from transit_agencies.adapters.config.app_config import AppConfig

__all__ = ["AgencyConfigurationLoader", "AppConfig"]
