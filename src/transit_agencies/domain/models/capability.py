"""Capability domain model."""

from enum import Enum


class Capability(Enum):
    """Query category an agency adapter may support."""

    SUGGEST_LOCATIONS = "suggest_locations"  # free-text location search
    NEARBY_LOCATIONS = "nearby_locations"
    DEPARTURES = "departures"
    TRIPS = "trips"
    TRIPS_VIA = "trips_via"  # trip planning through an intermediate location
    AUTOCOMPLETE_ONE_LINE = "autocomplete_one_line"

    @classmethod
    def from_name(cls, name: str) -> "Capability":
        """Resolve a capability by member name, case-insensitive."""
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown capability: {name!r}") from None
