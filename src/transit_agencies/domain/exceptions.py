"""Error taxonomy for agency configuration and capability negotiation.

Normalization misses are not errors: they are represented as ``None``.
"""

from collections.abc import Iterable


class TransitAgencyError(Exception):
    """Base class for all errors raised by this package."""


class ConfigurationError(TransitAgencyError):
    """Static agency configuration is invalid; raised at startup, never at query time."""


class DuplicateAgencyError(ConfigurationError):
    """The same agency identifier was registered twice."""

    def __init__(self, agency_id: str) -> None:
        self.agency_id = agency_id
        super().__init__(f"Agency '{agency_id}' is registered more than once")


class UnknownAgencyError(ConfigurationError):
    """An agency identifier is not part of the registry or the identifier set."""

    def __init__(self, agency_id: str) -> None:
        self.agency_id = agency_id
        super().__init__(f"Unknown agency: '{agency_id}'")


class MalformedTableError(ConfigurationError):
    """A static lookup table (mode codes, styles, rules) is malformed."""


class MissingClientError(ConfigurationError):
    """A supported operation was invoked on an adapter without a wire client."""

    def __init__(self, agency_id: str) -> None:
        self.agency_id = agency_id
        super().__init__(f"Agency '{agency_id}' has no wire client configured")


class UnsupportedCapabilityError(TransitAgencyError):
    """An operation was requested that the adapter does not declare.

    Raised before any network access takes place.
    """

    def __init__(self, agency_id: str, capabilities: Iterable[object]) -> None:
        self.agency_id = agency_id
        self.capabilities = tuple(capabilities)
        names = ", ".join(getattr(c, "name", str(c)) for c in self.capabilities)
        super().__init__(f"Agency '{agency_id}' does not support: {names}")
