"""Per-agency normalization and capability negotiation for public transit data sources."""

__version__ = "0.1.0"
