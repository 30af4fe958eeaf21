"""Transport mode domain model."""

from enum import Enum

UNKNOWN_CODE = "?"


class TransportMode(Enum):
    """Canonical, agency-independent transport mode.

    Each mode carries its single-character product code, which is also the
    category character used for style lookups.
    """

    HIGH_SPEED_TRAIN = "I"
    REGIONAL_TRAIN = "R"
    SUBURBAN_TRAIN = "S"
    SUBWAY = "U"
    TRAM = "T"
    BUS = "B"
    FERRY = "F"
    CABLECAR = "C"
    ON_DEMAND = "P"

    @property
    def code(self) -> str:
        """Single-character product code."""
        return self.value

    @classmethod
    def from_code(cls, code: str) -> "TransportMode":
        """Resolve a product code, raising ValueError for unknown codes."""
        return cls(code)

    @classmethod
    def from_name(cls, name: str) -> "TransportMode":
        """Resolve a mode by member name, case-insensitive."""
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown transport mode: {name!r}") from None


ALL_MODES: frozenset[TransportMode] = frozenset(TransportMode)
