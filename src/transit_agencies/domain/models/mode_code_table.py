"""Mode code table domain model."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from transit_agencies.domain.exceptions import MalformedTableError
from transit_agencies.domain.models.transport_mode import TransportMode


@dataclass(frozen=True)
class ModeCodeTable:
    """Positional lookup from a protocol-local code to a canonical mode.

    The index is a product bit position or a small mode number, depending on
    the protocol family. Entries may be ``None``: the protocol defines the
    code, but the canonical model has no matching mode or the agency does not
    use it.
    """

    entries: tuple[TransportMode | None, ...] = ()

    def __post_init__(self) -> None:
        entries = tuple(self.entries)
        for index, entry in enumerate(entries):
            if entry is not None and not isinstance(entry, TransportMode):
                raise MalformedTableError(
                    f"Mode code table entry {index} is not a transport mode: {entry!r}"
                )
        object.__setattr__(self, "entries", entries)

    @classmethod
    def from_sequence(cls, entries: Iterable[TransportMode | None]) -> "ModeCodeTable":
        """Build a table where position ``i`` holds the mode for code ``i``."""
        return cls(tuple(entries))

    @classmethod
    def from_mapping(cls, entries: Mapping[int, TransportMode | None]) -> "ModeCodeTable":
        """Build a table from explicit ``code -> mode`` pairs; missing codes are gaps."""
        if not entries:
            return cls()
        for index in entries:
            if isinstance(index, bool) or not isinstance(index, int) or index < 0:
                raise MalformedTableError(f"Mode code index must be a non-negative integer: {index!r}")
        size = max(entries) + 1
        return cls(tuple(entries.get(index) for index in range(size)))

    def mode_of(self, index: int | None) -> TransportMode | None:
        """Mode for a code, or ``None`` when the code is unknown or unmapped."""
        if index is None or isinstance(index, bool) or not isinstance(index, int):
            return None
        if 0 <= index < len(self.entries):
            return self.entries[index]
        return None

    def indices_for(self, mode: TransportMode) -> tuple[int, ...]:
        """All codes mapped to a mode, e.g. to build a product bitmask for a request."""
        return tuple(index for index, entry in enumerate(self.entries) if entry is mode)

    def modes(self) -> frozenset[TransportMode]:
        """Modes present in the table."""
        return frozenset(entry for entry in self.entries if entry is not None)

    def __len__(self) -> int:
        return len(self.entries)
