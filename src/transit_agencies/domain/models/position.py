"""Position domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """Platform or bay descriptor.

    ``name`` is the (possibly prefix-stripped) raw text; ``direction`` holds
    the cardinal letters of a bound indicator such as "NE-bound".
    """

    name: str
    direction: str | None = None

    def __str__(self) -> str:
        return self.name
