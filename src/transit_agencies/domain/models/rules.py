"""Rule domain models for line and position normalization.

A rule is a (predicate, result) pair. Agencies declare ordered tuples of
rules; the first rule whose predicate matches decides the outcome, and a
generic rule terminates every chain.
"""

from collections.abc import Callable
from dataclasses import dataclass

from transit_agencies.domain.models.line import Line
from transit_agencies.domain.models.position import Position
from transit_agencies.domain.models.raw_line import RawLine


@dataclass(frozen=True)
class LineRule:
    """Special-case rule for line normalization.

    ``result`` returns either the final ``Line`` or a rewritten ``RawLine``
    that is handed on to the generic rule.
    """

    name: str
    predicate: Callable[[RawLine], bool]
    result: Callable[[RawLine], Line | RawLine]

    def matches(self, raw: RawLine) -> bool:
        return self.predicate(raw)


@dataclass(frozen=True)
class PositionRule:
    """Special-case rule for position normalization.

    ``result`` returns either the final ``Position`` or rewritten text that
    is handed on to the generic fallback.
    """

    name: str
    predicate: Callable[[str], bool]
    result: Callable[[str], Position | str]

    def matches(self, raw: str) -> bool:
        return self.predicate(raw)
