"""Factories for building agency rules as data.

Agency quirks are declared as ordered tuples of rules built from these
helpers, e.g.::

    LineRule("dart", when(mode_hint=one_of(0, None), name="DART"),
             fixed_line(TransportMode.SUBURBAN_TRAIN, "DART"))

Field conditions passed to ``when`` are either literal values (compared
with ``==``) or callables taking the field value.
"""

import re
from collections.abc import Callable
from string import Formatter
from typing import Any

from transit_agencies.domain.exceptions import MalformedTableError
from transit_agencies.domain.models.line import Line
from transit_agencies.domain.models.position import Position
from transit_agencies.domain.models.raw_line import RAW_LINE_FIELDS, RawLine
from transit_agencies.domain.models.rules import PositionRule
from transit_agencies.domain.models.transport_mode import TransportMode

FieldCondition = Callable[[Any], bool]
LinePredicate = Callable[[RawLine], bool]
LineResult = Callable[[RawLine], Line | RawLine]

BOUND_SUFFIX_PATTERN = re.compile(r"([NESW]+)-bound", re.IGNORECASE)


def _is_absent(value: Any) -> bool:
    return value is None or value == ""


def _is_present(value: Any) -> bool:
    return not _is_absent(value)


ABSENT: FieldCondition = _is_absent
PRESENT: FieldCondition = _is_present


def _check_field(field: str) -> None:
    if field not in RAW_LINE_FIELDS:
        raise MalformedTableError(f"Unknown line field in rule: {field!r}")


# Field conditions


def one_of(*values: Any) -> FieldCondition:
    allowed = frozenset(values)
    return lambda value: value in allowed


def starts_with(prefix: str) -> FieldCondition:
    return lambda value: isinstance(value, str) and value.startswith(prefix)


def ends_with(suffix: str) -> FieldCondition:
    return lambda value: isinstance(value, str) and value.endswith(suffix)


def matches(pattern: str) -> FieldCondition:
    """Condition that the whole field value matches a regular expression."""
    compiled = re.compile(pattern)
    return lambda value: isinstance(value, str) and compiled.fullmatch(value) is not None


# Predicates


def when(**conditions: Any) -> LinePredicate:
    """Build a predicate that holds when every field condition holds.

    Raises:
        MalformedTableError: If a condition names an unknown field.
    """
    checks: list[tuple[str, FieldCondition]] = []
    for field, condition in conditions.items():
        _check_field(field)
        if callable(condition):
            checks.append((field, condition))
        else:
            checks.append((field, lambda value, expected=condition: value == expected))

    def predicate(raw: RawLine) -> bool:
        return all(check(getattr(raw, field)) for field, check in checks)

    return predicate


def all_of(*predicates: LinePredicate) -> LinePredicate:
    return lambda raw: all(predicate(raw) for predicate in predicates)


def any_of(*predicates: LinePredicate) -> LinePredicate:
    return lambda raw: any(predicate(raw) for predicate in predicates)


def same_value(first: str, second: str) -> LinePredicate:
    """Predicate that two fields carry the same non-empty value."""
    _check_field(first)
    _check_field(second)
    return lambda raw: _is_present(getattr(raw, first)) and getattr(raw, first) == getattr(
        raw, second
    )


# Results


def fixed_line(mode: TransportMode | None, label: str | None) -> LineResult:
    """Result with a fixed mode and label; id and network pass through."""
    return lambda raw: Line(id=raw.id, network=raw.network, mode=mode, label=label)


def render_label(template: str, raw: RawLine) -> str:
    """Fill ``{field}`` placeholders from a raw line; absent fields render empty."""
    values = {
        field: "" if getattr(raw, field) is None else str(getattr(raw, field))
        for field in RAW_LINE_FIELDS
    }
    return template.format_map(values)


def template_line(mode: TransportMode | None, template: str) -> LineResult:
    """Result whose label is rendered from the raw line, e.g. ``"Rail{train_num}"``.

    Raises:
        MalformedTableError: If the template references an unknown field or
            uses a conversion or format spec; fields always render as text.
    """
    try:
        parsed = list(Formatter().parse(template))
    except ValueError as e:
        raise MalformedTableError(f"Invalid label template {template!r}: {e}") from e
    for _, field, spec, conversion in parsed:
        if field is None:
            continue
        _check_field(field)
        if spec or conversion:
            raise MalformedTableError(
                f"Label template {template!r} may not use conversions or format specs"
            )

    return lambda raw: Line(
        id=raw.id, network=raw.network, mode=mode, label=render_label(template, raw)
    )


def regex_line(field: str, pattern: str, mode: TransportMode | None, group: int = 1) -> LineResult:
    """Result whose label is a capture group of a field.

    Pair it with a ``matches`` condition on the same field; if the field does
    not match, the whole field value is used as label.
    """
    _check_field(field)
    compiled = re.compile(pattern)

    def result(raw: RawLine) -> Line:
        value = getattr(raw, field)
        match = compiled.fullmatch(value) if isinstance(value, str) else None
        label = match.group(group) if match else value
        return Line(id=raw.id, network=raw.network, mode=mode, label=label)

    return result


def delegate_with(transform: Callable[[RawLine], RawLine]) -> LineResult:
    """Rewrite the raw line and hand it on to the generic rule."""
    return transform


def strip_field_prefix(field: str, prefix: str) -> LineResult:
    """Rewrite-then-delegate result removing a literal prefix from a field."""
    _check_field(field)

    def transform(raw: RawLine) -> RawLine:
        value = getattr(raw, field)
        if isinstance(value, str) and value.startswith(prefix):
            return raw.replace(**{field: value[len(prefix) :]})
        return raw

    return delegate_with(transform)


# Position rules


def bound_suffix() -> PositionRule:
    """``<letters from NESW>-bound``, case-insensitive, as compass direction."""

    def result(raw: str) -> Position:
        match = BOUND_SUFFIX_PATTERN.fullmatch(raw)
        direction = match.group(1).upper() if match else None
        return Position(name=raw, direction=direction)

    return PositionRule(
        name="bound-suffix",
        predicate=lambda raw: BOUND_SUFFIX_PATTERN.fullmatch(raw) is not None,
        result=result,
    )


def strip_prefix(prefix: str) -> PositionRule:
    """Strip a literal prefix and hand the rest to the generic fallback."""
    if not prefix:
        raise MalformedTableError("Position prefix must not be empty")
    return PositionRule(
        name=f"strip-prefix {prefix!r}",
        predicate=lambda raw: raw.startswith(prefix),
        result=lambda raw: raw[len(prefix) :],
    )
