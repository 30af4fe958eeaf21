"""Style lookup for line badges."""

from transit_agencies.domain.models.agency_config import AgencyConfig
from transit_agencies.domain.models.line import Line
from transit_agencies.domain.models.style import (
    BLUE,
    DKGRAY,
    GRAY,
    RED,
    WHITE,
    Shape,
    Style,
    StyleTable,
    parse_color,
)
from transit_agencies.domain.models.transport_mode import UNKNOWN_CODE

NEUTRAL_STYLE = Style(DKGRAY, WHITE)

DEFAULT_STYLES = StyleTable(
    {
        "I": Style(WHITE, RED, shape=Shape.RECT, border_color=RED),
        "R": Style(GRAY, WHITE, shape=Shape.RECT),
        "S": Style(parse_color("#006e34"), WHITE, shape=Shape.CIRCLE),
        "U": Style(parse_color("#003090"), WHITE, shape=Shape.RECT),
        "T": Style(parse_color("#cc0000"), WHITE, shape=Shape.RECT),
        "B": Style(parse_color("#993399"), WHITE),
        "P": Style(parse_color("#00695c"), WHITE),
        "F": Style(BLUE, WHITE, shape=Shape.CIRCLE),
        UNKNOWN_CODE: NEUTRAL_STYLE,
    }
)


def style_for(category: str, table: StyleTable | None = None) -> Style:
    """Style for a category character. Never fails.

    Unknown categories get the table's own ``?`` entry, or the neutral style
    when the table has none. Tables are never merged.
    """
    styles = table if table is not None else DEFAULT_STYLES
    return styles.get(category) or styles.get(UNKNOWN_CODE) or NEUTRAL_STYLE


def style_for_line(config: AgencyConfig, line: Line) -> Style:
    """Style for a line, honouring label-specific entries of the agency's table."""
    styles = config.styles if config.styles is not None else DEFAULT_STYLES
    category = line.category
    if line.label:
        keyed = category + line.label
        if line.network:
            style = styles.get(f"{line.network}|{keyed}")
            if style:
                return style
        style = styles.get(keyed)
        if style:
            return style
    if line.network:
        style = styles.get(f"{line.network}|{category}")
        if style:
            return style
    return style_for(category, styles)
