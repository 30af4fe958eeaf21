"""Line style domain model and color helpers.

Colors are 32-bit ARGB integers (e.g. ``0xFF006E34``); ``0`` means "no color".
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType

from transit_agencies.domain.exceptions import MalformedTableError

BLACK = 0xFF000000
DKGRAY = 0xFF444444
GRAY = 0xFF888888
LTGRAY = 0xFFCCCCCC
WHITE = 0xFFFFFFFF
RED = 0xFFFF0000
GREEN = 0xFF00FF00
BLUE = 0xFF0000FF
YELLOW = 0xFFFFFF00
CYAN = 0xFF00FFFF
MAGENTA = 0xFFFF00FF
TRANSPARENT = 0


class Shape(Enum):
    """Outline of a rendered line badge."""

    RECT = "rect"
    ROUNDED = "rounded"
    CIRCLE = "circle"


def parse_color(color: str) -> int:
    """Parse ``#rrggbb`` or ``#aarrggbb`` into an ARGB integer.

    Six-digit colors are made fully opaque.

    Raises:
        ValueError: If the string is not a valid color.
    """
    if not isinstance(color, str) or len(color) not in (7, 9) or not color.startswith("#"):
        raise ValueError(f"Unknown color: {color!r}")
    try:
        value = int(color[1:], 16)
    except ValueError:
        raise ValueError(f"Not a number: {color!r}") from None
    if len(color) == 7:
        value |= 0xFF000000
    return value


def argb(alpha: int, red: int, green: int, blue: int) -> int:
    """Compose an ARGB integer from its channels."""
    return ((alpha & 0xFF) << 24) | ((red & 0xFF) << 16) | ((green & 0xFF) << 8) | (blue & 0xFF)


def rgb(red: int, green: int, blue: int) -> int:
    """Compose an opaque color."""
    return argb(0xFF, red, green, blue)


def red(color: int) -> int:
    return (color >> 16) & 0xFF


def green(color: int) -> int:
    return (color >> 8) & 0xFF


def blue(color: int) -> int:
    return color & 0xFF


def perceived_brightness(color: int) -> float:
    """Perceived brightness in [0, 1), per the W3C color contrast formula."""
    return (0.299 * red(color) + 0.587 * green(color) + 0.114 * blue(color)) / 256


def derive_foreground_color(background_color: int) -> int:
    """White text on dark backgrounds, black text on light ones."""
    return WHITE if perceived_brightness(background_color) < 0.5 else BLACK


def to_hex(color: int) -> str:
    """Format an ARGB integer as ``#rrggbb`` (or ``#aarrggbb`` when translucent)."""
    if (color >> 24) & 0xFF == 0xFF:
        return f"#{color & 0xFFFFFF:06x}"
    return f"#{color & 0xFFFFFFFF:08x}"


@dataclass(frozen=True)
class Style:
    """Rendering style of a line badge."""

    background_color: int
    foreground_color: int
    shape: Shape = Shape.ROUNDED
    border_color: int = TRANSPARENT
    background_color2: int = TRANSPARENT  # second half of a split badge

    @property
    def has_border(self) -> bool:
        return self.border_color != TRANSPARENT


@dataclass(frozen=True)
class StyleTable:
    """Immutable style lookup table.

    Keys are category characters (``"U"``), or, for agency tables, a
    category followed by a label (``"UCentral"``) optionally qualified by
    network (``"swm|T12"``).
    """

    entries: Mapping[str, Style] = field(default_factory=dict)

    def __post_init__(self) -> None:
        for key, style in self.entries.items():
            if not isinstance(key, str) or not isinstance(style, Style):
                raise MalformedTableError(
                    f"Style table entry {key!r} must map a string to a Style, got {style!r}"
                )
        object.__setattr__(self, "entries", MappingProxyType(dict(self.entries)))

    def get(self, key: str) -> Style | None:
        return self.entries.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self.entries

    def __len__(self) -> int:
        return len(self.entries)
