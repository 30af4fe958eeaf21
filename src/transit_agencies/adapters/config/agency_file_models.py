"""Schema of the TOML agency file.

Names in the file are enum member names (``"SUBURBAN_TRAIN"``,
``"DEPARTURES"``); they are resolved while validating, so a model that
validated successfully only holds canonical values.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from transit_agencies.domain.models.capability import Capability
from transit_agencies.domain.models.raw_line import RAW_LINE_FIELDS
from transit_agencies.domain.models.style import Shape, parse_color
from transit_agencies.domain.models.transport_mode import TransportMode

NO_MODE = "none"
INT_LINE_FIELD = "mode_hint"


def _mode_or_none(value: Any) -> TransportMode | None:
    if value is None or isinstance(value, TransportMode):
        return value
    if not isinstance(value, str):
        raise ValueError(f"expected a transport mode name, got {value!r}")
    if value.strip().lower() in (NO_MODE, ""):
        return None
    return TransportMode.from_name(value)


class LineRuleModel(BaseModel):
    """One ``[[agencies.line_rules]]`` entry."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str | None = None
    when: dict[str, int | str] = Field(default_factory=dict)
    absent: list[str] = Field(default_factory=list)
    present: list[str] = Field(default_factory=list)
    mode: TransportMode | None = None
    label: str | None = None  # may contain "{field}" placeholders

    @field_validator("mode", mode="before")
    @classmethod
    def validate_mode(cls, v: Any) -> TransportMode | None:
        return _mode_or_none(v)

    @model_validator(mode="after")
    def validate_fields(self) -> "LineRuleModel":
        """Every condition must name a known line field, and each field only once."""
        fields = [*self.when, *self.absent, *self.present]
        unknown = sorted(set(fields) - set(RAW_LINE_FIELDS))
        if unknown:
            raise ValueError(f"unknown line fields: {', '.join(unknown)}")
        if len(fields) != len(set(fields)):
            raise ValueError("a line field may only be used in one condition")
        if not fields:
            raise ValueError("a line rule needs at least one condition")
        for field, value in self.when.items():
            expected = int if field == INT_LINE_FIELD else str
            if type(value) is not expected:
                raise ValueError(
                    f"condition on {field} must be {expected.__name__}, got {value!r}"
                )
        return self


class StyleModel(BaseModel):
    """One entry of ``[agencies.styles]``; colors as ``#rrggbb`` or ``#aarrggbb``."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    background: int
    foreground: int | None = None  # derived from the background when omitted
    shape: Shape = Shape.ROUNDED
    border: int | None = None
    background2: int | None = None

    @field_validator("background", "foreground", "border", "background2", mode="before")
    @classmethod
    def validate_color(cls, v: Any) -> Any:
        return parse_color(v) if isinstance(v, str) else v

    @field_validator("shape", mode="before")
    @classmethod
    def validate_shape(cls, v: Any) -> Any:
        if not isinstance(v, str):
            return v
        try:
            return Shape[v.strip().upper()]
        except KeyError:
            raise ValueError(f"unknown shape {v!r}") from None


class AgencyModel(BaseModel):
    """One ``[[agencies]]`` entry."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: str
    region: str
    timezone: str
    language: str = "de"
    capabilities: list[Capability] = Field(default_factory=list)
    default_modes: list[TransportMode] | None = None  # None enables all modes
    mode_codes: list[TransportMode | None] = Field(default_factory=list)
    position_prefixes: list[str] = Field(default_factory=list)
    bound_suffix_positions: bool = False
    line_rules: list[LineRuleModel] = Field(default_factory=list)
    styles: dict[str, StyleModel] = Field(default_factory=dict)

    @field_validator("id")
    @classmethod
    def validate_id(cls, v: str) -> str:
        return v.strip().upper()

    @field_validator("capabilities", mode="before")
    @classmethod
    def validate_capabilities(cls, v: Any) -> Any:
        if not isinstance(v, list):
            return v
        return [Capability.from_name(c) if isinstance(c, str) else c for c in v]

    @field_validator("default_modes", mode="before")
    @classmethod
    def validate_default_modes(cls, v: Any) -> Any:
        if not isinstance(v, list):
            return v
        return [TransportMode.from_name(m) if isinstance(m, str) else m for m in v]

    @field_validator("mode_codes", mode="before")
    @classmethod
    def validate_mode_codes(cls, v: Any) -> Any:
        """Accept an ordered list or an ``index -> mode`` table."""
        if isinstance(v, dict):
            table: dict[int, Any] = {}
            for key, mode in v.items():
                try:
                    index = int(key)
                except ValueError:
                    raise ValueError(f"mode code index must be an integer, got {key!r}") from None
                if index < 0:
                    raise ValueError(f"mode code index must not be negative, got {index}")
                table[index] = mode
            size = max(table) + 1 if table else 0
            v = [table.get(index) for index in range(size)]
        if not isinstance(v, list):
            return v
        return [_mode_or_none(mode) for mode in v]


class AgencyFileModel(BaseModel):
    """Root of the TOML agency file."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    agencies: list[AgencyModel] = Field(default_factory=list)
