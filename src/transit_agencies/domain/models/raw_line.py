"""Raw line descriptor domain model."""

import dataclasses
from dataclasses import dataclass

# Fields a line rule may test; the order is the order used in log output.
RAW_LINE_FIELDS = (
    "id",
    "network",
    "mode_hint",
    "symbol",
    "name",
    "long_name",
    "train_type",
    "train_num",
    "train_name",
)


@dataclass(frozen=True)
class RawLine:
    """Line descriptor as extracted from a wire response, before normalization.

    All fields are optional. ``mode_hint`` is the protocol-local numeric mode
    (e.g. an EFA ``motType``) and indexes the agency's mode code table.
    """

    id: str | None = None
    network: str | None = None
    mode_hint: int | None = None
    symbol: str | None = None
    name: str | None = None
    long_name: str | None = None
    train_type: str | None = None  # e.g. "ICE", "RE"
    train_num: str | None = None
    train_name: str | None = None  # operator or branding, e.g. "Underground"

    def replace(self, **changes: object) -> "RawLine":
        """Return a copy with the given fields replaced."""
        return dataclasses.replace(self, **changes)  # type: ignore[arg-type]

    def describe(self) -> str:
        """Compact representation of the non-empty fields, for logging."""
        parts = [
            f"{field}={getattr(self, field)!r}"
            for field in RAW_LINE_FIELDS
            if getattr(self, field) is not None
        ]
        return " ".join(parts) or "<empty>"
