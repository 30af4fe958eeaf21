"""Line domain model."""

from dataclasses import dataclass

from transit_agencies.domain.models.transport_mode import UNKNOWN_CODE, TransportMode

# Display order of product codes; unknown codes sort last.
PRODUCT_ORDER = "IRSUTBPFC?"


@dataclass(frozen=True)
class Line:
    """Canonical line. Mode and label may be unknown."""

    id: str | None
    network: str | None
    mode: TransportMode | None
    label: str | None

    @property
    def category(self) -> str:
        """Category character used for style lookups."""
        return self.mode.code if self.mode else UNKNOWN_CODE

    def sort_key(self) -> tuple[int, str]:
        """Key ordering lines by product, then by label."""
        index = PRODUCT_ORDER.find(self.category)
        return (index if index >= 0 else len(PRODUCT_ORDER), self.label or "")

    def __str__(self) -> str:
        return f"{self.category}{self.label or ''}"
