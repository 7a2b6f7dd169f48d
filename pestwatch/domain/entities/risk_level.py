"""Risk level enumeration."""

from enum import Enum
from typing import Dict, Optional

DEFAULT_BADGE_VARIANTS: Dict[str, str] = {
    "critical": "destructive",
    "high": "destructive",
    "medium": "default",
    "low": "secondary",
}


class RiskLevel(str, Enum):
    """Ordered pest/disease risk classification: Low < Medium < High < Critical."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    CRITICAL = "Critical"

    @property
    def rank(self) -> int:
        """Position in the ordering, Low being 0."""
        return list(RiskLevel).index(self)

    def escalate(self, other: "RiskLevel") -> "RiskLevel":
        """Return the higher of the two levels."""
        return other if other.rank > self.rank else self

    def badge_variant(self, mapping: Optional[Dict[str, str]] = None) -> str:
        """Display variant used by the advisory badges."""
        return severity_badge_variant(self.value, mapping)

    @classmethod
    def from_label(cls, label: str) -> "RiskLevel":
        """Parse a level name case-insensitively."""
        for level in cls:
            if level.value.lower() == label.strip().lower():
                return level
        raise ValueError(f"Unknown risk level: {label}")


def severity_badge_variant(
    severity: str,
    mapping: Optional[Dict[str, str]] = None,
    default: str = "outline",
) -> str:
    """
    Map a severity label to a badge variant.

    Args:
        severity: Severity or risk level name, any case
        mapping: Lower-case severity -> variant table (default table if omitted)
        default: Variant for unrecognized severities

    Returns:
        Badge variant name
    """
    table = DEFAULT_BADGE_VARIANTS if mapping is None else mapping
    if not isinstance(severity, str):
        return default
    return table.get(severity.strip().lower(), default)
