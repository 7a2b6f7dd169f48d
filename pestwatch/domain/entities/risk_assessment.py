"""Risk assessment entity."""

from dataclasses import dataclass
from typing import Any, Dict, Tuple
from .risk_level import RiskLevel


@dataclass(frozen=True)
class RiskAssessment:
    """Advisory bundle produced by one evaluation of a weather snapshot."""

    risk_level: RiskLevel
    alerts: Tuple[str, ...]
    recommendations: Tuple[str, ...]
    pest_types: Tuple[str, ...]

    @property
    def badge_variant(self) -> str:
        return self.risk_level.badge_variant()

    @property
    def requires_warning(self) -> bool:
        """True when the advisory should be pushed as a warning notification."""
        return self.risk_level in (RiskLevel.HIGH, RiskLevel.CRITICAL)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the JSON-ready wire shape."""
        return {
            "riskLevel": self.risk_level.value,
            "alerts": list(self.alerts),
            "recommendations": list(self.recommendations),
            "pestTypes": list(self.pest_types),
        }

    def __str__(self) -> str:
        return f"{self.risk_level.value}: {', '.join(self.pest_types) or 'no pests'}"
