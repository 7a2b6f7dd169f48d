"""Domain entities."""

from .risk_level import RiskLevel, severity_badge_variant
from .weather_snapshot import WeatherSnapshot
from .risk_assessment import RiskAssessment
from .rule_definition import RuleDefinition

__all__ = [
    "RiskLevel",
    "severity_badge_variant",
    "WeatherSnapshot",
    "RiskAssessment",
    "RuleDefinition",
]
