"""Weather-driven pest and disease risk advisory."""

from .application.services.pest_advisory_service import PestAdvisoryService, evaluate
from .domain.entities import RiskAssessment, RiskLevel, WeatherSnapshot
from .domain.exceptions import InvalidInputError

__version__ = "1.0.0"

__all__ = [
    "PestAdvisoryService",
    "evaluate",
    "RiskAssessment",
    "RiskLevel",
    "WeatherSnapshot",
    "InvalidInputError",
]
