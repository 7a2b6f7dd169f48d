"""Request/response models for the advisory surfaces."""

from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..domain.entities.risk_assessment import RiskAssessment
from ..domain.entities.weather_snapshot import WeatherSnapshot
from ..domain.exceptions import InvalidInputError


class SnapshotRequest(BaseModel):
    """Weather reading as delivered by the weather provider."""

    model_config = ConfigDict(strict=True, populate_by_name=True, frozen=True)

    temperature: float = Field(..., description="Air temperature in Celsius")
    humidity: float = Field(..., description="Relative humidity in percent (0-100)")
    condition: str = Field(..., description="Short condition label (e.g., 'Rain', 'Clouds')")
    wind_speed: Optional[float] = Field(
        None, alias="windSpeed", ge=0, description="Wind speed in m/s"
    )

    @classmethod
    def parse_payload(cls, payload) -> "SnapshotRequest":
        """Validate a decoded JSON payload, raising InvalidInputError on failure."""
        try:
            return cls.model_validate(payload)
        except ValidationError as e:
            first = e.errors()[0]
            field = ".".join(str(p) for p in first["loc"]) or None
            raise InvalidInputError(f"Invalid snapshot payload: {first['msg']}", field=field) from e

    def to_entity(self) -> WeatherSnapshot:
        return WeatherSnapshot(
            temperature=self.temperature,
            humidity=self.humidity,
            condition=self.condition,
            wind_speed=self.wind_speed,
        )


class AssessmentResponse(BaseModel):
    """Risk assessment in its wire shape."""

    model_config = ConfigDict(populate_by_name=True)

    risk_level: str = Field(..., alias="riskLevel")
    alerts: List[str]
    recommendations: List[str]
    pest_types: List[str] = Field(..., alias="pestTypes")
    badge: Optional[str] = None

    @classmethod
    def from_entity(cls, assessment: RiskAssessment, badge: Optional[str] = None) -> "AssessmentResponse":
        return cls(
            risk_level=assessment.risk_level.value,
            alerts=list(assessment.alerts),
            recommendations=list(assessment.recommendations),
            pest_types=list(assessment.pest_types),
            badge=badge,
        )

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, indent=2)
