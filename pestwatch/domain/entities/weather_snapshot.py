"""Weather snapshot entity."""

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class WeatherSnapshot:
    """A single point-in-time weather reading."""

    temperature: float  # Celsius
    humidity: float  # percentage
    condition: str  # e.g., 'Rain', 'Clear', 'Clouds'
    wind_speed: Optional[float] = None  # m/s

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "WeatherSnapshot":
        """Create WeatherSnapshot from a provider record (values are not coerced)."""
        wind_speed = data.get("windSpeed", data.get("wind_speed"))
        return cls(
            temperature=data.get("temperature"),
            humidity=data.get("humidity"),
            condition=data.get("condition"),
            wind_speed=wind_speed,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the provider record shape."""
        return {
            "temperature": self.temperature,
            "humidity": self.humidity,
            "condition": self.condition,
            "windSpeed": self.wind_speed,
        }

    def __str__(self) -> str:
        return f"{self.condition} {self.temperature}C {self.humidity}%"
