"""Use cases - core business operations."""

from .collect_weather_snapshots import CollectWeatherSnapshotsUseCase
from .evaluate_pest_risk import EvaluatePestRiskUseCase

__all__ = [
    "CollectWeatherSnapshotsUseCase",
    "EvaluatePestRiskUseCase",
]
