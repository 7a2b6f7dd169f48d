"""Repository interfaces."""

from .weather_snapshot_repository import WeatherSnapshotRepository

__all__ = [
    "WeatherSnapshotRepository",
]
