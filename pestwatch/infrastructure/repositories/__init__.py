"""Concrete repository implementations."""

from .file_weather_snapshot_repository import FileWeatherSnapshotRepository

__all__ = [
    "FileWeatherSnapshotRepository",
]
