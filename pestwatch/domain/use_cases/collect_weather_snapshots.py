"""Use case for collecting weather snapshots."""

import logging
from typing import List
from ..entities.weather_snapshot import WeatherSnapshot
from ..repositories.weather_snapshot_repository import WeatherSnapshotRepository

logger = logging.getLogger(__name__)


class CollectWeatherSnapshotsUseCase:
    """Use case to collect weather snapshots from repository."""

    def __init__(self, repository: WeatherSnapshotRepository):
        """
        Initialize use case.

        Args:
            repository: Repository for weather snapshot access
        """
        self.repository = repository

    def execute(self) -> List[WeatherSnapshot]:
        """
        Execute the use case.

        Returns:
            List of WeatherSnapshot entities
        """
        logger.info(f"Collecting weather snapshots from {type(self.repository).__name__}")
        data = self.repository.get_snapshots()
        logger.info(f"Collected {len(data)} weather snapshots")
        return data
