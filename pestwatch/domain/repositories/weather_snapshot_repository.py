"""Weather snapshot repository interface."""

from abc import ABC, abstractmethod
from typing import List
from ..entities.weather_snapshot import WeatherSnapshot


class WeatherSnapshotRepository(ABC):
    """Abstract repository for already-normalized weather readings."""

    @abstractmethod
    def get_snapshots(self) -> List[WeatherSnapshot]:
        """
        Retrieve weather snapshots.

        Returns:
            List of WeatherSnapshot entities, in source order
        """
        pass
