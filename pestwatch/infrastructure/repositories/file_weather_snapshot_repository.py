"""File-based weather snapshot repository implementation."""

import logging
from pathlib import Path
from typing import Any, List
import pandas as pd
from ...domain.entities.weather_snapshot import WeatherSnapshot
from ...domain.repositories.weather_snapshot_repository import WeatherSnapshotRepository

logger = logging.getLogger(__name__)

SUPPORTED_SUFFIXES = (".csv", ".xlsx")
NUMERIC_COLUMNS = ["temperature", "humidity", "wind_speed"]
REQUIRED_COLUMNS = ["temperature", "humidity", "condition"]


class FileWeatherSnapshotRepository(WeatherSnapshotRepository):
    """Repository for weather snapshots stored in CSV or Excel files."""

    def __init__(self, data_file: str):
        """
        Initialize repository.

        Args:
            data_file: Path to CSV/Excel file with columns temperature, humidity,
                condition and optionally wind_speed (or windSpeed)
        """
        self.data_file = Path(data_file)

        if not self.data_file.exists():
            raise FileNotFoundError(f"Weather snapshot file not found: {data_file}")
        if self.data_file.suffix.lower() not in SUPPORTED_SUFFIXES:
            raise ValueError(f"Unsupported file type: {self.data_file.suffix}")

    def load_frame(self) -> pd.DataFrame:
        """Load the raw table with normalized columns."""
        logger.info(f"Loading weather snapshots from {self.data_file}")

        try:
            if self.data_file.suffix.lower() == ".xlsx":
                df = pd.read_excel(self.data_file, engine="openpyxl")
            else:
                df = pd.read_csv(self.data_file)
        except Exception as e:
            logger.error(f"Error loading weather snapshots: {e}")
            raise

        df.columns = [str(c).strip() for c in df.columns]
        if "windSpeed" in df.columns and "wind_speed" in df.columns:
            raise ValueError(
                f"Both 'wind_speed' and 'windSpeed' columns in {self.data_file}, keep one"
            )
        df = df.rename(columns={"windSpeed": "wind_speed"})

        missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
        if missing:
            raise ValueError(f"Missing required columns in {self.data_file}: {missing}")

        # Unparseable cells become NaN and are rejected later by validation
        for col in NUMERIC_COLUMNS:
            if col in df.columns:
                df[col] = pd.to_numeric(df[col], errors="coerce")

        return df

    def get_snapshots(self) -> List[WeatherSnapshot]:
        """Load weather snapshots from file."""
        df = self.load_frame()

        result = []
        for _, row in df.iterrows():
            snapshot = WeatherSnapshot(
                temperature=_cell(row["temperature"], float),
                humidity=_cell(row["humidity"], float),
                condition=_cell(row["condition"], str),
                wind_speed=_cell(row.get("wind_speed"), float),
            )
            result.append(snapshot)

        logger.info(f"Loaded {len(result)} weather snapshots")
        return result


def _cell(value: Any, kind: type) -> Any:
    """Convert a table cell, mapping missing values to None."""
    if value is None or pd.isna(value):
        return None
    return kind(value)
