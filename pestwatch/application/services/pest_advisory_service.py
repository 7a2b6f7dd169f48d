"""Service orchestrating weather-driven pest risk advisories."""

import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional
import pandas as pd

from ...domain.entities.risk_assessment import RiskAssessment
from ...domain.entities.risk_level import severity_badge_variant
from ...domain.entities.weather_snapshot import WeatherSnapshot
from ...domain.exceptions import InvalidInputError
from ...domain.repositories.weather_snapshot_repository import WeatherSnapshotRepository

# Use cases
from ...domain.use_cases.collect_weather_snapshots import CollectWeatherSnapshotsUseCase
from ...domain.use_cases.evaluate_pest_risk import EvaluatePestRiskUseCase

from config.settings import (
    RULE_DEFINITIONS,
    FALLBACK_ALERT,
    FALLBACK_RECOMMENDATION,
    SEVERITY_BADGE_VARIANTS,
    DEFAULT_BADGE_VARIANT,
    DEMO_SNAPSHOT,
)

logger = logging.getLogger(__name__)

BATCH_COLUMNS = [
    "temperature",
    "humidity",
    "condition",
    "wind_speed",
    "risk_level",
    "badge",
    "alerts",
    "recommendations",
    "pest_types",
    "error",
]


class PestAdvisoryService:
    """Evaluates weather snapshots and shapes the advisories for callers."""

    def __init__(
        self,
        rule_definitions: Dict[str, Dict[str, Any]] = RULE_DEFINITIONS,
        severity_badges: Optional[Dict[str, str]] = None,
        demo_snapshot: Optional[Mapping[str, Any]] = None,
        snapshot_repo: Optional[WeatherSnapshotRepository] = None,
        fallback_alert: str = FALLBACK_ALERT,
        fallback_recommendation: str = FALLBACK_RECOMMENDATION,
    ):
        self.severity_badges = severity_badges or SEVERITY_BADGE_VARIANTS
        self.demo_snapshot = WeatherSnapshot.from_dict(demo_snapshot or DEMO_SNAPSHOT)
        self.snapshot_repo = snapshot_repo

        self.evaluate_uc = EvaluatePestRiskUseCase(
            rule_definitions,
            fallback_alert=fallback_alert,
            fallback_recommendation=fallback_recommendation,
        )
        self.collect_snapshots_uc = (
            CollectWeatherSnapshotsUseCase(snapshot_repo) if snapshot_repo else None
        )

    def assess(self, snapshot: WeatherSnapshot) -> RiskAssessment:
        """Evaluate one snapshot."""
        assessment = self.evaluate_uc.execute(snapshot)
        if assessment.requires_warning:
            logger.warning(
                f"{assessment.risk_level.value} pest risk for {snapshot}: {assessment.alerts[0]}"
            )
        return assessment

    def assess_payload(
        self, payload: Mapping[str, Any], fallback_to_demo: bool = False
    ) -> RiskAssessment:
        """
        Evaluate a raw provider record.

        Args:
            payload: Mapping with temperature, humidity, condition and optional windSpeed
            fallback_to_demo: Evaluate the demo snapshot instead of raising on invalid input

        Returns:
            RiskAssessment for the payload, or for the demo snapshot

        Raises:
            InvalidInputError: If the payload is invalid and no fallback was requested
        """
        try:
            return self.assess(WeatherSnapshot.from_dict(payload))
        except InvalidInputError as e:
            if not fallback_to_demo:
                raise
            logger.warning(f"Invalid weather input ({e}), using demo data")
            return self.assess(self.demo_snapshot)

    def assess_batch(self, snapshots: Optional[List[WeatherSnapshot]] = None) -> pd.DataFrame:
        """
        Evaluate many snapshots into a table, one row per snapshot.

        Invalid snapshots get a row with ``error`` set instead of advice.
        """
        if snapshots is None:
            if self.collect_snapshots_uc is None:
                raise RuntimeError("No snapshot repository configured")
            snapshots = self.collect_snapshots_uc.execute()

        logger.info(f"Assessing {len(snapshots)} snapshots")

        rows = []
        for snapshot in snapshots:
            row = {
                "temperature": snapshot.temperature,
                "humidity": snapshot.humidity,
                "condition": snapshot.condition,
                "wind_speed": snapshot.wind_speed,
            }
            try:
                assessment = self.evaluate_uc.execute(snapshot)
            except InvalidInputError as e:
                logger.warning(f"Skipping invalid snapshot: {e}")
                row["error"] = str(e)
                rows.append(row)
                continue

            row.update(
                {
                    "risk_level": assessment.risk_level.value,
                    "badge": self.badge_for(assessment.risk_level.value),
                    "alerts": "; ".join(assessment.alerts),
                    "recommendations": "; ".join(assessment.recommendations),
                    "pest_types": ", ".join(assessment.pest_types),
                    "error": None,
                }
            )
            rows.append(row)

        df = pd.DataFrame(rows, columns=BATCH_COLUMNS)
        n_errors = int(df["error"].notna().sum())
        logger.info(f"Assessed {len(df) - n_errors} snapshots, {n_errors} invalid")
        return df

    def export_batch(self, df: pd.DataFrame, output_file: str) -> Path:
        """Write a batch table to CSV or Excel."""
        path = Path(output_file)
        path.parent.mkdir(parents=True, exist_ok=True)

        if path.suffix.lower() == ".xlsx":
            df.to_excel(path, index=False, engine="openpyxl")
        else:
            df.to_csv(path, index=False)

        logger.info(f"Exported {len(df)} assessments to {path}")
        return path

    def badge_for(self, severity: str) -> str:
        """Badge variant for a severity or risk level label."""
        return severity_badge_variant(severity, self.severity_badges, DEFAULT_BADGE_VARIANT)


def evaluate(snapshot: WeatherSnapshot) -> RiskAssessment:
    """Evaluate a snapshot against the default rule definitions."""
    return EvaluatePestRiskUseCase(
        RULE_DEFINITIONS,
        fallback_alert=FALLBACK_ALERT,
        fallback_recommendation=FALLBACK_RECOMMENDATION,
    ).execute(snapshot)
