"""Example usage of the pest risk advisory system."""

import logging
from pestwatch.application.services.pest_advisory_service import PestAdvisoryService
from pestwatch.domain.entities.weather_snapshot import WeatherSnapshot
from pestwatch.domain.exceptions import InvalidInputError

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def main():
    """Example usage."""
    service = PestAdvisoryService()

    # Example 1: Assess a single reading
    print("=" * 60)
    print("Example 1: Assessing a warm, humid, cloudy day")
    print("=" * 60)
    assessment = service.assess(
        WeatherSnapshot(temperature=28, humidity=75, condition="Clouds", wind_speed=3.5)
    )
    print(f"\nRisk level: {assessment.risk_level.value} ({assessment.badge_variant})")
    for alert in assessment.alerts:
        print(f"  ! {alert}")
    print(f"  Pests: {', '.join(assessment.pest_types)}")

    # Example 2: Invalid provider data, with and without the demo fallback
    print("\n" + "=" * 60)
    print("Example 2: Handling invalid input")
    print("=" * 60)
    payload = {"temperature": "n/a", "humidity": 60, "condition": "Clear"}
    try:
        service.assess_payload(payload)
    except InvalidInputError as e:
        logger.error(f"Rejected: {e} (field={e.field})")

    demo = service.assess_payload(payload, fallback_to_demo=True)
    print(f"\nDemo advisory: {demo.to_dict()}")

    # Example 3: Several readings at once
    print("\n" + "=" * 60)
    print("Example 3: Batch assessment")
    print("=" * 60)
    df = service.assess_batch(
        [
            WeatherSnapshot(temperature=20, humidity=40, condition="Clear"),
            WeatherSnapshot(temperature=35, humidity=90, condition="Rain"),
            WeatherSnapshot(temperature=20, humidity=50, condition="Heavy Rain"),
        ]
    )
    print(df[["condition", "risk_level", "badge", "pest_types"]].to_string(index=False))


if __name__ == "__main__":
    main()
