"""Tests for EvaluatePestRiskUseCase."""

import math
from fractions import Fraction
import pytest
from config.settings import RULE_DEFINITIONS
from pestwatch.application.services.pest_advisory_service import evaluate
from pestwatch.domain.entities.risk_level import RiskLevel
from pestwatch.domain.entities.weather_snapshot import WeatherSnapshot
from pestwatch.domain.exceptions import InvalidInputError
from pestwatch.domain.use_cases.evaluate_pest_risk import EvaluatePestRiskUseCase

TEMPERATURES = [-50, 0, 10, 14, 15, 20, 25, 26, 28, 30, 31, 35, 60]
CONDITIONS = ["Clear", "Rain", "Clouds", "light rain", "Mist"]


@pytest.fixture
def use_case():
    definitions = {name: dict(data, enabled=name != "wind") for name, data in RULE_DEFINITIONS.items()}
    return EvaluatePestRiskUseCase(definitions)


def test_warm_humid_cloudy_day(use_case):
    """Test 28C, 75%, clouds is High with fungal and breeding pests."""
    result = use_case.execute(WeatherSnapshot(28, 75, "Clouds", 3.5))
    assert result.risk_level == RiskLevel.HIGH
    assert "Powdery Mildew" in result.pest_types
    assert "Thrips" in result.pest_types
    assert len(result.alerts) == 3
    assert result.alerts[0] == "High humidity levels detected - favorable for fungal diseases"
    assert len(result.recommendations) == 5


def test_favorable_day(use_case):
    """Test 20C, 40%, clear is Low with the favorable alert only."""
    result = use_case.execute(WeatherSnapshot(20, 40, "Clear"))
    assert result.risk_level == RiskLevel.LOW
    assert result.alerts == ("Current conditions are favorable for crop health",)
    assert result.recommendations == (
        "Maintain regular monitoring schedule",
        "Continue with preventive measures",
    )
    assert result.pest_types == ()


def test_hot_humid_rain_is_critical(use_case):
    """Test rain does not demote Critical set by humidity."""
    result = use_case.execute(WeatherSnapshot(35, 90, "Rain"))
    assert result.risk_level == RiskLevel.CRITICAL
    assert result.pest_types == (
        "Powdery Mildew",
        "Late Blight",
        "Downy Mildew",
        "Aphids",
        "Whiteflies",
        "Spider Mites",
        "Bacterial Wilt",
        "Root Rot",
        "Stem Borers",
    )


def test_favorable_override_beats_rain(use_case):
    """Test moderate, dry-air rain is still reported as Low."""
    result = use_case.execute(WeatherSnapshot(20, 50, "Heavy Rain"))
    assert result.risk_level == RiskLevel.LOW
    assert "Wet conditions increase disease spread risk" in result.alerts
    assert result.alerts[-1] == "Current conditions are favorable for crop health"
    assert "Root Rot" in result.pest_types


def test_no_rule_fires(use_case):
    """Test fallback alert and recommendation."""
    result = use_case.execute(WeatherSnapshot(10, 20, "Clear"))
    assert result.risk_level == RiskLevel.LOW
    assert result.alerts == ("No significant pest risks detected",)
    assert result.recommendations == ("Continue regular crop monitoring",)
    assert result.pest_types == ()


def test_custom_fallbacks():
    """Test fallback texts are configurable."""
    use_case = EvaluatePestRiskUseCase(
        {}, fallback_alert="All quiet", fallback_recommendation="Carry on"
    )
    result = use_case.execute(WeatherSnapshot(10, 20, "Clear"))
    assert result.alerts == ("All quiet",)
    assert result.recommendations == ("Carry on",)


def test_pest_types_are_deduplicated():
    """Test duplicate pests across rules keep first-seen order."""
    definitions = {
        "humidity": dict(RULE_DEFINITIONS["humidity"], pest_types=["Slugs", "Late Blight"]),
        "cloud": RULE_DEFINITIONS["cloud"],
    }
    result = EvaluatePestRiskUseCase(definitions).execute(WeatherSnapshot(20, 80, "Clouds"))
    assert result.pest_types == ("Slugs", "Late Blight", "Fungus Gnats", "Snails")


@pytest.mark.parametrize("condition", CONDITIONS)
@pytest.mark.parametrize("temperature", TEMPERATURES)
def test_outputs_never_empty_and_unique(use_case, temperature, condition):
    """Test alerts/recommendations are non-empty and pests unique."""
    for humidity in range(0, 101, 5):
        result = use_case.execute(WeatherSnapshot(temperature, humidity, condition))
        assert len(result.alerts) >= 1
        assert len(result.recommendations) >= 1
        assert len(result.pest_types) == len(set(result.pest_types))


@pytest.mark.parametrize("condition", CONDITIONS)
@pytest.mark.parametrize("temperature", TEMPERATURES)
def test_monotonic_in_humidity(use_case, temperature, condition):
    """Test rising humidity never lowers the level outside the favorable range."""
    previous = None
    for humidity in range(0, 101):
        level = use_case.execute(WeatherSnapshot(temperature, humidity, condition)).risk_level
        favorable = 15 <= temperature <= 25 and humidity < 60
        if favorable:
            assert level == RiskLevel.LOW
        elif previous is not None:
            assert level.rank >= previous.rank
        previous = level


def test_idempotent(use_case):
    """Test identical input yields identical output."""
    snapshot = WeatherSnapshot(28, 75, "Clouds", 3.5)
    first = use_case.execute(snapshot)
    second = use_case.execute(snapshot)
    assert first == second
    assert first.to_dict() == second.to_dict()


def test_condition_case_insensitive(use_case):
    """Test rain matching ignores case and surrounding words."""
    results = [
        use_case.execute(WeatherSnapshot(10, 20, condition))
        for condition in ["RAIN", "rain", "Rain Showers"]
    ]
    assert all(r.risk_level == RiskLevel.MEDIUM for r in results)
    assert results[0].alerts == results[1].alerts == results[2].alerts
    assert results[0].pest_types == ("Bacterial Wilt", "Root Rot", "Stem Borers")


@pytest.mark.parametrize(
    "temperature,humidity",
    [(-50, 0), (-50, 100), (60, 0), (60, 100), (25, 59.9), (30.0001, 85.0001)],
)
def test_extreme_values_are_valid(use_case, temperature, humidity):
    """Test extreme but finite readings evaluate without error."""
    result = use_case.execute(WeatherSnapshot(temperature, humidity, "Thunderstorm"))
    assert isinstance(result.risk_level, RiskLevel)


@pytest.mark.parametrize(
    "snapshot,field",
    [
        (WeatherSnapshot("28", 75, "Clouds"), "temperature"),
        (WeatherSnapshot(None, 75, "Clouds"), "temperature"),
        (WeatherSnapshot(math.nan, 75, "Clouds"), "temperature"),
        (WeatherSnapshot(Fraction(10**400, 3), 75, "Clouds"), "temperature"),
        (WeatherSnapshot(28, math.inf, "Clouds"), "humidity"),
        (WeatherSnapshot(28, True, "Clouds"), "humidity"),
        (WeatherSnapshot(28, 75, None), "condition"),
        (WeatherSnapshot(28, 75, 3), "condition"),
        (WeatherSnapshot(28, 75, "Clouds", -1), "wind_speed"),
        (WeatherSnapshot(28, 75, "Clouds", "calm"), "wind_speed"),
    ],
)
def test_invalid_input(use_case, snapshot, field):
    """Test malformed snapshots raise InvalidInputError."""
    with pytest.raises(InvalidInputError) as exc_info:
        use_case.execute(snapshot)
    assert exc_info.value.field == field


def test_invalid_input_is_value_error(use_case):
    """Test InvalidInputError can be caught as ValueError."""
    with pytest.raises(ValueError):
        use_case.execute({"temperature": 28, "humidity": 75, "condition": "Clouds"})


def test_module_level_evaluate():
    """Test evaluate() uses the default rule definitions."""
    result = evaluate(WeatherSnapshot(35, 90, "Rain"))
    assert result.risk_level == RiskLevel.CRITICAL
    assert result.to_dict()["riskLevel"] == "Critical"


def test_exact_and_big_numbers(use_case):
    """Test fractions and ints beyond float range are evaluated, not rejected."""
    favorable = use_case.execute(WeatherSnapshot(Fraction(41, 2), 40, "Clear"))
    assert favorable.risk_level == RiskLevel.LOW
    assert favorable.alerts == ("Current conditions are favorable for crop health",)

    hot = use_case.execute(WeatherSnapshot(10**400, 40, "Clear"))
    assert hot.risk_level == RiskLevel.MEDIUM
    assert hot.pest_types == ("Aphids", "Whiteflies", "Spider Mites")
