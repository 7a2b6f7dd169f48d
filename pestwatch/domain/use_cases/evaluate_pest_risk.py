"""Use case for turning a weather snapshot into a pest risk assessment."""

import logging
from numbers import Integral, Real
from typing import Any, Dict, List, Optional
import numpy as np
from ..entities.risk_assessment import RiskAssessment
from ..entities.rule_definition import RuleDefinition
from ..entities.weather_snapshot import WeatherSnapshot
from ..exceptions import InvalidInputError
from ..rules import Rule, RuleState, build_rule_chain

logger = logging.getLogger(__name__)

FALLBACK_ALERT = "No significant pest risks detected"
FALLBACK_RECOMMENDATION = "Continue regular crop monitoring"


class EvaluatePestRiskUseCase:
    """Use case to evaluate pest/disease risk for one weather snapshot."""

    def __init__(
        self,
        rule_definitions: Dict[str, Dict[str, Any]],
        fallback_alert: str = FALLBACK_ALERT,
        fallback_recommendation: str = FALLBACK_RECOMMENDATION,
    ):
        """
        Initialize use case.

        Args:
            rule_definitions: Dictionary mapping rule names to their definition
                (alert, pest_types, recommendations, thresholds, enabled)
            fallback_alert: Alert reported when no rule fired
            fallback_recommendation: Recommendation reported when no rule advised anything
        """
        self.rule_definitions = {
            name: RuleDefinition.from_dict(name, definition)
            for name, definition in rule_definitions.items()
        }
        self.rules: List[Rule] = build_rule_chain(self.rule_definitions)
        self.fallback_alert = fallback_alert
        self.fallback_recommendation = fallback_recommendation

    @staticmethod
    def _check_number(value: Any, field: str, minimum: Optional[float] = None) -> None:
        if isinstance(value, bool) or not isinstance(value, Real):
            raise InvalidInputError(f"{field} must be a number, got {value!r}", field=field)
        if not isinstance(value, Integral):
            try:
                finite = bool(np.isfinite(float(value)))
            except (OverflowError, TypeError, ValueError):
                finite = False
            if not finite:
                raise InvalidInputError(f"{field} must be finite, got {value!r}", field=field)
        if minimum is not None and value < minimum:
            raise InvalidInputError(f"{field} must be >= {minimum}, got {value!r}", field=field)

    def validate(self, snapshot: WeatherSnapshot) -> None:
        """
        Check basic type/range sanity of a snapshot.

        Raises:
            InvalidInputError: If temperature or humidity is not a finite number,
                condition is not a string, or wind speed is not a finite number >= 0
        """
        if not isinstance(snapshot, WeatherSnapshot):
            raise InvalidInputError(f"Expected WeatherSnapshot, got {type(snapshot).__name__}")
        self._check_number(snapshot.temperature, "temperature")
        self._check_number(snapshot.humidity, "humidity")
        if not isinstance(snapshot.condition, str):
            raise InvalidInputError(
                f"condition must be a string, got {snapshot.condition!r}", field="condition"
            )
        if snapshot.wind_speed is not None:
            self._check_number(snapshot.wind_speed, "wind_speed", minimum=0)

    def execute(self, snapshot: WeatherSnapshot) -> RiskAssessment:
        """
        Execute the rule chain.

        Args:
            snapshot: Weather reading to evaluate

        Returns:
            RiskAssessment with non-empty alerts and recommendations and
            de-duplicated pest types
        """
        self.validate(snapshot)

        state = RuleState()
        for rule in self.rules:
            state = rule(snapshot, state)

        logger.debug(
            f"Evaluated {snapshot}: level={state.risk_level.value}, fired={list(state.fired)}"
        )

        return RiskAssessment(
            risk_level=state.risk_level,
            alerts=state.alerts or (self.fallback_alert,),
            recommendations=state.recommendations or (self.fallback_recommendation,),
            pest_types=tuple(dict.fromkeys(state.pest_types)),
        )
