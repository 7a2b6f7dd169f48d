"""Advisory rules: pure functions over an immutable accumulator state.

Every rule has the signature ``rule(snapshot, state) -> state`` once its
``RuleDefinition`` is bound. Rules run in a fixed order; each may append
alerts, recommendations and pest types and may raise the risk level. Only the
favorable-conditions rule lowers it, and it does so unconditionally.
"""

from dataclasses import dataclass, replace
from functools import partial
from typing import Callable, Dict, List, Optional, Tuple
from .entities.risk_level import RiskLevel
from .entities.rule_definition import RuleDefinition
from .entities.weather_snapshot import WeatherSnapshot


@dataclass(frozen=True)
class RuleState:
    """Accumulated result of the rules applied so far."""

    risk_level: RiskLevel = RiskLevel.LOW
    alerts: Tuple[str, ...] = ()
    recommendations: Tuple[str, ...] = ()
    pest_types: Tuple[str, ...] = ()
    fired: Tuple[str, ...] = ()

    def fire(self, definition: RuleDefinition, risk_level: Optional[RiskLevel] = None) -> "RuleState":
        """Return a new state with the rule's advice appended."""
        return replace(
            self,
            risk_level=self.risk_level if risk_level is None else risk_level,
            alerts=self.alerts + (definition.alert,),
            recommendations=self.recommendations + definition.recommendations,
            pest_types=self.pest_types + definition.pest_types,
            fired=self.fired + (definition.name,),
        )


Rule = Callable[[WeatherSnapshot, RuleState], RuleState]


def condition_matches(condition: str, keyword: str) -> bool:
    """Case-insensitive substring match ('light rain' matches 'rain')."""
    return keyword.lower() in condition.lower()


def humidity_rule(
    snapshot: WeatherSnapshot, state: RuleState, definition: RuleDefinition
) -> RuleState:
    """Fungal disease pressure from high humidity."""
    if not snapshot.humidity > definition.threshold("humidity_above"):
        return state
    if snapshot.humidity > definition.threshold("critical_humidity_above"):
        level = RiskLevel.CRITICAL
    else:
        level = RiskLevel.HIGH
    return state.fire(definition, state.risk_level.escalate(level))


def temperature_rule(
    snapshot: WeatherSnapshot,
    state: RuleState,
    heat: Optional[RuleDefinition] = None,
    warm_humid: Optional[RuleDefinition] = None,
) -> RuleState:
    """Heat stress, or failing that, warm-and-humid breeding conditions."""
    if heat is not None and snapshot.temperature > heat.threshold("temperature_above"):
        return state.fire(heat, state.risk_level.escalate(RiskLevel.MEDIUM))
    if (
        warm_humid is not None
        and snapshot.temperature > warm_humid.threshold("temperature_above")
        and snapshot.humidity > warm_humid.threshold("humidity_above")
    ):
        return state.fire(warm_humid, state.risk_level.escalate(RiskLevel.HIGH))
    return state


def rain_rule(
    snapshot: WeatherSnapshot, state: RuleState, definition: RuleDefinition
) -> RuleState:
    """Wet conditions; High and Critical are kept, anything lower becomes Medium."""
    if not condition_matches(snapshot.condition, definition.threshold("condition_keyword")):
        return state
    return state.fire(definition, state.risk_level.escalate(RiskLevel.MEDIUM))


def cloud_rule(
    snapshot: WeatherSnapshot, state: RuleState, definition: RuleDefinition
) -> RuleState:
    """Overcast and humid."""
    if not condition_matches(snapshot.condition, definition.threshold("condition_keyword")):
        return state
    if not snapshot.humidity > definition.threshold("humidity_above"):
        return state
    return state.fire(definition, state.risk_level.escalate(RiskLevel.MEDIUM))


def wind_rule(
    snapshot: WeatherSnapshot, state: RuleState, definition: RuleDefinition
) -> RuleState:
    """Airborne spread; advice only, the level is left alone."""
    if snapshot.wind_speed is None:
        return state
    if not snapshot.wind_speed > definition.threshold("wind_speed_above"):
        return state
    return state.fire(definition)


def favorable_rule(
    snapshot: WeatherSnapshot, state: RuleState, definition: RuleDefinition
) -> RuleState:
    """Moderate temperature with low humidity forces Low, whatever fired before."""
    in_range = (
        definition.threshold("temperature_min")
        <= snapshot.temperature
        <= definition.threshold("temperature_max")
    )
    if not (in_range and snapshot.humidity < definition.threshold("humidity_below")):
        return state
    return state.fire(definition, RiskLevel.LOW)


def build_rule_chain(definitions: Dict[str, RuleDefinition]) -> List[Rule]:
    """
    Bind rule definitions to their rule functions, in evaluation order.

    Args:
        definitions: Mapping of rule name to RuleDefinition. Missing or
            disabled rules are left out of the chain.

    Returns:
        Ordered list of rules
    """
    active = {name: d for name, d in definitions.items() if d.enabled}
    chain: List[Rule] = []

    if "humidity" in active:
        chain.append(partial(humidity_rule, definition=active["humidity"]))
    if "heat" in active or "warm_humid" in active:
        chain.append(
            partial(temperature_rule, heat=active.get("heat"), warm_humid=active.get("warm_humid"))
        )
    if "rain" in active:
        chain.append(partial(rain_rule, definition=active["rain"]))
    if "cloud" in active:
        chain.append(partial(cloud_rule, definition=active["cloud"]))
    if "wind" in active:
        chain.append(partial(wind_rule, definition=active["wind"]))
    if "favorable" in active:
        chain.append(partial(favorable_rule, definition=active["favorable"]))

    return chain
