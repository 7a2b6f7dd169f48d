"""Rule definition entity."""

from dataclasses import dataclass, field
from typing import Any, Dict, Tuple


@dataclass(frozen=True)
class RuleDefinition:
    """Knowledge attached to one advisory rule: what it says and when it fires."""

    name: str  # e.g., 'humidity', 'rain', 'favorable'
    alert: str
    pest_types: Tuple[str, ...] = ()
    recommendations: Tuple[str, ...] = ()
    thresholds: Dict[str, Any] = field(default_factory=dict, hash=False)
    enabled: bool = True

    @classmethod
    def from_dict(cls, name: str, definition: Dict[str, Any]) -> "RuleDefinition":
        """Create RuleDefinition from dictionary definition."""
        return cls(
            name=name,
            alert=definition["alert"],
            pest_types=tuple(definition.get("pest_types", ())),
            recommendations=tuple(definition.get("recommendations", ())),
            thresholds=dict(definition.get("thresholds", {})),
            enabled=definition.get("enabled", True),
        )

    def threshold(self, key: str) -> Any:
        """Get a threshold, failing loudly on configuration typos."""
        try:
            return self.thresholds[key]
        except KeyError:
            raise KeyError(f"Rule '{self.name}' has no threshold '{key}'") from None

    def __str__(self) -> str:
        return self.name
