"""Application settings and configuration."""

import os
from pathlib import Path
from typing import Dict, Any

# Base directory
BASE_DIR = Path(__file__).parent.parent

# Data paths
DATA_DIR = BASE_DIR / "data"
EXPORT_DIR = DATA_DIR / "exports"

# Logging
LOG_LEVEL = os.getenv("PESTWATCH_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Optional rules
WIND_RULE_ENABLED = os.getenv("PESTWATCH_WIND_RULE_ENABLED", "false").lower() == "true"

# Rule definitions, in evaluation order.
# Threshold comparisons are strict unless the key says min/max.
RULE_DEFINITIONS: Dict[str, Dict[str, Any]] = {
    "humidity": {
        "alert": "High humidity levels detected - favorable for fungal diseases",
        "pest_types": ["Powdery Mildew", "Late Blight", "Downy Mildew"],
        "recommendations": [
            "Apply fungicide preventively",
            "Improve air circulation around plants",
        ],
        "thresholds": {"humidity_above": 70, "critical_humidity_above": 85},
    },
    "heat": {
        "alert": "High temperature may stress plants and attract pests",
        "pest_types": ["Aphids", "Whiteflies", "Spider Mites"],
        "recommendations": [
            "Monitor for heat-loving pests",
            "Ensure adequate irrigation",
        ],
        "thresholds": {"temperature_above": 30},
    },
    "warm_humid": {
        "alert": "Warm and humid conditions ideal for pest breeding",
        "pest_types": ["Thrips", "Leaf Miners", "Fruit Flies"],
        "recommendations": [
            "Inspect crops regularly",
            "Consider organic pest control methods",
        ],
        "thresholds": {"temperature_above": 25, "humidity_above": 60},
    },
    "rain": {
        "alert": "Wet conditions increase disease spread risk",
        "pest_types": ["Bacterial Wilt", "Root Rot", "Stem Borers"],
        "recommendations": [
            "Avoid overhead irrigation",
            "Ensure proper drainage",
        ],
        "thresholds": {"condition_keyword": "rain"},
    },
    "cloud": {
        "alert": "Overcast conditions with high humidity - monitor closely",
        "pest_types": ["Fungus Gnats", "Slugs", "Snails"],
        "recommendations": ["Check underside of leaves for pests"],
        "thresholds": {"condition_keyword": "cloud", "humidity_above": 65},
    },
    "wind": {
        "alert": "Moderate winds may spread airborne pests and diseases",
        "pest_types": [],
        "recommendations": ["Check for wind-damaged plants that attract pests"],
        "thresholds": {"wind_speed_above": 5},
        "enabled": WIND_RULE_ENABLED,
    },
    "favorable": {
        "alert": "Current conditions are favorable for crop health",
        "pest_types": [],
        "recommendations": [
            "Maintain regular monitoring schedule",
            "Continue with preventive measures",
        ],
        "thresholds": {"temperature_min": 15, "temperature_max": 25, "humidity_below": 60},
    },
}

# Used when no rule produced an alert / recommendation
FALLBACK_ALERT = "No significant pest risks detected"
FALLBACK_RECOMMENDATION = "Continue regular crop monitoring"

# Severity -> badge variant (keys are lower-case)
SEVERITY_BADGE_VARIANTS = {
    "critical": "destructive",
    "high": "destructive",
    "medium": "default",
    "low": "secondary",
}
DEFAULT_BADGE_VARIANT = "outline"

# Reading evaluated when a caller asks for demo data instead of an error
DEMO_SNAPSHOT = {
    "temperature": 28,
    "humidity": 75,
    "condition": "Clouds",
    "windSpeed": 3.5,
}

# CLI settings
CLI_SETTINGS = {
    "prog": "pestwatch",
    "description": "Weather-driven pest and disease risk advisory",
    "version": "1.0.0",
}
