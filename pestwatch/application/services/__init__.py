"""Application services."""

from .pest_advisory_service import PestAdvisoryService, evaluate

__all__ = [
    "PestAdvisoryService",
    "evaluate",
]
