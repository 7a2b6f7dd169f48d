"""Domain errors."""

from typing import Optional


class InvalidInputError(ValueError):
    """Raised when a weather snapshot fails basic type/range sanity."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field
