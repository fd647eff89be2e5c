"""Custom exceptions for pyptable core functionality."""
import logging
from typing import List, Optional

logger = logging.getLogger(__name__)


class CatalogError(Exception):
    """Base exception for all element catalog errors."""

    def __init__(self, message):
        super().__init__(message)
        logger.error("CatalogError raised: %s", message)


class ValidationError(CatalogError):
    """Exception raised when an element dataset violates a catalog invariant."""

    def __init__(self, message: str, errors: Optional[List[str]] = None):
        self.errors = list(errors) if errors else [message]
        if errors and len(errors) > 1:
            message = f"{message} ({len(errors)} problems):\n  - " + "\n  - ".join(errors)
        elif errors:
            message = f"{message}: {errors[0]}"
        super().__init__(message)
        logger.error("ValidationError raised with %d problem(s)", len(self.errors))
