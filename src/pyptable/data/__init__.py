"""
Element data and catalog constants.

This package provides the bundled periodic table dataset and the constants
used to validate and load element records throughout PyPTable.
"""

from .constants.processing_constants import CatalogConstants, ErrorMessages, FileConstants
from .elements import DEFAULT_DATASET_PATH

__all__ = [
    "CatalogConstants",
    "ErrorMessages",
    "FileConstants",
    "DEFAULT_DATASET_PATH",
]
