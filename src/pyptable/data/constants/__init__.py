"""Validation and file-processing constants for PyPTable."""

from .processing_constants import CatalogConstants, ErrorMessages, FileConstants

__all__ = [
    "CatalogConstants",
    "ErrorMessages",
    "FileConstants"
]
