"""Validation utilities for PyPTable."""

from .record_validator import build_element, build_elements, translate_unknown

__all__ = [
    "build_element",
    "build_elements",
    "translate_unknown",
]
