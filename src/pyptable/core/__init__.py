"""
Core data structures for the element catalog.

This module contains the element record type, its classification enums,
the catalog itself and the lookup result and error types it reports with.
"""

from .elements import Element, Block, Phase
from .catalog import ElementCatalog, ElementSelection
from .lookup import NotFound, is_found
from .exceptions import CatalogError, ValidationError

__all__ = [
    "Element",
    "Block",
    "Phase",
    "ElementCatalog",
    "ElementSelection",
    "NotFound",
    "is_found",
    "CatalogError",
    "ValidationError"
]
