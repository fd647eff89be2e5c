"""
PyPTable - A validated, read-only periodic table of the chemical elements.

This library provides an immutable catalog of element records (atomic number,
symbol, name, position in the table, atomic weight, particle counts, melting and
boiling points, density, electronegativity, block and phase) that can be looked
up by atomic number, symbol or name and filtered by classification or numeric range.

Key Features:
- Complete bundled 118-element dataset
- YAML, CSV and Excel dataset loading with all-or-nothing validation
- Unknown physical values represented as None, never as magic numbers
- Lookups that return an explicit NotFound marker instead of raising
- Lazy, restartable filtering and pandas export

Main Components:
- Core: Element records, Block and Phase enums, the ElementCatalog
- Parsing: Dataset loading and record validation
- Data: The bundled dataset and validation constants
"""

# Enhanced version handling with multiple fallbacks
try:
    from ._version import version as __version__
except ImportError:
    try:
        from importlib.metadata import version, PackageNotFoundError
        __version__ = version("pyptable")
    except (ImportError, PackageNotFoundError):
        __version__ = "0.1.0+unknown"  # Fallback version

# Core definitions
from .core.elements import Element, Block, Phase
from .core.catalog import ElementCatalog, ElementSelection
from .core.lookup import NotFound, is_found
from .core.exceptions import CatalogError, ValidationError

# Main API functions
from .parsing.api import (
    load_catalog,
    default_catalog,
    get_supported_fields,
    validate_dataset_file,
    get_dataset_info
)

__all__ = [
    # Version
    '__version__',

    # Core classes
    'Element',
    'Block',
    'Phase',
    'ElementCatalog',
    'ElementSelection',
    'NotFound',
    'is_found',

    # Errors
    'CatalogError',
    'ValidationError',

    # Main API
    'load_catalog',
    'default_catalog',
    'get_supported_fields',
    'validate_dataset_file',
    'get_dataset_info'
]

# Package metadata
__description__ = "Validated, read-only periodic table catalog"
