"""
Dataset parsing and catalog creation for PyPTable.

This package handles YAML and tabular dataset loading, record validation,
and element catalog creation from dataset files.
"""

from .api import (load_catalog, default_catalog, get_supported_fields, validate_dataset_file,
                  get_dataset_info)
from .config.dataset_yaml_parser import ElementDatasetParser
from .validation.record_validator import build_element, build_elements, translate_unknown

__all__ = [
    'load_catalog',
    'default_catalog',
    'get_supported_fields',
    'validate_dataset_file',
    'get_dataset_info',
    'ElementDatasetParser',
    'build_element',
    'build_elements',
    'translate_unknown'
]
