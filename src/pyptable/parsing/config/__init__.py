"""Dataset parsing and key definitions."""

from .dataset_yaml_parser import ElementDatasetParser, YAMLFileParser, BaseFileParser
from . import dataset_keys as _dk

# Re-export everything defined in dataset_keys.__all__
globals().update({k: getattr(_dk, k) for k in _dk.__all__})

__all__ = [
    "ElementDatasetParser",
    "YAMLFileParser",
    "BaseFileParser",
    *_dk.__all__,
]
