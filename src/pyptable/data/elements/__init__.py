"""Bundled periodic table dataset."""

from pathlib import Path

# The dataset is loaded through pyptable.parsing.api rather than imported as Python objects
DEFAULT_DATASET_PATH = Path(__file__).parent / "elements.yaml"

__all__ = ["DEFAULT_DATASET_PATH"]
