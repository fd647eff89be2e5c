"""Tabular dataset input."""

from .data_handler import load_element_records

__all__ = ["load_element_records"]
