import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional, Union

from pyptable.core.catalog import ElementCatalog
from pyptable.core.elements import ELEMENT_FIELDS
from pyptable.core.exceptions import ValidationError
from pyptable.data.elements import DEFAULT_DATASET_PATH
from pyptable.parsing.config.dataset_yaml_parser import ElementDatasetParser

logger = logging.getLogger(__name__)


def load_catalog(dataset_path: Optional[Union[str, Path]] = None) -> ElementCatalog:
    """
    Create an element catalog from a dataset file.

    This function is the main entry point for building catalogs. The dataset may be
    a YAML file (metadata plus an 'elements' list) or a CSV/Excel table with one
    element per row. Construction is all-or-nothing: either every record is valid
    and a complete catalog is returned, or a ValidationError lists what is wrong.
    Args:
        dataset_path: Path to the dataset file. Defaults to the bundled
            118-element table.
    Returns:
        The validated, immutable catalog
    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file type is unsupported or the file cannot be parsed
        ValidationError: If the dataset breaks a catalog invariant
    Examples:
        # Load the bundled periodic table
        catalog = load_catalog()
        iron = catalog.by_symbol('Fe')

        # Load a custom table
        catalog = load_catalog('my_elements.csv')
    """
    dataset_path = DEFAULT_DATASET_PATH if dataset_path is None else dataset_path
    logger.info("Loading element catalog from: %s", dataset_path)
    try:
        parser = ElementDatasetParser(dataset_path)
        catalog = parser.create_catalog()
        logger.info("Successfully loaded catalog %s with %d elements", catalog.name, len(catalog))
        return catalog
    except Exception as e:
        logger.error("Failed to load element catalog from %s: %s", dataset_path, e)
        raise


@lru_cache(maxsize=1)
def default_catalog() -> ElementCatalog:
    """
    The catalog built from the bundled dataset.
    Built on first use and shared afterwards; callers only ever see a fully
    constructed catalog.
    """
    return load_catalog(DEFAULT_DATASET_PATH)


def get_supported_fields() -> list:
    """
    Returns the names of all element record fields.
    Returns:
        List of strings representing valid field names for dataset records.
    """
    return list(ELEMENT_FIELDS)


def validate_dataset_file(dataset_path: Union[str, Path]) -> bool:
    """
    Validate a dataset file without keeping the catalog.
    Args:
        dataset_path: Path to the dataset file to validate
    Returns:
        True if the file is valid
    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file cannot be parsed
        ValidationError: If the records break a catalog invariant
    """
    logger.info("Validating dataset file: %s", dataset_path)
    try:
        ElementDatasetParser(dataset_path).create_catalog()
        logger.info("Dataset validation successful for: %s", dataset_path)
        return True
    except FileNotFoundError as e:
        logger.error("Dataset file not found: %s", dataset_path)
        raise FileNotFoundError(f"Dataset file not found: {dataset_path}") from e
    except ValidationError:
        logger.error("Dataset validation failed for %s", dataset_path)
        raise


def get_dataset_info(dataset_path: Optional[Union[str, Path]] = None) -> dict:
    """
    Get basic information about a dataset without building a catalog.
    Args:
        dataset_path: Path to the dataset file, defaults to the bundled table
    Returns:
        Dictionary with the dataset name, version and source, the number of
        records, the atomic-number span and counts per block and phase
    Example:
        info = get_dataset_info()
        print(f"Dataset: {info['name']} ({info['total_records']} records)")
    """
    dataset_path = DEFAULT_DATASET_PATH if dataset_path is None else dataset_path
    try:
        return ElementDatasetParser(dataset_path).summarize()
    except Exception as e:
        logger.error("Failed to get dataset info from %s: %s", dataset_path, e)
        raise
