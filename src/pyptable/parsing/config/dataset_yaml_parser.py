import logging
from collections import Counter
from difflib import get_close_matches
from pathlib import Path
from typing import Any, Dict, List, Union

from ruamel.yaml import YAML, constructor, scanner

from pyptable.core.catalog import ElementCatalog
from pyptable.core.exceptions import ValidationError
from pyptable.data.constants import FileConstants
from pyptable.parsing.config.dataset_keys import (ATOMIC_NUMBER_KEY, BLOCK_KEY, ELEMENTS_KEY, NAME_KEY,
                                                  PHASE_KEY, SOURCE_KEY, VERSION_KEY)
from pyptable.parsing.io.data_handler import load_element_records

logger = logging.getLogger(__name__)


class BaseFileParser:
    """Base class for parsing dataset files."""

    def __init__(self, config_path: Union[str, Path]) -> None:
        self.config_path = Path(config_path)
        self.base_dir = self.config_path.parent
        self._check_file()
        self.config = self._load_config()
        logger.info("Successfully loaded dataset from: %s", self.config_path)

    def _check_file(self) -> None:
        """Reject missing, unsupported or oversized files before reading them."""
        if not self.config_path.exists():
            logger.error("Dataset file not found: %s", self.config_path)
            raise FileNotFoundError(f"Dataset file not found: {self.config_path}")
        if not self.config_path.is_file():
            raise ValueError(f"Path is not a file: {self.config_path}")
        extension = self.config_path.suffix.lower()
        if extension not in FileConstants.SUPPORTED_EXTENSIONS:
            raise ValueError(f"Unsupported file type: '{extension}'. "
                             f"Supported types are: {FileConstants.SUPPORTED_EXTENSIONS}")
        file_size_mb = self.config_path.stat().st_size / (1024 * 1024)
        if file_size_mb > FileConstants.MAX_FILE_SIZE_MB:
            raise ValueError(f"File size ({file_size_mb:.2f} MB) exceeds the maximum limit "
                             f"of {FileConstants.MAX_FILE_SIZE_MB} MB.")

    def _load_config(self) -> Dict[str, Any]:
        raise NotImplementedError("Subclasses must implement _load_config method")


class YAMLFileParser(BaseFileParser):
    """Parser for YAML dataset files."""

    def _load_config(self) -> Dict[str, Any]:
        yaml = YAML(typ='safe')
        yaml.allow_duplicate_keys = False
        try:
            logger.debug("Loading YAML file: %s", self.config_path)
            with open(self.config_path, 'r', encoding=FileConstants.DEFAULT_ENCODING) as f:
                config = yaml.load(f)
            logger.debug("YAML file loaded successfully, found %d top-level keys", len(config) if config else 0)
            return config
        except constructor.DuplicateKeyError as e:
            logger.error("Duplicate key found in YAML file %s: %s", self.config_path, e)
            raise ValueError(f"Duplicate key in {self.config_path}: {str(e)}") from e
        except scanner.ScannerError as e:
            logger.error("YAML syntax error in file %s: %s", self.config_path, e)
            raise ValueError(f"YAML syntax error in {self.config_path}: {str(e)}") from e
        except Exception as e:
            logger.error("Unexpected error parsing YAML file %s: %s", self.config_path, e, exc_info=True)
            raise ValueError(f"Error parsing {self.config_path}: {str(e)}") from e


class ElementDatasetParser(YAMLFileParser):
    """
    Parser for element datasets.

    YAML files carry dataset metadata and an 'elements' list of records.
    CSV and Excel files hold one element per row with a header of field names;
    their dataset name is taken from the file name.
    """

    VALID_TOP_LEVEL_KEYS = {NAME_KEY, VERSION_KEY, SOURCE_KEY, ELEMENTS_KEY}

    # --- Constructor ---
    def __init__(self, dataset_path: Union[str, Path]) -> None:
        super().__init__(dataset_path)
        logger.info("Initializing ElementDatasetParser for: %s", dataset_path)
        self._validate_config()
        logger.info("ElementDatasetParser initialized with %d records", len(self.records))

    def _load_config(self) -> Dict[str, Any]:
        if self.config_path.suffix.lower() in FileConstants.TABULAR_EXTENSIONS:
            return {
                NAME_KEY: self.config_path.stem,
                SOURCE_KEY: str(self.config_path),
                ELEMENTS_KEY: load_element_records(self.config_path),
            }
        return super()._load_config()

    # --- Public API ---
    @property
    def records(self) -> List[Dict[str, Any]]:
        return self.config[ELEMENTS_KEY]

    @property
    def metadata(self) -> Dict[str, Any]:
        return {key: self.config.get(key) for key in (NAME_KEY, VERSION_KEY, SOURCE_KEY)}

    def create_catalog(self) -> ElementCatalog:
        """Build the validated catalog described by this dataset."""
        logger.info("Creating element catalog from: %s", self.config_path)
        catalog = ElementCatalog.from_records(self.records, **self.metadata)
        logger.info("Successfully created catalog with %d elements", len(catalog))
        return catalog

    def summarize(self) -> Dict[str, Any]:
        """
        Describe the dataset without building a catalog.
        Counts are taken from the raw records, so they are meaningful even for
        datasets that would fail validation.
        """
        rows = [r for r in self.records if isinstance(r, dict)]
        numbers = [r[ATOMIC_NUMBER_KEY] for r in rows if isinstance(r.get(ATOMIC_NUMBER_KEY), int)]
        info = dict(self.metadata)
        info.update({
            'total_records': len(self.records),
            'atomic_number_range': (min(numbers), max(numbers)) if numbers else None,
            'blocks': dict(Counter(str(r.get(BLOCK_KEY)).upper() for r in rows)),
            'phases': dict(Counter(str(r.get(PHASE_KEY)).upper() for r in rows)),
        })
        return info

    # --- Validation Methods ---
    def _validate_config(self) -> None:
        """Validate the dataset structure; record contents are checked when the catalog is built."""
        logger.debug("Starting dataset structure validation")
        if not isinstance(self.config, dict):
            logger.error("Invalid dataset structure - expected mapping at root level")
            raise ValidationError("The dataset file must start with a mapping of key-value pairs, "
                                  "not a list or scalar value")
        extra_keys = set(self.config.keys()) - self.VALID_TOP_LEVEL_KEYS
        if extra_keys:
            logger.error("Unknown top-level keys found: %s", extra_keys)
            errors = []
            for key in sorted(str(k) for k in extra_keys):
                matches = get_close_matches(key, self.VALID_TOP_LEVEL_KEYS, n=1, cutoff=0.6)
                suggestion = f" (did you mean '{matches[0]}'?)" if matches else ""
                errors.append(f"Unknown top-level key '{key}'{suggestion}")
            raise ValidationError("Invalid dataset structure", errors)
        if ELEMENTS_KEY not in self.config:
            raise ValidationError(f"Missing required field: {ELEMENTS_KEY}")
        records = self.config[ELEMENTS_KEY]
        if not isinstance(records, list):
            raise ValidationError(f"The '{ELEMENTS_KEY}' section must be a list of records, "
                                  f"got {type(records).__name__}")
        if not records:
            raise ValidationError("Element dataset is empty")
        for key in (NAME_KEY, VERSION_KEY, SOURCE_KEY):
            value = self.config.get(key)
            if value is not None and not isinstance(value, (str, int, float)):
                raise ValidationError(f"Dataset {key} must be a scalar, got {type(value).__name__}")
            if value is not None:
                self.config[key] = str(value)
        logger.debug("Dataset structure validation completed")
