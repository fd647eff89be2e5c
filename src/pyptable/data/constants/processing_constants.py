import sys
from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True)
class CatalogConstants:
    """Validation limits used while building an element catalog."""
    # Periodic table layout
    MIN_GROUP: Final[int] = 1
    MAX_GROUP: Final[int] = 18
    MIN_PERIOD: Final[int] = 1
    MIN_ATOMIC_NUMBER: Final[int] = 1
    # Element symbols are one capital letter optionally followed by one lower-case letter
    SYMBOL_REGEX: Final[str] = r'^[A-Z][a-z]?$'
    # Legacy datasets mark unknown values with the largest double; anything at or above is unknown
    UNKNOWN_SENTINEL: Final[float] = sys.float_info.max
    # Numeric fields that may be queried with (low, high) ranges
    RANGE_FIELDS: Final[tuple] = (
        'atomic_number', 'atomic_weight', 'neutrons',
        'melting_point', 'boiling_point', 'density', 'electronegativity',
    )


@dataclass(frozen=True)
class ErrorMessages:
    """Standardized error message templates."""
    MISSING_FIELD: Final[str] = "Record {index}: missing required field '{field}'"
    UNKNOWN_FIELD: Final[str] = "Record {index}: unknown field(s) {fields}"
    INVALID_TYPE: Final[str] = "Record {index}: field '{field}' must be {expected}, got {actual}"
    OUT_OF_RANGE: Final[str] = "Record {index}: field '{field}' {constraint}, got {value}"
    INVALID_ENUM: Final[str] = "Record {index}: field '{field}' has invalid value {value!r}; expected one of {choices}"
    DUPLICATE_KEY: Final[str] = "Duplicate {field} {value!r} (records {first} and {second})"
    PROTON_MISMATCH: Final[str] = "Element {symbol}: protons ({protons}) must equal atomic_number ({atomic_number})"
    ELECTRON_MISMATCH: Final[str] = "Element {symbol}: electrons ({electrons}) must equal protons ({protons})"


@dataclass(frozen=True)
class FileConstants:
    """File processing related constants."""
    YAML_EXTENSIONS: Final[tuple] = ('.yaml', '.yml')
    TABULAR_EXTENSIONS: Final[tuple] = ('.csv', '.xlsx')
    SUPPORTED_EXTENSIONS: Final[tuple] = ('.yaml', '.yml', '.csv', '.xlsx')
    MAX_FILE_SIZE_MB: Final[int] = 100
    DEFAULT_ENCODING: Final[str] = 'utf-8'
    # Missing value indicators
    NA_VALUES: Final[tuple] = ('', ' ', '  ', '   ', 'nan', 'NaN', 'NULL', 'null', 'N/A', 'n/a', 'NA')
