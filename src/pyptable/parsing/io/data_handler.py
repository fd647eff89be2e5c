import logging
from pathlib import Path
from typing import Any, Dict, List, Union

import numpy as np
import pandas as pd

from pyptable.data.constants import FileConstants

logger = logging.getLogger(__name__)


def load_element_records(file_path: Union[str, Path]) -> List[Dict[str, Any]]:
    """
    Reads element records from a CSV or Excel file with one element per row.
    Args:
        file_path: Path to a .csv or .xlsx file whose header row names the element fields
    Returns:
        List of dictionaries, one per row, with missing cells mapped to None
        and numpy scalars converted to plain Python values
    Raises:
        FileNotFoundError: If the specified file doesn't exist
        ValueError: If the file format is unsupported or the file cannot be read
        PermissionError: If file cannot be read due to permissions
    """
    file_path = Path(file_path)
    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {file_path}")
    file_extension = file_path.suffix.lower()
    if file_extension not in FileConstants.TABULAR_EXTENSIONS:
        raise ValueError(f"Unsupported file type: '{file_extension}'. "
                         f"Supported types are: {FileConstants.TABULAR_EXTENSIONS}")
    try:
        if file_extension == '.xlsx':
            df = _read_excel_file(file_path)
        else:
            df = _read_csv_file(file_path)
    except PermissionError as e:
        raise PermissionError(f"Permission denied reading file {file_path}: {str(e)}") from e
    except pd.errors.EmptyDataError as e:
        raise ValueError(f"No data found in file: {file_path}") from e
    except ValueError:
        raise
    except Exception as e:
        raise ValueError(f"Error reading file {file_path}: {str(e)}") from e
    if df.empty:
        raise ValueError(f"No data found in file: {file_path}")
    df.columns = [str(column).strip() for column in df.columns]
    records = _frame_to_records(df)
    logger.info("Read %d element rows from %s", len(records), file_path)
    return records


def _read_excel_file(file_path: Path) -> pd.DataFrame:
    """Read Excel file with proper error handling."""
    try:
        return pd.read_excel(file_path, header=0, na_values=FileConstants.NA_VALUES, keep_default_na=False)
    except ImportError as e:
        raise ValueError("Excel file support requires openpyxl. Install with: pip install openpyxl") from e


def _read_csv_file(file_path: Path) -> pd.DataFrame:
    """Read CSV file with proper error handling."""
    return pd.read_csv(
        file_path,
        header=0,
        na_values=FileConstants.NA_VALUES,
        keep_default_na=False,
        encoding=FileConstants.DEFAULT_ENCODING,
        skipinitialspace=True,
        float_precision='round_trip',
    )


def _frame_to_records(df: pd.DataFrame) -> List[Dict[str, Any]]:
    """Convert DataFrame rows to plain dictionaries, with NaN cells as None."""
    nan_count = int(df.isna().sum().sum())
    if nan_count > 0:
        logger.debug("Found %d empty cells; treating them as unknown values", nan_count)
    records = []
    for row in df.to_dict(orient='records'):
        records.append({key: _to_python(value) for key, value in row.items()})
    return records


def _to_python(value: Any) -> Any:
    if isinstance(value, np.generic):
        value = value.item()
    if isinstance(value, float) and np.isnan(value):
        return None
    return value
