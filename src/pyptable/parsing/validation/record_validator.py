import logging
import math
import numbers
from difflib import get_close_matches
from typing import Any, Iterable, List, Mapping, Optional, Tuple

from pyptable.core.elements import (ELEMENT_FIELDS, FLOAT_FIELDS, INTEGER_FIELDS, OPTIONAL_FIELDS,
                                    REQUIRED_FIELDS, Block, Element, Phase)
from pyptable.core.exceptions import ValidationError
from pyptable.data.constants import CatalogConstants, ErrorMessages
from pyptable.parsing.config.dataset_keys import (BLOCK_KEY, ELEMENT_NAME_KEY, PHASE_KEY,
                                                  SYMBOL_KEY)

logger = logging.getLogger(__name__)


def translate_unknown(value: Any) -> Any:
    """
    Map the legacy "unknown" markers to None.

    Older element tables store unknown or inapplicable quantities as the largest
    representable double. That value, anything above it (infinity) and NaN are
    all read as "unknown". Every other value is returned unchanged.
    """
    if value is None:
        return None
    if isinstance(value, numbers.Real) and not isinstance(value, bool):
        if math.isnan(value) or value >= CatalogConstants.UNKNOWN_SENTINEL:
            return None
    return value


def build_element(record: Mapping[str, Any], index: int = 0) -> Element:
    """
    Convert one raw dataset row into a validated Element.
    Args:
        record: Mapping from field name to raw value
        index: Position of the row in its dataset, used in error messages
    Returns:
        The validated element
    Raises:
        ValidationError: Listing every problem found in the row
    """
    element, errors = _convert_record(record, index)
    if errors:
        raise ValidationError(f"Invalid element record {index}", errors)
    return element


def build_elements(records: Iterable[Mapping[str, Any]]) -> List[Element]:
    """
    Convert dataset rows into Elements, collecting the problems of every row.

    Nothing is returned unless all rows are valid.
    """
    elements = []
    errors = []
    translated = 0
    for index, record in enumerate(records):
        if isinstance(record, Mapping):
            translated += _count_unknown_markers(record)
        element, record_errors = _convert_record(record, index)
        if record_errors:
            errors.extend(record_errors)
        else:
            elements.append(element)
    if errors:
        raise ValidationError("Invalid element dataset", errors)
    if translated:
        logger.info("Translated %d legacy unknown-value markers to None", translated)
    logger.debug("Converted %d element records", len(elements))
    return elements


def _count_unknown_markers(record: Mapping[str, Any]) -> int:
    return sum(1 for name in FLOAT_FIELDS
               if record.get(name) is not None and translate_unknown(record.get(name)) is None)


def _convert_record(record: Any, index: int) -> Tuple[Optional[Element], List[str]]:
    if not isinstance(record, Mapping):
        return None, [ErrorMessages.INVALID_TYPE.format(
            index=index, field="<record>", expected="a mapping", actual=type(record).__name__)]
    errors = []
    unknown = sorted(str(key) for key in record if key not in ELEMENT_FIELDS)
    if unknown:
        described = []
        for key in unknown:
            matches = get_close_matches(key, ELEMENT_FIELDS, n=1, cutoff=0.6)
            described.append(f"'{key}' (did you mean '{matches[0]}'?)" if matches else f"'{key}'")
        errors.append(ErrorMessages.UNKNOWN_FIELD.format(index=index, fields=', '.join(described)))
    values = {}
    for name in ELEMENT_FIELDS:
        raw = record.get(name)
        if name in FLOAT_FIELDS:
            raw = translate_unknown(raw)
        if raw is None:
            if name in REQUIRED_FIELDS:
                errors.append(ErrorMessages.MISSING_FIELD.format(index=index, field=name))
            values[name] = None
            continue
        try:
            values[name] = _convert_value(name, raw, index)
        except ValueError as e:
            errors.append(str(e))
    if errors:
        return None, errors
    try:
        element = Element(**values)
    except ValidationError as e:
        return None, [f"Record {index}: {problem}" for problem in e.errors]
    logger.debug("Record %d accepted as %s", index, element.symbol)
    return element, []


def _convert_value(name: str, raw: Any, index: int) -> Any:
    """Coerce one raw field value to the type the Element expects."""
    if name == BLOCK_KEY:
        return _parse_enum(Block, name, raw, index)
    if name == PHASE_KEY:
        return _parse_enum(Phase, name, raw, index)
    if name in (SYMBOL_KEY, ELEMENT_NAME_KEY):
        if not isinstance(raw, str):
            raise ValueError(ErrorMessages.INVALID_TYPE.format(
                index=index, field=name, expected="a string", actual=type(raw).__name__))
        if raw != raw.strip():
            logger.warning("Record %d: stripping surrounding whitespace from %s %r", index, name, raw)
        return raw.strip()
    if name in INTEGER_FIELDS:
        return _to_int(name, raw, index)
    if name in FLOAT_FIELDS:
        return _to_float(name, raw, index)
    return raw


def _to_int(name: str, raw: Any, index: int) -> int:
    if isinstance(raw, bool):
        raise ValueError(ErrorMessages.INVALID_TYPE.format(
            index=index, field=name, expected="an integer", actual="bool"))
    if isinstance(raw, numbers.Integral):
        return int(raw)
    # Tabular sources store integer columns with missing cells as floats
    if isinstance(raw, numbers.Real) and float(raw).is_integer():
        return int(raw)
    raise ValueError(ErrorMessages.INVALID_TYPE.format(
        index=index, field=name, expected="an integer", actual=repr(raw)))


def _to_float(name: str, raw: Any, index: int) -> float:
    if isinstance(raw, bool) or not isinstance(raw, numbers.Real):
        raise ValueError(ErrorMessages.INVALID_TYPE.format(
            index=index, field=name, expected="a number", actual=repr(raw)))
    value = float(raw)
    if value <= 0 and name not in OPTIONAL_FIELDS:
        raise ValueError(ErrorMessages.OUT_OF_RANGE.format(
            index=index, field=name, constraint="must be positive", value=value))
    return value


def _parse_enum(enum_cls, name: str, raw: Any, index: int):
    try:
        return enum_cls.parse(raw)
    except ValueError:
        choices = ', '.join(member.name for member in enum_cls)
        raise ValueError(ErrorMessages.INVALID_ENUM.format(
            index=index, field=name, value=raw, choices=choices)) from None
