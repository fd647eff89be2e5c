import logging
import math
import numbers
from types import MappingProxyType
from typing import (Any, Callable, Collection, Dict, Iterable, Iterator, Mapping, Optional, Tuple,
                    Union)

import numpy as np
import pandas as pd

from pyptable.core.elements import ELEMENT_FIELDS, Block, Element, Phase
from pyptable.core.exceptions import ValidationError
from pyptable.core.lookup import NotFound
from pyptable.data.constants import CatalogConstants, ErrorMessages

logger = logging.getLogger(__name__)

LookupResult = Union[Element, NotFound]
Predicate = Callable[[Element], bool]
NumericRange = Tuple[Optional[float], Optional[float]]


class ElementCatalog:
    """
    Immutable, validated collection of element records.

    The catalog is built once from a dataset and never changes afterwards, so it
    can be shared freely between threads. Elements are kept in ascending
    atomic-number order and indexed by atomic number, symbol and lower-cased name.
    Lookups return a NotFound marker instead of raising when nothing matches.
    """

    def __init__(self, elements: Iterable[Element], *, name: Optional[str] = None,
                 version: Optional[str] = None, source: Optional[str] = None) -> None:
        self._name = name
        self._version = version
        self._source = source
        ordered = self._validate(list(elements))
        self._elements: Tuple[Element, ...] = tuple(ordered)
        self._by_number = MappingProxyType({e.atomic_number: e for e in ordered})
        self._by_symbol = MappingProxyType({e.symbol: e for e in ordered})
        self._by_name = MappingProxyType({e.name.strip().lower(): e for e in ordered})
        logger.info("Built element catalog %s (version %s) with %d elements",
                    name or "<unnamed>", version or "unversioned", len(self._elements))

    # --- Construction ---
    @classmethod
    def from_records(cls, records: Iterable[Mapping[str, Any]], **metadata: Any) -> 'ElementCatalog':
        """
        Build a catalog from raw dataset rows.
        Args:
            records: Iterable of mappings with one key per element field
            **metadata: name, version and source of the dataset
        Returns:
            The validated catalog
        Raises:
            ValidationError: If any row, or the rows taken together, break an invariant
        """
        from pyptable.parsing.validation.record_validator import build_elements
        return cls(build_elements(records), **metadata)

    @staticmethod
    def _validate(elements: list) -> list:
        """Check catalog-wide invariants and return elements sorted by atomic number."""
        if not elements:
            raise ValidationError("Element dataset is empty")
        errors = []
        for position, element in enumerate(elements):
            if not isinstance(element, Element):
                errors.append(f"Record {position}: expected Element, got {type(element).__name__}")
        if errors:
            raise ValidationError("Invalid element catalog", errors)
        keys = (
            ("atomic_number", lambda e: e.atomic_number),
            ("symbol", lambda e: e.symbol),
            ("name", lambda e: e.name.strip().lower()),
        )
        for field_name, key_of in keys:
            seen: Dict[Any, int] = {}
            for position, element in enumerate(elements):
                key = key_of(element)
                if key in seen:
                    errors.append(ErrorMessages.DUPLICATE_KEY.format(
                        field=field_name, value=key, first=seen[key], second=position))
                else:
                    seen[key] = position
        if errors:
            raise ValidationError("Invalid element catalog", errors)
        return sorted(elements, key=lambda e: e.atomic_number)

    # --- Lookup ---
    def by_atomic_number(self, atomic_number: int) -> LookupResult:
        """Element with the given atomic number, or NotFound."""
        if isinstance(atomic_number, bool) or not isinstance(atomic_number, int):
            return NotFound("atomic_number", atomic_number)
        return self._by_number.get(atomic_number) or NotFound("atomic_number", atomic_number)

    def by_symbol(self, symbol: str) -> LookupResult:
        """Element with exactly this symbol (case-sensitive), or NotFound."""
        if not isinstance(symbol, str):
            return NotFound("symbol", symbol)
        return self._by_symbol.get(symbol) or NotFound("symbol", symbol)

    def by_name(self, name: str) -> LookupResult:
        """Element with this name, ignoring case and surrounding whitespace, or NotFound."""
        if not isinstance(name, str):
            return NotFound("name", name)
        return self._by_name.get(name.strip().lower()) or NotFound("name", name)

    # --- Iteration and queries ---
    def all(self) -> Tuple[Element, ...]:
        """All elements in ascending atomic-number order."""
        return self._elements

    def filter(self, predicate: Optional[Predicate] = None, *,
               block: Union[Block, str, Collection, None] = None,
               phase: Union[Phase, str, Collection, None] = None,
               group: Union[int, Collection, None] = None,
               period: Union[int, Collection, None] = None,
               **ranges: NumericRange) -> 'ElementSelection':
        """
        Select elements matching every given criterion.

        Args:
            predicate: Optional callable taking an Element and returning a bool
            block: Block (or name, or collection of either) to keep
            phase: Phase (or name, or collection of either) to keep
            group: Group number or collection of group numbers to keep; None inside
                a collection selects the f-block elements, which have no group
            period: Period number or collection of period numbers to keep
            **ranges: Inclusive (low, high) bounds on numeric fields, e.g.
                melting_point=(None, 300.0). None leaves that side open.
                Elements whose value is unknown never match a range.
        Returns:
            A lazy selection, re-evaluated on each iteration, in ascending atomic-number order
        Raises:
            ValueError: If a criterion names an unsupported field or is malformed
        Examples:
            catalog.filter(block=Block.D, phase='solid')
            catalog.filter(lambda e: e.neutrons > e.protons, period=(4, 5))
        """
        criteria = []
        if predicate is not None:
            if not callable(predicate):
                raise ValueError(f"predicate must be callable, got {type(predicate).__name__}")
            criteria.append(predicate)
        if block is not None:
            blocks = _as_members(block, Block)
            criteria.append(lambda e: e.block in blocks)
        if phase is not None:
            phases = _as_members(phase, Phase)
            criteria.append(lambda e: e.phase in phases)
        if group is not None:
            groups = _as_int_set(group, "group", allow_none=True)
            criteria.append(lambda e: e.group in groups)
        if period is not None:
            periods = _as_int_set(period, "period")
            criteria.append(lambda e: e.period in periods)
        for field_name, bounds in ranges.items():
            criteria.append(_range_criterion(field_name, bounds))
        logger.debug("Filtering catalog with %d criteria", len(criteria))
        return ElementSelection(self._elements, tuple(criteria))

    def to_dataframe(self, elements: Optional[Iterable[Element]] = None) -> pd.DataFrame:
        """
        Tabulate elements as a DataFrame indexed by atomic number.
        Unknown values become NaN; block and phase are given by enum name.
        """
        return _to_dataframe(self._elements if elements is None else elements)

    @property
    def name(self) -> Optional[str]:
        return self._name

    @property
    def version(self) -> Optional[str]:
        return self._version

    @property
    def source(self) -> Optional[str]:
        return self._source

    @property
    def symbols(self) -> Tuple[str, ...]:
        return tuple(e.symbol for e in self._elements)

    @property
    def atomic_numbers(self) -> Tuple[int, ...]:
        return tuple(e.atomic_number for e in self._elements)

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[Element]:
        return iter(self._elements)

    def __contains__(self, item: Any) -> bool:
        if isinstance(item, Element):
            return self._by_number.get(item.atomic_number) == item
        if isinstance(item, str):
            return item in self._by_symbol
        if isinstance(item, int) and not isinstance(item, bool):
            return item in self._by_number
        return False

    def __repr__(self) -> str:
        return (f"ElementCatalog(name={self.name!r}, version={self.version!r}, "
                f"elements={len(self._elements)})")


class ElementSelection:
    """Lazy, restartable view of the catalog elements that satisfy a set of criteria."""

    def __init__(self, elements: Tuple[Element, ...], criteria: Tuple[Predicate, ...]) -> None:
        self._elements = elements
        self._criteria = criteria

    def __iter__(self) -> Iterator[Element]:
        for element in self._elements:
            if all(criterion(element) for criterion in self._criteria):
                yield element

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def first(self) -> LookupResult:
        return next(iter(self), None) or NotFound("selection", None)

    def symbols(self) -> Tuple[str, ...]:
        return tuple(e.symbol for e in self)

    def to_dataframe(self) -> pd.DataFrame:
        return _to_dataframe(self)

    def __repr__(self) -> str:
        return f"ElementSelection(criteria={len(self._criteria)})"


# --- Helpers ---
def _as_members(value: Any, enum_cls) -> frozenset:
    if isinstance(value, (str, enum_cls)):
        return frozenset({enum_cls.parse(value)})
    if not isinstance(value, Iterable):
        raise ValueError(f"{enum_cls.__name__.lower()} filter must be a {enum_cls.__name__}, a name "
                         f"or a collection of either, got {value!r}")
    return frozenset(enum_cls.parse(v) for v in value)


def _as_int_set(value: Any, field_name: str, allow_none: bool = False) -> frozenset:
    if isinstance(value, numbers.Integral) and not isinstance(value, bool):
        values = [value]
    elif isinstance(value, Iterable) and not isinstance(value, str):
        values = list(value)
    else:
        raise ValueError(f"{field_name} filter must be an integer or a collection of integers, "
                         f"got {value!r}")
    checked = set()
    for v in values:
        if v is None and allow_none:
            checked.add(None)
        elif isinstance(v, numbers.Integral) and not isinstance(v, bool):
            checked.add(int(v))
        else:
            raise ValueError(f"{field_name} filter values must be integers, got {v!r}")
    return frozenset(checked)


def _check_bound(field_name: str, bound: Any) -> None:
    if bound is None:
        return
    if isinstance(bound, bool) or not isinstance(bound, numbers.Real) or math.isnan(bound):
        raise ValueError(f"Range bound for '{field_name}' must be a number or None, got {bound!r}")


def _range_criterion(field_name: str, bounds: NumericRange) -> Predicate:
    if field_name not in CatalogConstants.RANGE_FIELDS:
        raise ValueError(f"Unsupported range field '{field_name}'. "
                         f"Supported fields are: {', '.join(CatalogConstants.RANGE_FIELDS)}")
    if not isinstance(bounds, (tuple, list)) or len(bounds) != 2:
        raise ValueError(f"Range for '{field_name}' must be a (low, high) pair, got {bounds!r}")
    low, high = bounds
    _check_bound(field_name, low)
    _check_bound(field_name, high)
    if low is not None and high is not None and low > high:
        raise ValueError(f"Range for '{field_name}' has low bound {low} above high bound {high}")

    def criterion(element: Element) -> bool:
        value = getattr(element, field_name)
        if value is None:
            return False
        return (low is None or value >= low) and (high is None or value <= high)
    return criterion


def _to_dataframe(elements: Iterable[Element]) -> pd.DataFrame:
    rows = [e.as_dict() for e in elements]
    df = pd.DataFrame(rows, columns=list(ELEMENT_FIELDS))
    # None in float columns becomes NaN; group keeps missing values via the nullable Int64 dtype
    for column in ('melting_point', 'boiling_point', 'density', 'electronegativity'):
        df[column] = pd.to_numeric(df[column], errors='coerce').astype(np.float64)
    df["group"] = pd.array(df["group"].tolist(), dtype="Int64")
    return df.set_index('atomic_number')
