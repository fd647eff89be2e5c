import logging
import math
import re
from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pyptable.core.exceptions import ValidationError
from pyptable.data.constants import CatalogConstants, ErrorMessages

logger = logging.getLogger(__name__)


class _ParseableEnum(Enum):
    """Enum that can be looked up by member, name or value, ignoring case."""

    @classmethod
    def parse(cls, value: Union[str, 'Enum']) -> 'Enum':
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise ValueError(f"Cannot interpret {value!r} as {cls.__name__}")
        token = value.strip().lower().replace('-', '_')
        for member in cls:
            if token in cls._aliases(member):
                return member
        choices = ', '.join(member.name for member in cls)
        raise ValueError(f"Invalid {cls.__name__} {value!r}; expected one of {choices}")

    @classmethod
    def _aliases(cls, member: 'Enum') -> tuple:
        return member.name.lower(), member.value


class Block(_ParseableEnum):
    """
    Region of the periodic table grouping elements by the atomic orbital
    in which their valence electrons or vacancies lie.
    """
    S = 's'
    P = 'p'
    D = 'd'
    F = 'f'

    @classmethod
    def _aliases(cls, member: 'Block') -> tuple:
        # Accept 'd', 'D', 'D_BLOCK' and 'd-block'
        return member.name.lower(), member.value, f"{member.value}_block"


class Phase(_ParseableEnum):
    """
    State of matter of an element at standard temperature and pressure.

    SOLID: particles are packed closely and can only vibrate, so the element has
        a definite shape and volume.
    LIQUID: a nearly incompressible fluid with a definite volume that takes the
        shape of its container.
    GAS: a compressible fluid that expands to fill its container.
    """
    SOLID = 'solid'
    LIQUID = 'liquid'
    GAS = 'gas'


@dataclass(frozen=True)
class Element:
    """
    Immutable record describing one chemical element.

    Physical quantities that are unknown or not applicable (for example the
    melting point of helium at standard pressure) are None, never a magic number.
    Units: atomic_weight in u, melting_point and boiling_point in K,
    density in g/cm3, electronegativity on the Pauling scale.
    """
    atomic_number: int
    symbol: str
    name: str
    group: Optional[int]
    period: int
    atomic_weight: float
    protons: int
    neutrons: int
    electrons: int
    melting_point: Optional[float]
    boiling_point: Optional[float]
    density: Optional[float]
    electronegativity: Optional[float]
    block: Block
    phase: Phase

    def __post_init__(self) -> None:
        problems = element_problems(self)
        if problems:
            raise ValidationError(f"Invalid element {self.symbol!r}", problems)
        logger.debug("Created element %d (%s)", self.atomic_number, self.symbol)

    @property
    def mass_number(self) -> int:
        return self.protons + self.neutrons

    @property
    def has_melting_point(self) -> bool:
        return self.melting_point is not None

    @property
    def has_boiling_point(self) -> bool:
        return self.boiling_point is not None

    @property
    def has_electronegativity(self) -> bool:
        return self.electronegativity is not None

    def as_dict(self) -> Dict[str, Any]:
        """Plain field mapping with block and phase given by enum name."""
        record = {f.name: getattr(self, f.name) for f in fields(self)}
        record['block'] = self.block.name
        record['phase'] = self.phase.name
        return record

    def __str__(self) -> str:
        return f"{self.name} ({self.symbol}, Z={self.atomic_number})"


ELEMENT_FIELDS = tuple(f.name for f in fields(Element))
OPTIONAL_FIELDS = ('group', 'melting_point', 'boiling_point', 'density', 'electronegativity')
REQUIRED_FIELDS = tuple(name for name in ELEMENT_FIELDS if name not in OPTIONAL_FIELDS)
INTEGER_FIELDS = ('atomic_number', 'group', 'period', 'protons', 'neutrons', 'electrons')
FLOAT_FIELDS = ('atomic_weight', 'melting_point', 'boiling_point', 'density', 'electronegativity')


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def element_problems(element: Element) -> List[str]:
    """
    Check a single element against the record invariants.
    Args:
        element: The element to check
    Returns:
        List of human-readable problems, empty if the element is valid
    """
    label = f"Element {element.symbol!r}"
    problems = []
    for name in INTEGER_FIELDS:
        value = getattr(element, name)
        if value is None and name in OPTIONAL_FIELDS:
            continue
        if not _is_int(value):
            problems.append(f"{label}: {name} must be an integer, got {type(value).__name__}")
    for name in FLOAT_FIELDS:
        value = getattr(element, name)
        if value is None and name in OPTIONAL_FIELDS:
            continue
        if not _is_number(value):
            problems.append(f"{label}: {name} must be a number, got {type(value).__name__}")
        elif math.isnan(value) or value >= CatalogConstants.UNKNOWN_SENTINEL:
            problems.append(f"{label}: {name} holds an unknown-value marker; use None instead")
        elif value <= 0:
            problems.append(f"{label}: {name} must be positive, got {value}")
    if problems:
        # Range checks below assume well-typed values
        return problems
    if not isinstance(element.symbol, str) or not re.match(CatalogConstants.SYMBOL_REGEX, element.symbol):
        problems.append(f"{label}: symbol must be one or two letters starting with a capital")
    if not isinstance(element.name, str) or not element.name.strip():
        problems.append(f"{label}: name must be a non-empty string")
    if element.atomic_number < CatalogConstants.MIN_ATOMIC_NUMBER:
        problems.append(f"{label}: atomic_number must be positive, got {element.atomic_number}")
    if element.period < CatalogConstants.MIN_PERIOD:
        problems.append(f"{label}: period must be positive, got {element.period}")
    if element.neutrons < 0:
        problems.append(f"{label}: neutrons must be non-negative, got {element.neutrons}")
    if not isinstance(element.block, Block):
        problems.append(f"{label}: block must be a Block, got {element.block!r}")
    if not isinstance(element.phase, Phase):
        problems.append(f"{label}: phase must be a Phase, got {element.phase!r}")
    if element.group is None:
        if element.block is not Block.F:
            problems.append(f"{label}: group may only be omitted for f-block elements")
    elif not CatalogConstants.MIN_GROUP <= element.group <= CatalogConstants.MAX_GROUP:
        problems.append(f"{label}: group must be between {CatalogConstants.MIN_GROUP} and "
                        f"{CatalogConstants.MAX_GROUP}, got {element.group}")
    if element.protons != element.atomic_number:
        problems.append(ErrorMessages.PROTON_MISMATCH.format(
            symbol=element.symbol, protons=element.protons, atomic_number=element.atomic_number))
    if element.electrons != element.protons:
        problems.append(ErrorMessages.ELECTRON_MISMATCH.format(
            symbol=element.symbol, electrons=element.electrons, protons=element.protons))
    return problems
