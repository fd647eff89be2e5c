from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class NotFound:
    """
    Result of a catalog lookup that matched no element.

    Absence is an ordinary outcome of a lookup, so it is returned rather than raised.
    A NotFound is falsy and records which field was searched and with what key.
    """
    field: str
    key: Any

    def __bool__(self) -> bool:
        return False

    def __str__(self) -> str:
        return f"no element with {self.field} {self.key!r}"


def is_found(result: Any) -> bool:
    """True if a lookup result is an element rather than a NotFound marker."""
    return not isinstance(result, NotFound)
