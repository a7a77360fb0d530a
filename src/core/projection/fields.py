"""Optional-field helper shared by all projections."""

from collections.abc import Mapping, MutableMapping, Set
from typing import Any


def is_present(value: Any) -> bool:
    """Decide whether an optional value carries information.

    Present:
    - non-empty strings (including "0")
    - non-zero numbers, and True
    - non-empty lists, tuples, sets and mappings
    - any other non-None object
    """
    if value is None:
        return False

    if isinstance(value, bool):
        return value

    if isinstance(value, (int, float)):
        return value != 0

    if isinstance(value, (str, bytes, list, tuple, Set, Mapping)):
        return len(value) > 0

    return True


def include_if_present(target: MutableMapping[str, Any], key: str, value: Any) -> None:
    """Set ``target[key]`` only when the value is present."""
    if is_present(value):
        target[key] = value
