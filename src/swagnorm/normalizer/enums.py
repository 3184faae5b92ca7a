"""Sanitize Swagger ``enum`` lists for use as generated identifiers.

Code generators turn enum values into literal members, so every value must
be identifier safe. Backends also tend to serialise an enum either as its
string token or as its ordinal, so numeric tokens get a numeric twin
appended to the list.
"""

from __future__ import annotations

import math
import re
from typing import Any, Optional, Union

EnumValue = Union[str, bool, int, float]

_IDENTIFIER_SAFE = re.compile(r"[0-9a-zA-Z_\-$]+")


def fix_enum(values: Optional[list[Any]]) -> Optional[list[EnumValue]]:
    """Return an identifier-safe copy of a raw enum list.

    For every token that parses fully as a number, its numeric value is
    appended (unless an equal number is already in the list). Then every
    value whose string form is not identifier safe is dropped. The input
    list is not modified.

    ``null`` members become the token ``"null"``; nested lists and objects
    are dropped.

    Args:
        values: Raw ``enum`` list from a schema, or ``None``.

    Returns:
        The sanitised list, or ``None`` if *values* is ``None``.

    Example::

        >>> fix_enum(["A", "B", "1"])
        ['A', 'B', '1', 1]
        >>> fix_enum(["a b", "ok"])
        ['ok']
    """
    if values is None:
        return None

    scalars = [scalar for scalar in map(_to_scalar, values) if scalar is not None]

    combined: list[Any] = list(scalars)
    for value in scalars:
        number = _to_number(value)
        if number is not None and not _contains_number(combined, number):
            combined.append(number)

    return [value for value in combined if _IDENTIFIER_SAFE.fullmatch(_as_string(value))]


def _to_number(value: Any) -> Optional[Union[int, float]]:
    """Parse *value* as a finite number, or return ``None``.

    Integral values come back as ``int`` so that ``"1"`` and ``"1.0"`` both
    yield ``1``.
    Underscore digit grouping (``"1_000"``) is not a number.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str) and value.strip() and "_" not in value:
        try:
            number = float(value)
        except ValueError:
            return None
    else:
        return None

    if not math.isfinite(number):
        return None
    if number.is_integer():
        return int(number)
    return number


def _to_scalar(value: Any) -> Optional[EnumValue]:
    if value is None:
        return "null"
    if isinstance(value, (str, bool, int, float)):
        return value
    return None


def _contains_number(values: list[Any], number: Union[int, float]) -> bool:
    return any(
        isinstance(value, (int, float)) and not isinstance(value, bool) and value == number
        for value in values
    )


def _as_string(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
