"""
Parsing of raw text literals into typed values and projection of typed values
onto floats.

Every element of a ``DataSeries`` is one of four kinds, tagged by ``TypeTag``:
``"int"``, ``"float"``, ``"bool"`` or ``"str"``. ``bool`` is checked before
``int`` everywhere because Python treats booleans as integers.
"""
from __future__ import annotations

import math
import re
from typing import Any, Literal, Optional, Union

import numpy as np

from .exceptions import NotNumericalError

TypeTag = Literal["int", "float", "bool", "str"]
Value = Union[int, float, bool, str]

_INT_LITERAL = re.compile(r"[+-]?[0-9]+")
_FLOAT_LITERAL = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|[+-]?(?:NaN|Infinity)")


# ----------------------------------------------------------------------
# Literal classification
# ----------------------------------------------------------------------
def is_int_literal(literal: str) -> bool:
    return _INT_LITERAL.fullmatch(literal) is not None


def is_float_literal(literal: str) -> bool:
    try:
        _parse_float(literal)
    except ValueError:
        return False
    return True


def _parse_float(literal: str) -> float:
    # Both '.' and ',' are accepted as the decimal separator.
    normalized = literal.replace(",", ".")
    if _FLOAT_LITERAL.fullmatch(normalized) is None:
        raise ValueError(f"could not convert string to float: {literal!r}")
    return float(normalized)


def resolve_type(literal: str) -> TypeTag:
    """
    Classify a raw text token.

    Order is integer -> real -> boolean -> text, so ``"1,5"`` resolves to
    ``"float"`` and ``"TRUE"`` to ``"bool"``.
    """
    if is_int_literal(literal):
        return "int"
    if is_float_literal(literal):
        return "float"
    if literal.lower() in ("true", "false"):
        return "bool"
    return "str"


def convert(literal: str, target: TypeTag) -> Value:
    """
    Parse ``literal`` as ``target``.

    Raises
    ------
    ValueError
        If the literal cannot be parsed as the requested type, or if
        ``target`` is not a known type tag.
    """
    if target == "int":
        if not is_int_literal(literal):
            raise ValueError(f"invalid literal for int: {literal!r}")
        return int(literal)
    if target == "float":
        return _parse_float(literal)
    if target == "bool":
        lowered = literal.lower()
        if lowered == "true":
            return True
        if lowered == "false":
            return False
        raise ValueError(f"invalid literal for bool: {literal!r}")
    if target == "str":
        return literal
    raise ValueError(f"Unknown target type: {target!r}")


# ----------------------------------------------------------------------
# Typed values
# ----------------------------------------------------------------------
def _tag_of(value: Any) -> Optional[TypeTag]:
    if isinstance(value, (bool, np.bool_)):
        return "bool"
    if isinstance(value, (int, np.integer)):
        return "int"
    if isinstance(value, (float, np.floating)):
        return "float"
    if isinstance(value, str):
        return "str"
    return None


def type_of(value: Any) -> TypeTag:
    """Return the type tag of an already-typed value (TypeError if unsupported)."""
    tag = _tag_of(value)
    if tag is not None:
        return tag
    raise TypeError(
        f"Unsupported value {value!r} of type {type(value).__name__}; "
        "expected int, float, bool or str."
    )


def normalize_value(value: Any) -> Value:
    """Validate ``value`` and turn numpy scalars into the matching Python native."""
    type_of(value)
    if isinstance(value, np.generic):
        return value.item()
    return value


def to_numeric(value: Any) -> float:
    """
    Project an integer or real onto a float.

    This is the single gate every statistic goes through. Anything that is not
    an int or a float (booleans included) raises ``NotNumericalError``.
    """
    if isinstance(value, (bool, np.bool_)):
        raise NotNumericalError(value)
    if isinstance(value, (int, float, np.integer, np.floating)):
        try:
            return float(value)
        except OverflowError:
            # ints beyond the float range
            return math.inf if value > 0 else -math.inf
    raise NotNumericalError(value)


def same_value(a: Any, b: Any) -> bool:
    """
    Equality that also requires matching type tags (``1``, ``1.0`` and ``True``
    differ). Two NaN floats are the same value.
    """
    tag = _tag_of(a)
    if tag is None or tag != _tag_of(b):
        return False
    if tag == "float" and math.isnan(a) and math.isnan(b):
        return True
    return a == b
