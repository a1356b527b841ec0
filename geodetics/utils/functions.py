"""Module for miscellaneous multi-use functions"""

__all__ = ['coerce_float', 'coerce_int', 'coerce_str', 'round_half_up']

from typing import Any, Type

from pydantic import FiniteFloat, StrictStr, TypeAdapter, ValidationError

from geodetics.exceptions import InvalidCoordinate

_FLOAT_ADAPTER = TypeAdapter(FiniteFloat)
_INT_ADAPTER = TypeAdapter(int)
_STR_ADAPTER = TypeAdapter(StrictStr)


def round_half_up(value: float, precision) -> float:
    """
    Rounds numbers to the nearest whole, where a value exactly between the two nearest
    wholes is rounded to the higher whole.

    Args:
        value:
            The float value to be rounded
        precision:
            The precision to round the float value to

    """
    mod = value + 10 ** -(precision + 12)

    return round(mod, precision)


def coerce_float(
    value: Any,
    name: str,
    error: Type[InvalidCoordinate] = InvalidCoordinate
) -> float:
    """
    Coerces a number or numeric string to a finite float.

    Args:
        value:
            The value to be coerced
        name:
            Name of the field, used in the error message
        error:
            The exception type raised when the value is not numeric

    Returns:
        float
    """
    if isinstance(value, str):
        value = value.strip()

    try:
        return _FLOAT_ADAPTER.validate_python(value)
    except ValidationError as err:
        raise error(f'invalid {name} ‘{value}’') from err


def coerce_int(
    value: Any,
    name: str,
    error: Type[InvalidCoordinate] = InvalidCoordinate
) -> int:
    """Coerces a whole number (or its string form) to an int"""
    if isinstance(value, str):
        value = value.strip()

    try:
        return _INT_ADAPTER.validate_python(value)
    except ValidationError as err:
        raise error(f'invalid {name} ‘{value}’') from err


def coerce_str(value: Any, name: str, error: Type[InvalidCoordinate] = InvalidCoordinate) -> str:
    try:
        return _STR_ADAPTER.validate_python(value).strip()
    except ValidationError as err:
        raise error(f'invalid {name} ‘{value}’') from err
