"""
Normalization helpers for employee document fields.
"""
from typing import Any, Optional, Union
import math

from employeelist.exceptions import ValidationError

Number = Union[int, float]

# BSON integers are signed 64-bit
INT64_MIN = -2 ** 63
INT64_MAX = 2 ** 63 - 1


def _not_a_number(value: Any) -> ValidationError:
    return ValidationError("Salary must be a number", details={"field": "salary", "value": repr(value)})


def _fits_int64(number: int) -> bool:
    return INT64_MIN <= number <= INT64_MAX


def coerce_salary(value: Any) -> Number:
    """
    Convert a request salary value into a number MongoDB can store.

    ``None`` and empty strings become 0. Numeric strings are parsed.
    Integral values within the int64 range come back as ``int`` so that
    "5000" is stored as 5000; larger magnitudes are kept as ``float``
    (stored as a BSON double).

    Raises:
        ValidationError: If the value is not numeric or not finite
    """
    if value is None:
        return 0

    # bool is an int subclass
    if isinstance(value, bool):
        raise _not_a_number(value)

    if isinstance(value, int):
        if _fits_int64(value):
            return value
        try:
            return float(value)
        except OverflowError:
            raise _not_a_number(value) from None

    if isinstance(value, float):
        number = value
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return 0
        try:
            number = float(text)
        except ValueError:
            raise _not_a_number(value) from None
    else:
        raise _not_a_number(value)

    if not math.isfinite(number):
        raise _not_a_number(value)

    if number.is_integer() and _fits_int64(int(number)):
        return int(number)
    return number


def scalar_to_text(value: Any) -> Any:
    """
    Cast a number or boolean sent for a text field to its string form.

    Whole floats lose the trailing ".0" (123.0 -> "123") and booleans are
    lowercased, matching how JSON clients print them. Other values are
    returned unchanged for the model to validate.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (int, float)):
        return str(value)
    return value


def text_or_empty(value: Optional[str]) -> str:
    """Return the value, or an empty string for None/empty input."""
    return value or ""
