"""Runtime shape helpers shared by the constraint validators and the dispatcher."""

from collections.abc import Mapping, Sized
from typing import Any, Iterable

from fieldcheck.validators.models import MISSING, Symbol

# Largest integer a double represents exactly; beyond it ints are tagged "bigint"
MAX_SAFE_INTEGER = 2**53 - 1


def read_field(model: Any, field: Any) -> Any:
    """Read `field` from a mapping (by key) or any other object (by attribute).

    Returns `MISSING` when the model has no such key or attribute.
    """
    if isinstance(model, Mapping):
        return model.get(field, MISSING)
    if isinstance(field, str):
        return getattr(model, field, MISSING)
    return MISSING


def is_none(value: Any) -> bool:
    """True for both absent markers: `None` and `MISSING`."""
    return value is None or value is MISSING


def has_length(value: Any) -> bool:
    """Check whether a value has a length measure."""
    return isinstance(value, Sized)


def type_of(value: Any) -> str:
    """Classify a value under one of the eight type tags."""
    if value is MISSING:
        return "undefined"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int):
        return "number" if abs(value) <= MAX_SAFE_INTEGER else "bigint"
    if isinstance(value, float):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, Symbol):
        return "symbol"
    if callable(value):
        return "function"
    return "object"


def strictly_equal(left: Any, right: Any) -> bool:
    """Identity, or equality between values of the very same type.

    No coercion: `"123"` never equals `123`, nor `1` equals `True` or `1.0`.
    """
    return left is right or (type(left) is type(right) and left == right)


def contains_strictly(items: Iterable[Any], value: Any) -> bool:
    return any(strictly_equal(item, value) for item in items)
