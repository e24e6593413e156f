from numbers import Integral, Real
from typing import Any

__all__ = ["isInt", "resolvePositiveInt", "resolvePositiveReal"]


def isInt(value: Any) -> bool:
    """
    Judges whether `value` is a genuine integer. `bool` is rejected even though it is
    registered as `Integral`.
    """
    return isinstance(value, Integral) and not isinstance(value, bool)


def resolvePositiveInt(value: Any, name: str = "value") -> int:
    """
    Turns an integral value (including `numpy` integers) into a plain `int`, checking that it
    is at least 1.
    """
    if not isInt(value):
        raise TypeError(f"{name} must be an integer, got {value.__class__.__name__}")
    value = int(value)
    if value < 1:
        raise ValueError(f"{name} must be a positive integer, got {value}")
    return value


def resolvePositiveReal(value: Any, name: str = "value") -> float:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise TypeError(f"{name} must be a real number, got {value.__class__.__name__}")
    value = float(value)
    if not value > 0:
        raise ValueError(f"{name} must be positive, got {value}")
    return value
