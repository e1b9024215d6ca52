import math


class InvalidInputError(ValueError):
    """Raised when a calculator input is outside its valid domain."""


def require_positive(name: str, value: float) -> float:
    """Return `value` as float, or raise if it is not a finite number > 0."""
    try:
        v = float(value)
    except (TypeError, ValueError):
        raise InvalidInputError(f"{name} must be a number")
    if not math.isfinite(v) or v <= 0:
        raise InvalidInputError(f"{name} must be > 0")
    return v
