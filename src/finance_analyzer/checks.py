import numpy as np

from .errors import DataError, ValidationError

def require_finite(value, name: str) -> float:
    try:
        x = float(value)
    except (TypeError, ValueError):
        raise DataError(f"{name} must be a number, got {value!r}") from None
    if not np.isfinite(x):
        raise DataError(f"{name} must be finite, got {value!r}")
    return x

def require_int(value, name: str) -> int:
    """Integral value as int; 3.0 is accepted, 2.9 and NaN are not."""
    try:
        n = int(value)
    except (TypeError, ValueError, OverflowError):
        raise ValidationError(f"{name} must be an integer, got {value!r}") from None
    if n != value:
        raise ValidationError(f"{name} must be an integer, got {value!r}")
    return n
