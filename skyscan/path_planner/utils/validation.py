# skyscan/path_planner/utils/validation.py
"""
Scalar checks shared by the planner entry points. NaN and infinity are
rejected everywhere; None counts as a missing number.
"""
import math
import numbers

from ..exceptions import InvalidParameterError


def is_finite_number(value) -> bool:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    return math.isfinite(value)


def require_positive(parameter: str, value) -> float:
    if not is_finite_number(value) or value <= 0:
        raise InvalidParameterError(parameter, value, "Expected a finite positive number")
    return float(value)


def require_non_negative(parameter: str, value) -> float:
    if not is_finite_number(value) or value < 0:
        raise InvalidParameterError(parameter, value, "Expected a finite non-negative number")
    return float(value)


def require_open_fraction(parameter: str, value) -> float:
    """Value strictly between 0 and 1."""
    if not is_finite_number(value) or not 0.0 < value < 1.0:
        raise InvalidParameterError(parameter, value, "Expected a value strictly between 0 and 1")
    return float(value)


def require_finite_coord(parameter: str, coord) -> None:
    for axis in ("x", "y", "z"):
        if not is_finite_number(getattr(coord, axis)):
            raise InvalidParameterError(f"{parameter}.{axis}", getattr(coord, axis),
                                        "Expected a finite coordinate")
