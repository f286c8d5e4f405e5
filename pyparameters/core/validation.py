"""
Input validation utilities for pyparameters.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from collections.abc import Sequence
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyparameters.core.exceptions import ValidationError


def check_conf_level(level: Any, name: str = "ci") -> float:
    """
    Verify a confidence level lies strictly between 0 and 1.

    Args:
        level: Confidence level to check
        name: Parameter name for error messages

    Returns:
        The level as a float

    Raises:
        ValidationError: If level is not a number in (0, 1)
    """
    if isinstance(level, bool) or not isinstance(level, (int, float, np.floating)):
        raise ValidationError(
            f"{name}: expected a number in (0, 1), got {type(level).__name__}"
        )
    if not (0.0 < float(level) < 1.0):
        raise ValidationError(f"{name}: must be in (0, 1), got {level}")
    return float(level)


def check_digits(digits: Any, name: str) -> int:
    """
    Verify a rounding precision is a non-negative integer.

    Args:
        digits: Number of decimal places
        name: Parameter name for error messages

    Returns:
        The digits as an int

    Raises:
        ValidationError: If digits is not a non-negative integer
    """
    if isinstance(digits, bool) or not isinstance(digits, (int, np.integer)):
        raise ValidationError(
            f"{name}: expected a non-negative integer, got {digits!r}"
        )
    if digits < 0:
        raise ValidationError(f"{name}: must be >= 0, got {digits}")
    return int(digits)


def check_choice(value: Any, choices: Sequence[str], name: str) -> str:
    """
    Verify a string option is one of the allowed values.

    Args:
        value: Option value
        choices: Allowed values
        name: Parameter name for error messages

    Returns:
        The value unchanged

    Raises:
        ValidationError: If value is not among choices
    """
    if value not in choices:
        raise ValidationError(
            f"{name}: must be one of {tuple(choices)}, got {value!r}"
        )
    return value


def check_array(array: ArrayLike, name: str) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a 1D float64 array.

    Missing values (NaN) are allowed: fitted models report them for
    parameters whose standard errors could not be estimated.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with float64 dtype

    Raises:
        ValidationError: If input cannot be converted to a numeric array
    """
    try:
        result = np.asarray(array, dtype=np.float64)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to numeric array: {e}") from e
    return result.ravel()


def check_consistent_length(*arrays: Sequence[Any], names: tuple[str, ...]) -> None:
    """
    Verify all sequences have the same length.

    Args:
        *arrays: Sequences to check
        names: Parameter names for error messages (must match number of arrays)

    Raises:
        ValueError: If number of names doesn't match number of arrays
        ValidationError: If sequences have inconsistent lengths
    """
    if len(arrays) != len(names):
        raise ValueError(
            f"Number of arrays ({len(arrays)}) must match number of names ({len(names)})"
        )

    lengths = [len(arr) for arr in arrays]
    if len(set(lengths)) > 1:
        details = ", ".join(f"{name}={length}" for name, length in zip(names, lengths))
        raise ValidationError(f"Inconsistent lengths: {details}")
