"""
Precondition checks applied by the convenience layer before binding.

Related: ta_bridge.contexts.indicators.application.services.indicators.base
"""

from __future__ import annotations

from typing import Any, Mapping

import numpy as np

from ta_bridge.contexts.indicators.domain.entities import OptionKind, OptionSpec
from ta_bridge.contexts.indicators.domain.errors import InvalidParameterError

_NUMERIC_KINDS = frozenset("iuf")


def validate_series(value: Any, *, name: str) -> np.ndarray:
    """
    Validate one caller series and view it as a numeric ndarray.

    Args:
        value: Raw caller series.
        name: Caller-facing input name for diagnostics.
    Returns:
        np.ndarray: One-dimensional numeric array (no copy for ndarray input).
    Assumptions:
        Strings, mappings and scalars are never series.
    Raises:
        InvalidParameterError: If the value is missing, not a sequence, not numeric,
            not one-dimensional, or empty.
    Side Effects:
        None.
    """
    if value is None:
        raise InvalidParameterError(f"{name} array cannot be nil")
    if isinstance(value, (str, bytes, bytearray, Mapping)):
        raise InvalidParameterError(f"{name} must be an array, got {type(value).__name__}")

    try:
        array = np.asarray(value)
    except (TypeError, ValueError) as error:
        raise InvalidParameterError(f"{name} must be a numeric array: {error}") from error

    if array.ndim != 1:
        raise InvalidParameterError(f"{name} must be a one-dimensional array, got {array.ndim}D")
    if array.shape[0] == 0:
        raise InvalidParameterError(f"{name} array cannot be empty")
    if array.dtype.kind not in _NUMERIC_KINDS:
        raise InvalidParameterError(f"{name} must contain numbers, got dtype {array.dtype}")
    return array


def validate_equal_lengths(series: Mapping[str, np.ndarray]) -> int:
    """
    Require every caller series to have one common length.

    Args:
        series: Validated series keyed by caller-facing name.
    Returns:
        int: Common length.
    Assumptions:
        `series` is non-empty and each value is a validated 1D array.
    Raises:
        InvalidParameterError: If lengths differ.
    Side Effects:
        None.
    """
    lengths = {name: int(array.shape[0]) for name, array in series.items()}
    distinct = set(lengths.values())
    if len(distinct) > 1:
        listing = ", ".join(f"{name}={length}" for name, length in lengths.items())
        raise InvalidParameterError(f"input arrays must have equal length, got {listing}")
    return distinct.pop()


def validate_period(period: Any, data_size: int | None = None, *, name: str = "period") -> int:
    """
    Validate one period option.

    Args:
        period: Candidate period value.
        data_size: Input length the period may not exceed, or None to skip that check.
        name: Option name for diagnostics.
    Returns:
        int: Validated period.
    Assumptions:
        Integral floats are not periods; callers pass ints.
    Raises:
        InvalidParameterError: If the period is not an int, not positive, or exceeds
            `data_size`.
    Side Effects:
        None.
    """
    if isinstance(period, bool) or not isinstance(period, (int, np.integer)):
        raise InvalidParameterError(f"{name} must be an integer, got {type(period).__name__}")
    if period <= 0:
        raise InvalidParameterError(f"{name} must be positive")
    if data_size is not None and period > data_size:
        raise InvalidParameterError(f"{name} ({period}) cannot exceed data size ({data_size})")
    return int(period)


def validate_option(option: OptionSpec, value: Any, *, data_size: int) -> int | float:
    """
    Validate one caller option against its catalog declaration.

    Args:
        option: Catalog declaration.
        value: Caller-provided or default value.
        data_size: Common input length.
    Returns:
        int | float: Normalized value of the declared kind.
    Assumptions:
        Period options are integer options.
    Raises:
        InvalidParameterError: If kind or bounds are violated.
    Side Effects:
        None.
    """
    if option.is_period:
        return validate_period(
            value,
            data_size if option.bounded_by_data else None,
            name=option.name,
        )

    if option.kind is OptionKind.INT:
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            raise InvalidParameterError(
                f"{option.name} must be an integer, got {type(value).__name__}"
            )
        normalized: int | float = int(value)
    else:
        if isinstance(value, bool) or not isinstance(value, (int, float, np.integer, np.floating)):
            raise InvalidParameterError(
                f"{option.name} must be a number, got {type(value).__name__}"
            )
        normalized = float(value)
        if not np.isfinite(normalized):
            raise InvalidParameterError(f"{option.name} must be finite")

    if option.hard_min is not None and normalized < option.hard_min:
        raise InvalidParameterError(f"{option.name} must be >= {option.hard_min}, got {normalized}")
    if option.hard_max is not None and normalized > option.hard_max:
        raise InvalidParameterError(f"{option.name} must be <= {option.hard_max}, got {normalized}")
    return normalized
