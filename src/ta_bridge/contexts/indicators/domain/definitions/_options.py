"""
Shared option builders for indicator catalog groups.

Related: ta_bridge.contexts.indicators.domain.entities.indicator_spec
"""

from __future__ import annotations

from ta_bridge.contexts.indicators.domain.entities import MovingAverageType, OptionKind, OptionSpec

_MA_TYPE_MIN = int(min(MovingAverageType))
_MA_TYPE_MAX = int(max(MovingAverageType))


def period(
    default: int,
    *,
    name: str = "period",
    native: str = "optInTimePeriod",
    bounded: bool = False,
) -> OptionSpec:
    """
    Build an integer period option.

    Args:
        default: Documented default period.
        name: Caller-facing option name.
        native: Native optional input name.
        bounded: Whether the period may not exceed the input length.
    Returns:
        OptionSpec: Period option with `hard_min=1`.
    Assumptions:
        Every period option must be strictly positive.
    Raises:
        ValueError: If default violates option invariants.
    Side Effects:
        None.
    """
    return OptionSpec(
        name=name,
        native_names=(native,),
        default=default,
        kind=OptionKind.INT,
        is_period=True,
        bounded_by_data=bounded,
        hard_min=1,
    )


def ma_type(*, name: str = "ma_type", native: str = "optInMAType") -> OptionSpec:
    return OptionSpec(
        name=name,
        native_names=(native,),
        default=int(MovingAverageType.SMA),
        kind=OptionKind.INT,
        hard_min=_MA_TYPE_MIN,
        hard_max=_MA_TYPE_MAX,
    )


def real(
    name: str,
    default: float,
    *natives: str,
    hard_min: float | None = None,
    hard_max: float | None = None,
) -> OptionSpec:
    return OptionSpec(
        name=name,
        native_names=natives,
        default=default,
        kind=OptionKind.FLOAT,
        hard_min=hard_min,
        hard_max=hard_max,
    )
