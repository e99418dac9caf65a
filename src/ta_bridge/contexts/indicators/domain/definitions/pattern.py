"""
Catalog entries for candlestick pattern recognition.

Every pattern consumes one open/high/low/close bundle and emits integer
signals (-100, 0, 100), widened to float by the call adapter.

Related: ta_bridge.contexts.indicators.domain.entities.indicator_spec
"""

from __future__ import annotations

from ta_bridge.contexts.indicators.domain.entities import FunctionId, IndicatorSpec

from ._options import real

_GROUP = "Pattern Recognition"
_OHLC = ("open", "high", "low", "close")

# (suffix, title, penetration default)
_PATTERNS: tuple[tuple[str, str, float | None], ...] = (
    ("doji", "Doji", None),
    ("hammer", "Hammer", None),
    ("engulfing", "Engulfing Pattern", None),
    ("morningstar", "Morning Star", 0.3),
    ("eveningstar", "Evening Star", 0.3),
    ("harami", "Harami Pattern", None),
    ("piercing", "Piercing Pattern", None),
    ("shootingstar", "Shooting Star", None),
    ("marubozu", "Marubozu", None),
    ("spinningtop", "Spinning Top", None),
    ("dragonflydoji", "Dragonfly Doji", None),
    ("gravestonedoji", "Gravestone Doji", None),
    ("2crows", "Two Crows", None),
    ("3blackcrows", "Three Black Crows", None),
    ("3inside", "Three Inside Up/Down", None),
    ("3linestrike", "Three-Line Strike", None),
    ("3outside", "Three Outside Up/Down", None),
    ("3starsinsouth", "Three Stars In The South", None),
    ("3whitesoldiers", "Three Advancing White Soldiers", None),
    ("abandonedbaby", "Abandoned Baby", 0.3),
    ("advanceblock", "Advance Block", None),
    ("belthold", "Belt-hold", None),
    ("breakaway", "Breakaway", None),
    ("closingmarubozu", "Closing Marubozu", None),
    ("concealbabyswall", "Concealing Baby Swallow", None),
    ("counterattack", "Counterattack", None),
    ("darkcloudcover", "Dark Cloud Cover", 0.5),
    ("dojistar", "Doji Star", None),
    ("eveningdojistar", "Evening Doji Star", 0.3),
    ("gapsidesidewhite", "Up/Down-gap side-by-side white lines", None),
    ("hangingman", "Hanging Man", None),
    ("haramicross", "Harami Cross Pattern", None),
    ("highwave", "High-Wave Candle", None),
    ("hikkake", "Hikkake Pattern", None),
    ("hikkakemod", "Modified Hikkake Pattern", None),
    ("homingpigeon", "Homing Pigeon", None),
    ("identical3crows", "Identical Three Crows", None),
    ("inneck", "In-Neck Pattern", None),
    ("invertedhammer", "Inverted Hammer", None),
    ("kicking", "Kicking", None),
    ("kickingbylength", "Kicking - bull/bear determined by the longer marubozu", None),
    ("ladderbottom", "Ladder Bottom", None),
    ("longleggeddoji", "Long Legged Doji", None),
    ("longline", "Long Line Candle", None),
    ("matchinglow", "Matching Low", None),
    ("mathold", "Mat Hold", 0.5),
    ("morningdojistar", "Morning Doji Star", 0.3),
    ("onneck", "On-Neck Pattern", None),
    ("rickshawman", "Rickshaw Man", None),
    ("risefall3methods", "Rising/Falling Three Methods", None),
    ("separatinglines", "Separating Lines", None),
    ("shortline", "Short Line Candle", None),
    ("stalledpattern", "Stalled Pattern", None),
    ("sticksandwich", "Stick Sandwich", None),
    ("takuri", "Takuri (Dragonfly Doji with very long lower shadow)", None),
    ("tasukigap", "Tasuki Gap", None),
    ("thrusting", "Thrusting Pattern", None),
    ("tristar", "Tristar Pattern", None),
    ("unique3river", "Unique 3 River", None),
    ("upsidegap2crows", "Upside Gap Two Crows", None),
    ("xsidegap3methods", "Upside/Downside Gap Three Methods", None),
)


def pattern_names() -> tuple[str, ...]:
    return tuple(f"cdl_{suffix}" for suffix, _, _ in _PATTERNS)


def defs() -> tuple[IndicatorSpec, ...]:
    """
    Return candlestick pattern specs in stable order.

    Args:
        None.
    Returns:
        tuple[IndicatorSpec, ...]: One spec per pattern, named `cdl_<pattern>`.
    Assumptions:
        Native function id is `CDL` followed by the upper-cased pattern suffix.
    Raises:
        ValueError: If any spec violates domain invariants.
    Side Effects:
        None.
    """
    items = []
    for suffix, title, penetration in _PATTERNS:
        options = ()
        if penetration is not None:
            options = (real("penetration", penetration, "optInPenetration", hard_min=0.0),)
        items.append(
            IndicatorSpec(
                name=f"cdl_{suffix}",
                function_id=FunctionId(f"CDL{suffix}"),
                title=title,
                group=_GROUP,
                inputs=_OHLC,
                options=options,
            )
        )
    return tuple(items)
