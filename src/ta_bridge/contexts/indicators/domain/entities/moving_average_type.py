from __future__ import annotations

from enum import IntEnum


class MovingAverageType(IntEnum):
    """
    Moving-average kinds accepted by native `optIn*MAType` options.
    """

    SMA = 0
    EMA = 1
    WMA = 2
    DEMA = 3
    TEMA = 4
    TRIMA = 5
    KAMA = 6
    MAMA = 7
    T3 = 8
