from __future__ import annotations

from enum import Enum


class InputKind(str, Enum):
    """
    Native input parameter kinds.

    `PRICE` parameters consume one raw array per declared price role, the
    other kinds consume exactly one raw array.

    Related: .input_param_def, .price_role
    """

    PRICE = "price"
    REAL = "real"
    INTEGER = "integer"
