from __future__ import annotations

from enum import Enum


class PriceRole(str, Enum):
    """
    Semantic price series a price-bundle slot represents.

    Declaration order is the native slot order of `TA_SetInputParamPricePtr`.

    Related: .input_param_def, ...application.services.native_call_adapter
    """

    OPEN = "open"
    HIGH = "high"
    LOW = "low"
    CLOSE = "close"
    VOLUME = "volume"
    OPEN_INTEREST = "openinterest"


PRICE_ROLE_SLOTS: tuple[PriceRole, ...] = tuple(PriceRole)
