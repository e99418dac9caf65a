from __future__ import annotations


class UnknownIndicatorError(LookupError):
    """
    Raised when an indicator name is not in the convenience catalog.

    Related: ..definitions, ...application.services.indicators.base
    """
