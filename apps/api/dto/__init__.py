from .indicators import (
    IndicatorComputeRequest,
    IndicatorComputeResponse,
    IndicatorResponse,
    IndicatorsResponse,
    OptionResponse,
    build_indicator_compute_response,
    build_indicator_response,
    build_indicators_response,
)

__all__ = [
    "IndicatorComputeRequest",
    "IndicatorComputeResponse",
    "IndicatorResponse",
    "IndicatorsResponse",
    "OptionResponse",
    "build_indicator_compute_response",
    "build_indicator_response",
    "build_indicators_response",
]
