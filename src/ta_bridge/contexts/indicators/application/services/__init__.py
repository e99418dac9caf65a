from .indicator_error_mapping import map_indicator_error
from .indicators import IndicatorResult, TechnicalIndicators
from .input_arrangement import arrange_inputs
from .input_binder import InputBinder
from .input_validation import (
    validate_equal_lengths,
    validate_option,
    validate_period,
    validate_series,
)
from .native_call_adapter import (
    NativeCallAdapter,
    as_numeric_vector,
    build_price_slots,
    compute_input_length,
)

__all__ = [
    "IndicatorResult",
    "InputBinder",
    "NativeCallAdapter",
    "TechnicalIndicators",
    "arrange_inputs",
    "as_numeric_vector",
    "build_price_slots",
    "compute_input_length",
    "map_indicator_error",
    "validate_equal_lengths",
    "validate_option",
    "validate_period",
    "validate_series",
]
