from .argument_count_mismatch_error import ArgumentCountMismatchError
from .binding_error import BindingError
from .empty_input_error import EmptyInputError
from .input_length_mismatch_error import InputLengthMismatchError
from .insufficient_inputs_error import InsufficientInputsError
from .invalid_parameter_error import InvalidParameterError
from .missing_bundle_element_error import MissingBundleElementError
from .native_call_error import NativeCallError, check_return_code
from .talib_not_installed_error import TaLibNotInstalledError
from .type_mismatch_error import TypeMismatchError
from .unknown_function_error import UnknownFunctionError
from .unknown_indicator_error import UnknownIndicatorError
from .unsupported_parameter_kind_error import UnsupportedParameterKindError

__all__ = [
    "ArgumentCountMismatchError",
    "BindingError",
    "EmptyInputError",
    "InputLengthMismatchError",
    "InsufficientInputsError",
    "InvalidParameterError",
    "MissingBundleElementError",
    "NativeCallError",
    "TaLibNotInstalledError",
    "TypeMismatchError",
    "UnknownFunctionError",
    "UnknownIndicatorError",
    "UnsupportedParameterKindError",
    "check_return_code",
]
