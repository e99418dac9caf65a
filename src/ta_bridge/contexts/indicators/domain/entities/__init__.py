from .function_id import FunctionId
from .function_schema import FunctionSchema
from .indicator_spec import IndicatorSpec, OptionKind, OptionSpec
from .input_kind import InputKind
from .input_param_def import InputParamDef
from .moving_average_type import MovingAverageType
from .native_ret_code import NativeRetCode
from .opt_input_def import OptInputDef, OptInputKind
from .output_def import OutputDef, OutputKind
from .price_role import PRICE_ROLE_SLOTS, PriceRole

__all__ = [
    "PRICE_ROLE_SLOTS",
    "FunctionId",
    "FunctionSchema",
    "IndicatorSpec",
    "InputKind",
    "InputParamDef",
    "MovingAverageType",
    "NativeRetCode",
    "OptInputDef",
    "OptInputKind",
    "OptionKind",
    "OptionSpec",
    "OutputDef",
    "OutputKind",
    "PriceRole",
]
