from .definitions import all_specs
from .entities import (
    PRICE_ROLE_SLOTS,
    FunctionId,
    FunctionSchema,
    IndicatorSpec,
    InputKind,
    InputParamDef,
    MovingAverageType,
    NativeRetCode,
    OptInputDef,
    OptInputKind,
    OptionKind,
    OptionSpec,
    OutputDef,
    OutputKind,
    PriceRole,
)

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
    "all_specs",
]
