from .dto import BindingDirective, BundleBinding, IndicatorOutputs, SingleBinding
from .ports import FunctionSchemaRegistry, NativeCall, TaLibNative
from .services import InputBinder, NativeCallAdapter, TechnicalIndicators

__all__ = [
    "BindingDirective",
    "BundleBinding",
    "FunctionSchemaRegistry",
    "IndicatorOutputs",
    "InputBinder",
    "NativeCall",
    "NativeCallAdapter",
    "SingleBinding",
    "TaLibNative",
    "TechnicalIndicators",
]
