from .binding_directive import BindingDirective, BundleBinding, SingleBinding
from .indicator_outputs import IndicatorOutputs

__all__ = [
    "BindingDirective",
    "BundleBinding",
    "IndicatorOutputs",
    "SingleBinding",
]
