"""
Application ports for the indicators bounded context.
"""

from .native import NativeCall, TaLibNative
from .registry import FunctionSchemaRegistry

__all__ = [
    "FunctionSchemaRegistry",
    "NativeCall",
    "TaLibNative",
]
