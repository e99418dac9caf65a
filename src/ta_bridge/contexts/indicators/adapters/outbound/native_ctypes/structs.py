"""
ctypes mirrors of the TA-Lib abstract interface structures and enums.

Layouts follow `ta_abstract.h`; every pointer to an opaque native object is a
`c_void_p`.
"""

from __future__ import annotations

import ctypes

from ta_bridge.contexts.indicators.domain.entities import (
    PRICE_ROLE_SLOTS,
    InputKind,
    OptInputKind,
    OutputKind,
    PriceRole,
)

# TA_InputParameterType
INPUT_TYPES: dict[int, InputKind] = {
    0: InputKind.PRICE,
    1: InputKind.REAL,
    2: InputKind.INTEGER,
}

# TA_OptInputParameterType
OPT_INPUT_REAL_RANGE = 0
OPT_INPUT_REAL_LIST = 1
OPT_INPUT_INTEGER_RANGE = 2
OPT_INPUT_INTEGER_LIST = 3
OPT_INPUT_TYPES: dict[int, OptInputKind] = {
    OPT_INPUT_REAL_RANGE: OptInputKind.REAL,
    OPT_INPUT_REAL_LIST: OptInputKind.REAL,
    OPT_INPUT_INTEGER_RANGE: OptInputKind.INTEGER,
    OPT_INPUT_INTEGER_LIST: OptInputKind.INTEGER,
}

# TA_OutputParameterType
OUTPUT_TYPES: dict[int, OutputKind] = {
    0: OutputKind.REAL,
    1: OutputKind.INTEGER,
}

# TA_InputFlags, bit i marks slot i of TA_SetInputParamPricePtr
PRICE_FLAG_BITS: tuple[tuple[int, PriceRole], ...] = tuple(
    (1 << slot, role) for slot, role in enumerate(PRICE_ROLE_SLOTS)
)


def roles_from_flags(flags: int) -> tuple[PriceRole, ...]:
    return tuple(role for bit, role in PRICE_FLAG_BITS if flags & bit)


class TaStringTable(ctypes.Structure):
    _fields_ = [
        ("size", ctypes.c_uint),
        ("string", ctypes.POINTER(ctypes.c_char_p)),
        ("hiddenData", ctypes.c_void_p),
    ]


class TaFuncInfo(ctypes.Structure):
    _fields_ = [
        ("name", ctypes.c_char_p),
        ("group", ctypes.c_char_p),
        ("hint", ctypes.c_char_p),
        ("camelCaseName", ctypes.c_char_p),
        ("flags", ctypes.c_int),
        ("nbInput", ctypes.c_uint),
        ("nbOptInput", ctypes.c_uint),
        ("nbOutput", ctypes.c_uint),
        ("handle", ctypes.c_void_p),
    ]


class TaInputParameterInfo(ctypes.Structure):
    _fields_ = [
        ("type", ctypes.c_int),
        ("paramName", ctypes.c_char_p),
        ("flags", ctypes.c_int),
    ]


class TaOptInputParameterInfo(ctypes.Structure):
    _fields_ = [
        ("type", ctypes.c_int),
        ("paramName", ctypes.c_char_p),
        ("flags", ctypes.c_int),
        ("displayName", ctypes.c_char_p),
        ("dataSet", ctypes.c_void_p),
        ("defaultValue", ctypes.c_double),
        ("hint", ctypes.c_char_p),
        ("helpFile", ctypes.c_char_p),
    ]


class TaOutputParameterInfo(ctypes.Structure):
    _fields_ = [
        ("type", ctypes.c_int),
        ("paramName", ctypes.c_char_p),
        ("flags", ctypes.c_int),
    ]


class TaRealRange(ctypes.Structure):
    _fields_ = [
        ("min", ctypes.c_double),
        ("max", ctypes.c_double),
        ("precision", ctypes.c_int),
        ("suggested_start", ctypes.c_double),
        ("suggested_end", ctypes.c_double),
        ("suggested_increment", ctypes.c_double),
    ]


class TaIntegerRange(ctypes.Structure):
    _fields_ = [
        ("min", ctypes.c_int),
        ("max", ctypes.c_int),
        ("suggested_start", ctypes.c_int),
        ("suggested_end", ctypes.c_int),
        ("suggested_increment", ctypes.c_int),
    ]


def declare_signatures(library: ctypes.CDLL) -> None:
    """
    Declare argument and return types of every abstract-interface entry point used.

    Args:
        library: Loaded TA-Lib shared library.
    Returns:
        None.
    Assumptions:
        All functions return `TA_RetCode` (C int).
    Raises:
        AttributeError: If the library lacks an abstract-interface symbol.
    Side Effects:
        Mutates `argtypes`/`restype` of the library function objects.
    """
    void_p = ctypes.c_void_p
    uint = ctypes.c_uint
    signatures: dict[str, list[object]] = {
        "TA_Initialize": [],
        "TA_GroupTableAlloc": [ctypes.POINTER(ctypes.POINTER(TaStringTable))],
        "TA_GroupTableFree": [ctypes.POINTER(TaStringTable)],
        "TA_FuncTableAlloc": [ctypes.c_char_p, ctypes.POINTER(ctypes.POINTER(TaStringTable))],
        "TA_FuncTableFree": [ctypes.POINTER(TaStringTable)],
        "TA_GetFuncHandle": [ctypes.c_char_p, ctypes.POINTER(void_p)],
        "TA_GetFuncInfo": [void_p, ctypes.POINTER(ctypes.POINTER(TaFuncInfo))],
        "TA_GetInputParameterInfo": [
            void_p,
            uint,
            ctypes.POINTER(ctypes.POINTER(TaInputParameterInfo)),
        ],
        "TA_GetOptInputParameterInfo": [
            void_p,
            uint,
            ctypes.POINTER(ctypes.POINTER(TaOptInputParameterInfo)),
        ],
        "TA_GetOutputParameterInfo": [
            void_p,
            uint,
            ctypes.POINTER(ctypes.POINTER(TaOutputParameterInfo)),
        ],
        "TA_ParamHolderAlloc": [void_p, ctypes.POINTER(void_p)],
        "TA_ParamHolderFree": [void_p],
        "TA_SetInputParamRealPtr": [void_p, uint, void_p],
        "TA_SetInputParamIntegerPtr": [void_p, uint, void_p],
        "TA_SetInputParamPricePtr": [void_p, uint, void_p, void_p, void_p, void_p, void_p, void_p],
        "TA_SetOptInputParamInteger": [void_p, uint, ctypes.c_int],
        "TA_SetOptInputParamReal": [void_p, uint, ctypes.c_double],
        "TA_SetOutputParamRealPtr": [void_p, uint, void_p],
        "TA_SetOutputParamIntegerPtr": [void_p, uint, void_p],
        "TA_CallFunc": [
            void_p,
            ctypes.c_int,
            ctypes.c_int,
            ctypes.POINTER(ctypes.c_int),
            ctypes.POINTER(ctypes.c_int),
        ],
    }
    for name, argtypes in signatures.items():
        function = getattr(library, name)
        function.argtypes = argtypes
        function.restype = ctypes.c_int
