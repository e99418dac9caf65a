from __future__ import annotations

from enum import IntEnum


class NativeRetCode(IntEnum):
    """
    Return-code taxonomy of the TA-Lib C library (`TA_RetCode`).
    """

    SUCCESS = 0
    LIB_NOT_INITIALIZE = 1
    BAD_PARAM = 2
    ALLOC_ERR = 3
    GROUP_NOT_FOUND = 4
    FUNC_NOT_FOUND = 5
    INVALID_HANDLE = 6
    INVALID_PARAM_HOLDER = 7
    INVALID_PARAM_HOLDER_TYPE = 8
    INVALID_PARAM_FUNCTION = 9
    INPUT_NOT_ALL_INITIALIZE = 10
    OUTPUT_NOT_ALL_INITIALIZE = 11
    OUT_OF_RANGE_START_INDEX = 12
    OUT_OF_RANGE_END_INDEX = 13
    INVALID_LIST_TYPE = 14
    BAD_OBJECT = 15
    NOT_SUPPORTED = 16
    INTERNAL_ERROR = 5000
    UNKNOWN_ERR = 0xFFFF

    @classmethod
    def from_code(cls, code: int) -> NativeRetCode:
        """
        Map a raw native code onto the taxonomy.

        Args:
            code: Raw integer returned by a native entry point.
        Returns:
            NativeRetCode: Matching member, `UNKNOWN_ERR` for codes outside the taxonomy.
        Assumptions:
            TA-Lib reserves 5000..5999 for internal errors.
        Raises:
            None.
        Side Effects:
            None.
        """
        try:
            return cls(code)
        except ValueError:
            if 5000 <= code < 6000:
                return cls.INTERNAL_ERROR
            return cls.UNKNOWN_ERR
