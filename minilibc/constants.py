"""Numeric limits, floating-point characteristics and signal numbers."""

from enum import IntEnum

CHAR_BIT = 8

SCHAR_MIN = -128
SCHAR_MAX = 127
UCHAR_MAX = 255

CHAR_MIN = SCHAR_MIN
CHAR_MAX = SCHAR_MAX

SHRT_MAX = 32767
SHRT_MIN = -32768
USHRT_MAX = 65535

INT_MAX = 2147483647
INT_MIN = -INT_MAX - 1
UINT_MAX = 4294967295

LONG_MAX = 9223372036854775807
LONG_MIN = -LONG_MAX - 1
ULONG_MAX = 18446744073709551615

FLT_RADIX = 2

FLT_MANT_DIG = 24
FLT_DIG = 6
FLT_ROUNDS = 1
FLT_EPSILON = 1.19209290e-07
FLT_MIN_EXP = -125
FLT_MIN = 1.17549435e-38
FLT_MIN_10_EXP = -37
FLT_MAX_EXP = 128
FLT_MAX = 3.40282347e38
FLT_MAX_10_EXP = 38

DBL_MANT_DIG = 53
DBL_DIG = 15
DBL_EPSILON = 2.2204460492503131e-16
DBL_MIN_EXP = -1021
DBL_MIN = 2.2250738585072014e-308
DBL_MIN_10_EXP = -307
DBL_MAX_EXP = 1024
DBL_MAX = 1.7976931348623157e308
DBL_MAX_10_EXP = 308

SIG_DFL = 0
SIG_ERR = -1
SIG_IGN = 1


class Signal(IntEnum):
    """Signal numbers; ABRT is an alias of QUIT."""

    HUP = 1
    INT = 2
    QUIT = 3
    ILL = 4
    TRAP = 5
    IOT = 6
    EMT = 7
    FPE = 8
    KILL = 9
    BUS = 10
    SEGV = 11
    SYS = 12
    PIPE = 13
    ALRM = 14
    TERM = 15
    ABRT = 3