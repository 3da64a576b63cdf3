"""Time and file-status records with the timeval helper operations."""

import operator
from dataclasses import dataclass, field
from enum import IntEnum


class DST(IntEnum):
    """Kinds of daylight-saving correction."""

    NONE = 0
    USA = 1
    AUST = 2
    WET = 3
    MET = 4
    EET = 5


class ITimer(IntEnum):
    """Names of the interval timers."""

    REAL = 0
    VIRTUAL = 1
    PROF = 2


@dataclass
class Timeval:
    """A time in seconds and microseconds."""

    sec: int = 0
    usec: int = 0

    def is_set(self):
        """True if either field is non-zero."""
        return bool(self.sec or self.usec)

    def clear(self):
        """Reset both fields to zero."""
        self.sec = self.usec = 0


@dataclass
class Timezone:
    minuteswest: int = 0
    dsttime: DST = DST.NONE


@dataclass
class Itimerval:
    interval: Timeval = field(default_factory=Timeval)
    value: Timeval = field(default_factory=Timeval)


@dataclass
class Tm:
    """Broken-down calendar time."""

    sec: int = 0
    min: int = 0
    hour: int = 0
    mday: int = 0
    mon: int = 0
    year: int = 0
    wday: int = 0
    yday: int = 0
    isdst: int = 0


@dataclass
class Tms:
    """Process times; only ``utime`` is ever filled in."""

    utime: int = 0
    stime: int = 0
    cutime: int = 0
    cstime: int = 0


@dataclass
class Stat:
    """Status of a file."""

    dev: int = 0
    ino: int = 0
    mode: int = 0
    nlink: int = 0
    uid: int = 0
    gid: int = 0
    rdev: int = 0
    size: int = 0
    atime: int = 0
    mtime: int = 0
    ctime: int = 0


_OPERATORS = {
    "<": operator.lt,
    ">": operator.gt,
    "==": operator.eq,
    "!=": operator.ne,
    "<=": operator.le,
    ">=": operator.ge,
}


def timercmp(a, b, op):
    """Compare two timevals with ``op`` (a symbol or a two-argument callable).

    Seconds decide unless equal, then microseconds; as with the classic
    macro, this is not correct for ``<=`` and ``>=``.
    """
    if isinstance(op, str):
        try:
            op = _OPERATORS[op]
        except KeyError:
            raise ValueError(f"unknown comparison {op!r}") from None
    return bool(op(a.sec, b.sec) or (a.sec == b.sec and op(a.usec, b.usec)))