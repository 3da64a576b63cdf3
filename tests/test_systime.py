import operator

import pytest

from minilibc.systime import DST, ITimer, Itimerval, Timeval, Tms, timercmp


def test_timeval_is_set():
    assert Timeval(3, 0).is_set() is True
    assert Timeval(0, 7).is_set() is True
    assert Timeval().is_set() is False


def test_timeval_clear():
    tv = Timeval(5, 9)
    tv.clear()
    assert tv == Timeval()
    assert tv.is_set() is False


@pytest.mark.parametrize(
    "a, b",
    [(Timeval(1, 5), Timeval(2, 0)), (Timeval(1, 3), Timeval(1, 5))],
)
def test_timercmp_orders_earlier_first(a, b):
    assert timercmp(a, b, "<") is True
    assert timercmp(b, a, ">") is True
    assert timercmp(a, b, ">") is False
    assert timercmp(a, b, operator.lt) is True


def test_timercmp_equality():
    assert timercmp(Timeval(4, 2), Timeval(4, 2), "==") is True
    assert timercmp(Timeval(4, 2), Timeval(4, 3), "!=") is True


def test_timercmp_less_equal_quirk():
    assert timercmp(Timeval(1, 5), Timeval(1, 3), "<=") is True


def test_timercmp_unknown_operator():
    with pytest.raises(ValueError):
        timercmp(Timeval(), Timeval(), "<>")


@pytest.mark.parametrize(
    "enum_type, raw, member",
    [
        (DST, 0, DST.NONE),
        (DST, 1, DST.USA),
        (DST, 5, DST.EET),
        (ITimer, 0, ITimer.REAL),
        (ITimer, 2, ITimer.PROF),
    ],
)
def test_enum_lookup_by_value(enum_type, raw, member):
    assert enum_type(raw) is member


def test_enum_lookup_rejects_unknown_value():
    with pytest.raises(ValueError):
        DST(42)
    with pytest.raises(ValueError):
        ITimer(3)


def test_record_defaults():
    assert Tms().stime == Tms().cutime == Tms().cstime == 0
    timer = Itimerval()
    assert timer.interval.is_set() is False
    assert timer.interval is not timer.value