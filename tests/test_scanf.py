import io
import statistics

import pytest

from minilibc.scanf import fscanf, scanf, sscanf


def test_hanly_113_reads_miles(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("10\n"))
    (miles,) = scanf("%lf")
    assert miles == 10.0
    assert "%.1f" % (1.609 * miles) == "16.1"


def test_hanly_83_reads_eight_numbers():
    stream = io.StringIO("16 12 6 8 2.5\n12 14 -54.5\n")
    values = [fscanf(stream, "%lf")[0] for _ in range(8)]
    assert values == [16.0, 12.0, 6.0, 8.0, 2.5, 12.0, 14.0, -54.5]
    assert "%.2f" % statistics.mean(values) == "2.00"
    assert "%.2f" % statistics.pstdev(values) == "21.75"


def test_stdin_exhausted_raises(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    with pytest.raises(EOFError):
        scanf("%lf")


@pytest.mark.parametrize(
    "text, fmt, expected",
    [
        ("42", "%d", [42]),
        ("  -17", "%d", [-17]),
        ("+8", "%d", [8]),
        ("-5", "%u", [0]),
        ("0x1f", "%i", [31]),
        ("017", "%i", [15]),
        ("12", "%i", [12]),
        ("ff", "%x", [255]),
        ("0XFF", "%X", [255]),
        ("17", "%o", [15]),
        ("12345", "%2d%d", [12, 345]),
    ],
)
def test_integer_conversions(text, fmt, expected):
    assert sscanf(text, fmt) == expected


@pytest.mark.parametrize(
    "text, expected",
    [("3.25", 3.25), ("1e3", 1000.0), ("-2.5e-1", -0.25), ("7", 7.0)],
)
def test_float_conversion(text, expected):
    assert sscanf(text, "%f") == [expected]


def test_strings_and_chars():
    assert sscanf("hello world", "%s %s") == ["hello", "world"]
    assert sscanf("abcdef", "%3s") == ["abc"]
    assert sscanf("xyz", "%c") == ["x"]
    assert sscanf("xyz", "%2c%c") == ["xy", "z"]


def test_partial_char_field_is_not_assigned():
    assert sscanf("ab", "%3c") == []


def test_scansets():
    assert sscanf("abcabd", "%[abc]") == ["abcab"]
    assert sscanf("name,5", "%[^,],%d") == ["name", 5]


def test_count_of_characters_read():
    assert sscanf("12 x", "%d%n") == [12, 2]


def test_suppressed_assignment():
    assert sscanf("1 2", "%*d %d") == [2]


def test_literal_mismatch_stops():
    assert sscanf("1;2", "%d,%d") == [1]


def test_whitespace_only_input_gives_nothing():
    assert sscanf("   ", "%d") == []


def test_empty_input_raises_eof():
    with pytest.raises(EOFError):
        sscanf("", "%d")


def test_nul_ends_string_input():
    assert sscanf("5\x006", "%d%d") == [5]


def test_pointer_conversion_rejected():
    with pytest.raises(ValueError):
        sscanf("0x10", "%p")


def test_truncated_format_rejected():
    with pytest.raises(ValueError):
        sscanf("5", "%")


def test_fscanf_pushes_back_mismatched_character():
    stream = io.StringIO("1;2")
    assert fscanf(stream, "%d,%d") == [1]
    assert stream.read() == ";2"