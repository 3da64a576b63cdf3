"""Formatted input: scanf-style parsing of strings and text streams.

Each function returns the list of converted values in format order.
If the input runs out before anything was converted, EOFError is raised.
"""

import re
import sys

_SPACE = frozenset(" \t\n\v\f\r")
_DIGITS = frozenset("0123456789")
_HEXDIGITS = frozenset("0123456789abcdefABCDEF")
_DEFAULT_WIDTH = 8388607
_NOTHING = object()
_FLOAT_PREFIX = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def _atof(text):
    match = _FLOAT_PREFIX.match(text)
    return float(match.group()) if match else 0.0


class _StreamSource:
    """Reads one character at a time and can step back over the last one."""

    def __init__(self, stream):
        self._stream = stream
        seekable = getattr(stream, "seekable", None)
        self._seekable = bool(seekable and seekable())
        self._pos = None

    def read(self):
        if self._seekable:
            self._pos = self._stream.tell()
        return self._stream.read(1) or None

    def unget(self, ch):
        if ch is not None and self._pos is not None:
            self._stream.seek(self._pos)


class _Scanner:
    def __init__(self, read, unget=None):
        self._read = read
        self._unget = unget
        self.nchars = -1
        self.ic = None
        self._advance()

    def _advance(self):
        self.nchars += 1
        self.ic = self._read()
        return self.ic

    def _skip_space(self):
        while self.ic is not None and self.ic in _SPACE:
            self._advance()

    def _take(self, width, accept):
        chars = []
        while width > 0 and self.ic is not None and accept(self.ic):
            chars.append(self.ic)
            self._advance()
            width -= 1
        return "".join(chars)

    def run(self, fmt):
        values = []
        count = 0
        spec = iter(fmt)
        for fc in spec:
            if self.ic is None:
                if count:
                    return values
                raise EOFError("input exhausted before any conversion")
            if fc in _SPACE:
                self._skip_space()
            elif fc != "%":
                if self.ic == fc:
                    self._advance()
                else:
                    if self._unget is not None:
                        self._unget(self.ic)
                    return values
            else:
                suppress, width, conv = self._directive(spec)
                if conv == "[":
                    charset, complement = self._scanset(spec)
                    count += 1
                    text = self._take(
                        _DEFAULT_WIDTH if width is None else width,
                        lambda c: (c in charset) != complement,
                    )
                    if not suppress:
                        values.append(text)
                    continue
                value = self._convert(conv, width)
                if value is _NOTHING or suppress:
                    continue
                values.append(value)
                count += 1
        return values

    @staticmethod
    def _directive(spec):
        fc = next(spec, "")
        suppress = fc == "*"
        if suppress:
            fc = next(spec, "")
        width = None
        if fc in _DIGITS:
            width = 0
            while fc in _DIGITS:
                width = width * 10 + int(fc)
                fc = next(spec, "")
            width = width or 1
        if fc in ("h", "l", "L"):
            fc = next(spec, "")
        if not fc:
            raise ValueError("format ends inside a conversion")
        return suppress, width, fc

    @staticmethod
    def _scanset(spec):
        fc = next(spec, "")
        complement = fc == "^"
        if complement:
            fc = next(spec, "")
        chars = set()
        while fc and fc != "]":
            chars.add(fc)
            fc = next(spec, "")
        return frozenset(chars), complement

    def _convert(self, conv, width):
        if conv == "c":
            return self._chars(1 if width is None else width)
        width = _DEFAULT_WIDTH if width is None else width
        match conv:
            case "i":
                return self._integer(width)
            case "d":
                return self._decimal(width, signed=True)
            case "u":
                return self._decimal(width, signed=False)
            case "o":
                return self._octal(width)
            case "x" | "X":
                return self._hex(width)
            case "e" | "f" | "F" | "g" | "G":
                return self._float(width)
            case "s":
                return self._string(width)
            case "n":
                return self.nchars
            case "p":
                raise ValueError("%p conversions are not supported")
            case _:
                raise ValueError(f"unknown conversion %{conv}")

    def _integer(self, width):
        self._skip_space()
        if self.ic is None:
            return _NOTHING
        if self.ic == "0":
            self._advance()
            if self.ic in ("x", "X"):
                self._advance()
                return self._hex(width)
            return self._octal(width)
        return self._decimal(width, signed=True)

    def _decimal(self, width, signed):
        self._skip_space()
        if self.ic is None:
            return _NOTHING
        negative = False
        if signed and self.ic in ("+", "-"):
            negative = self.ic == "-"
            self._advance()
            width -= 1
        digits = self._take(width, lambda c: c in _DIGITS)
        value = int(digits) if digits else 0
        return -value if negative else value

    def _octal(self, width):
        self._skip_space()
        if self.ic is None:
            return _NOTHING
        value = 0
        # Any decimal digit is accepted, weighted in base eight.
        for digit in self._take(width, lambda c: c in _DIGITS):
            value = value * 8 + int(digit)
        return value

    def _hex(self, width):
        self._skip_space()
        if self.ic is None:
            return _NOTHING
        if self.ic == "0":
            self._advance()
            if self.ic in ("x", "X"):
                self._advance()
        digits = self._take(width, lambda c: c in _HEXDIGITS)
        return int(digits, 16) if digits else 0

    def _float(self, width):
        self._skip_space()
        if self.ic is None:
            return _NOTHING
        buf = []
        has_point = False
        exp_seen = False
        if self.ic in ("+", "-"):
            buf.append(self.ic)
            self._advance()
            width -= 1
        while width > 0:
            width -= 1
            ch = self.ic
            if ch is not None and ch in _DIGITS:
                pass
            elif not has_point and not exp_seen and ch == ".":
                has_point = True
            elif not exp_seen and ch in ("e", "E"):
                buf.append(ch)
                self._advance()
                width -= 1
                if self.ic in ("+", "-"):
                    buf.append(self.ic)
                    self._advance()
                    width -= 1
                else:
                    exp_seen = True
            else:
                break
            if self.ic is not None:
                buf.append(self.ic)
            self._advance()
            width -= 1
        if not has_point and not exp_seen:
            buf.append(".")
        return _atof("".join(buf))

    def _chars(self, width):
        text = self._take(width, lambda c: True)
        return text if len(text) == width else _NOTHING

    def _string(self, width):
        self._skip_space()
        if self.ic is None:
            return _NOTHING
        return self._take(width, lambda c: c not in _SPACE)


def sscanf(text, fmt):
    """Parse ``text`` (up to its first NUL) according to ``fmt``."""
    chars = iter(text.partition("\0")[0])
    return _Scanner(lambda: next(chars, None)).run(fmt)


def fscanf(stream, fmt):
    """Parse characters read from a text stream according to ``fmt``."""
    source = _StreamSource(stream)
    return _Scanner(source.read, source.unget).run(fmt)


def scanf(fmt):
    """Parse characters from standard input according to ``fmt``."""
    return fscanf(sys.stdin, fmt)