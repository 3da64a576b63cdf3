"""String and memory helpers with NUL-terminated string semantics.

Functions that locate something return an index into the argument,
or None where nothing was found.
"""

from itertools import takewhile


def _cstr(s):
    return s.partition("\0")[0]


def _signed(byte):
    return byte - 256 if byte > 127 else byte


def _compare(x, y):
    return (x > y) - (x < y)


def strchr(s, c):
    """Index of the first ``c`` in ``s``; searching for NUL finds the end."""
    s = _cstr(s)
    if c == "\0":
        return len(s)
    index = s.find(c)
    return None if index < 0 else index


def strrchr(s, c):
    """Index of the last ``c`` in ``s``; searching for NUL finds the end."""
    s = _cstr(s)
    if c == "\0":
        return len(s)
    index = s.rfind(c)
    return None if index < 0 else index


def strspn(s, accept):
    """Length of the leading run of ``s`` made of characters in ``accept``."""
    accept = set(_cstr(accept))
    return sum(1 for _ in takewhile(accept.__contains__, _cstr(s)))


def strcspn(s, reject):
    """Length of the leading run of ``s`` free of characters in ``reject``."""
    reject = set(_cstr(reject))
    return sum(1 for _ in takewhile(lambda c: c not in reject, _cstr(s)))


def strpbrk(s, accept):
    """Index of the first character of ``s`` that is in ``accept``."""
    accept = set(_cstr(accept))
    return next((i for i, c in enumerate(_cstr(s)) if c in accept), None)


def strstr(haystack, needle):
    """Index of the first occurrence of ``needle``; an empty needle is at 0."""
    index = _cstr(haystack).find(_cstr(needle))
    return None if index < 0 else index


def strcmp(a, b):
    """Compare two strings, returning -1, 0 or 1."""
    return _compare(_cstr(a), _cstr(b))


def strncmp(a, b, n):
    """Compare at most ``n`` leading characters, returning -1, 0 or 1."""
    n = max(n, 0)
    return _compare(_cstr(a)[:n], _cstr(b)[:n])


def strncpy(s, n):
    """The ``n`` characters a bounded copy produces: truncated or NUL-padded."""
    n = max(n, 0)
    return _cstr(s)[:n].ljust(n, "\0")


def strncat(dest, src, n):
    """``dest`` followed by at most ``n`` characters of ``src``."""
    return _cstr(dest) + _cstr(src)[: max(n, 0)]


class Tokenizer:
    """Splits text into tokens, allowing the delimiters to change per call."""

    def __init__(self, text):
        self._rest = _cstr(text)

    def next_token(self, delims):
        """Return the next token, or None once the text is used up."""
        if self._rest is None:
            return None
        rest = self._rest[strspn(self._rest, delims):]
        if not rest:
            self._rest = None
            return None
        end = strpbrk(rest, delims)
        if end is None:
            self._rest = None
            return rest
        self._rest = rest[end + 1:]
        return rest[:end]


def tokenize(text, delims):
    """Yield the tokens of ``text`` separated by runs of ``delims``."""
    tokenizer = Tokenizer(text)
    while (token := tokenizer.next_token(delims)) is not None:
        yield token


def memchr(buf, c, n):
    """Index of byte ``c`` within the first ``n`` bytes of ``buf``."""
    c &= 0xFF
    return next((i for i, b in enumerate(buf[: max(n, 0)]) if b == c), None)


def memcmp(a, b, n):
    """Compare ``n`` bytes as signed chars, returning -1, 0 or 1."""
    for x, y in zip(a[: max(n, 0)], b[: max(n, 0)]):
        result = _compare(_signed(x), _signed(y))
        if result:
            return result
    return 0


def _check_range(buf, start, n):
    if start < 0 or start + n > len(buf):
        raise IndexError("memory range outside buffer")


def memmove(buf, dest, src, n):
    """Copy ``n`` bytes within ``buf`` from ``src`` to ``dest``; overlap is safe."""
    if n <= 0:
        return
    _check_range(buf, dest, n)
    _check_range(buf, src, n)
    buf[dest:dest + n] = bytes(buf[src:src + n])


def memset(buf, start, value, n):
    """Fill ``n`` bytes of ``buf`` from ``start`` with ``value``."""
    if n <= 0:
        return
    _check_range(buf, start, n)
    buf[start:start + n] = bytes([value & 0xFF]) * n