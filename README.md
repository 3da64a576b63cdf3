# minilibc

A handful of classic C library routines with Python interfaces. The package has no dependencies outside the standard library.

## Modules

### `minilibc.scanf`

`sscanf(text, fmt)`, `fscanf(stream, fmt)` and `scanf(fmt)` read formatted input. Each returns the list of converted values in format order.

- `sscanf` reads from a string. It stops at the first NUL character.
- `fscanf` reads one character at a time from a text stream.
- `scanf` reads from `sys.stdin`.

Supported conversions:

| Conversion | Reads |
|---|---|
| `%d` | A signed decimal integer. |
| `%u` | An unsigned decimal integer. |
| `%i` | An integer whose base follows its prefix: `0x` for hexadecimal, a leading `0` for octal, otherwise decimal. |
| `%o` | An octal integer. |
| `%x` / `%X` | A hexadecimal integer, with or without a `0x` prefix. |
| `%e %f %F %g %G` | A floating-point number, returned as a `float`. |
| `%c` | Exactly *width* characters, one by default. |
| `%s` | A run of non-whitespace characters. |
| `%[...]` / `%[^...]` | A run of characters that are in the set, or not in it. |
| `%n` | The number of characters consumed so far. |

Modifiers:

- A field width such as `%3d` limits how many characters a conversion reads.
- `*` (`%*d`) reads the field and discards it.
- Length modifiers `h`, `l` and `L` are accepted and have no effect, so `%lf` works like `%f`.
- Whitespace in the format skips any amount of whitespace in the input. Other literal characters must match the input exactly. At the first mismatch the function returns the values converted so far.

Errors:

- `EOFError` is raised if the input runs out before anything was converted.
- `ValueError` is raised for `%p`, for an unknown conversion, and for a format that ends inside a conversion.

### `minilibc.strings`

String and memory helpers that follow NUL-terminated semantics: text after a `"\0"` is ignored. Functions that locate something return an index into the argument, or `None` if nothing was found.

Strings:

- `strchr` and `strrchr` find the first or last occurrence of a character.
- `strstr` finds a substring.
- `strpbrk` finds the first character that belongs to a set.
- `strspn` and `strcspn` give the length of the leading run of characters in a set, or not in a set.
- `strcmp(a, b)` and `strncmp(a, b, n)` return `-1`, `0` or `1`.
- `strncpy(s, n)` returns `s` cut to `n` characters or padded with NULs up to `n`.
- `strncat(dest, src, n)` returns `dest` followed by at most `n` characters of `src`.
- `Tokenizer(text).next_token(delims)` returns tokens one at a time, and the delimiters may change on each call. `None` signals the end.
- `tokenize(text, delims)` yields all tokens, collapsing runs of delimiters.

Memory (on `bytes` and `bytearray`):

- `memchr(buf, c, n)` finds a byte.
- `memcmp(a, b, n)` compares bytes as signed chars.
- `memmove(buf, dest, src, n)` copies within a `bytearray` in place, and overlapping ranges are safe.
- `memset(buf, start, value, n)` fills a range in place.

Both `memmove` and `memset` raise `IndexError` when the range falls outside the buffer.

### `minilibc.systime`

Dataclass records:

- `Timeval`, with `is_set()` and `clear()`.
- `Timezone`
- `Itimerval`
- `Tm`
- `Tms`
- `Stat`

Enumerations:

- `DST`
- `ITimer`

`timercmp(a, b, op)` compares two `Timeval`s with an operator. The operator is either a symbol such as `"<"` or a two-argument callable. As with the classic macro, the result is not correct for `<=` and `>=`.

### `minilibc.constants`

- Integer limits, such as `INT_MAX` and `LONG_MIN`.
- Float and double characteristics, such as `DBL_EPSILON` and `FLT_MAX`.
- `SIG_DFL`, `SIG_ERR` and `SIG_IGN`.
- The `Signal` enumeration, in which `ABRT` is an alias of `QUIT`.

## Examples

```python
from minilibc.scanf import sscanf

sscanf("12 3.5 abc", "%d %lf %s")      # [12, 3.5, 'abc']
sscanf("0x1f 017", "%i %i")            # [31, 15]
```

```python
from minilibc.strings import tokenize, strstr, Tokenizer

list(tokenize("a,,b c", ", "))         # ['a', 'b', 'c']
strstr("hello world", "wor")           # 6

tok = Tokenizer("x;y;z")
tok.next_token(";")                    # 'x'
```

```python
import operator
from minilibc.systime import Timeval, timercmp

a, b = Timeval(1, 500), Timeval(1, 700)
timercmp(a, b, operator.lt)            # True
```

## What it does not do

- There is no formatted output (no `printf` family).
- The `systime` records are plain data. Nothing here queries the clock or the file system to fill them in.
- `Signal` only names signal numbers. It does not install handlers or raise signals.
- The package provides no command-line program.

## Running the tests

```
pip install -e .[test]
pytest
```