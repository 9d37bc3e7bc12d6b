# ftls

Small helpers for characters, byte buffers, strings, formatted output,
linked lists and reading streams one line at a time.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `ftls.chars`

Character tests and conversions. Each function takes either a
one-character string or an integer code point.

- `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print` return `bool`
  for the ASCII ranges they name.
- `to_upper` and `to_lower` change ASCII letters only and return a value of
  the same kind they were given.
- `atoi(text)` skips leading spaces, reads one optional sign and then digits
  up to the first non-digit. Text without digits gives `0`; positive values
  above 2147483647 come back as 2147483648.
- `itoa(n)` returns the decimal text of an integer.

```python
from ftls.chars import atoi, to_upper

atoi("  -42abc")   # -42
to_upper("q")      # "Q"
```

### `ftls.memory`

Operations on `bytearray` buffers. A count larger than a buffer raises
`ValueError`.

- `memset(buf, value, n)`, `bzero(buf, n)`: fill the first `n` bytes.
- `calloc(count, size)`: a zero-filled `bytearray` of `count * size` bytes.
- `memcpy(dest, src, n)`: copy the first `n` bytes of `src` into `dest`.
- `memmove(buf, dest, src, n)`: copy `n` bytes inside `buf` from offset
  `src` to offset `dest`; the regions may overlap.
- `memchr(data, c, n)`: index of the first byte equal to `c`, or `None`.
- `memcmp(a, b, n)`: difference of the first unequal pair of bytes, or `0`.

### `ftls.strings`

- `strlen`, `strdup`, `strndup(s, n)`, `substr(s, start, length)`.
- `strchr(s, c)` / `strrchr(s, c)`: index of the first or last occurrence,
  or `None`. Searching for NUL gives `len(s)`.
- `strncmp(a, b, n)`: code difference at the first mismatch within `n`
  characters.
- `strnstr(big, little, length)`: index of `little` inside the first
  `length` characters of `big`, or `None`.
- `strjoin(a, b)`: concatenation; a `None` first string counts as empty.
- `strtrim(s, charset)`: strip characters in `charset` from both ends.
- `split(s, c)`: split on one character, dropping empty pieces.
- `strlcpy(src, size)` and `strlcat(dst, src, size)`: return a tuple of the
  text that fits in a buffer of `size` characters (terminator included) and
  the length that was attempted.
- `strmapi(s, func)`: a new string of `func(index, char)`.
- `striteri(chars, func)`: replace each element of a mutable sequence in
  place with `func(index, char)`.

```python
from ftls.strings import split, strlcpy

split("  a  b c ", " ")   # ["a", "b", "c"]
strlcpy("hello", 3)       # ("he", 5)
```

### `ftls.output`

Each function writes to `stream` (standard output when omitted) and returns
the number of characters written.

- `putchar`, `putstr` (`None` is written as `(null)`), `putendl`, `putnbr`.
- `putnbr_unsigned(n)` and `puthex(n, upper=False)` treat `n` as a 32-bit
  unsigned value.
- `put_address(n)` writes `0x` followed by lowercase hexadecimal.
- `printf(fmt, *args, stream=None)` supports `%c %s %p %d %i %u %x %X %%`.
  A null or zero `%p` argument is written as `(nil)`; an unknown conversion
  character is skipped; too few arguments raise `TypeError`.

```python
import io
from ftls.output import printf

buf = io.StringIO()
printf("%s=%x%%", "n", 255, stream=buf)   # returns 6
buf.getvalue()                            # "n=ff%"
```

### `ftls.linkedlist`

`LinkedList` is a singly linked list made of `Node` objects (`value`,
`next`). It supports `push_front`, `push_back`, `last()`, `len()`,
iteration, `pop_front(on_delete=None)`, `clear(on_delete=None)`,
`for_each(func)` and `map(func)`, which returns a new list.

```python
from ftls.linkedlist import LinkedList

items = LinkedList([1, 2, 3])
items.push_front(0)
list(items.map(lambda x: x * 10))   # [0, 10, 20, 30]
```

### `ftls.lines`

`LineReader(stream, buffer_size=10000)` reads a text or binary stream in
chunks of `buffer_size` and returns lines without their newline.
`read_line()` returns `None` at end of input; a final line without a
trailing newline is still returned. Iterating over the reader yields every
remaining line.

```python
import io
from ftls.lines import LineReader

list(LineReader(io.StringIO("one\ntwo"), buffer_size=2))   # ["one", "two"]
```

## What this package does not do

There is no command-line program and no directory listing: the package
provides the helper modules above only, and installs no command.