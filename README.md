# ftkit

A small toolkit of ASCII character, string, number and output helpers.
Each helper has exactly defined edge-case behaviour. The package also has a
line reader that uses a fixed-size buffer. It needs only the standard
library.

## Install

    pip install ftkit

## Modules

### `ftkit.charclass`

`is_alpha`, `is_digit`, `is_alnum`, `is_ascii` and `is_print` each take a
one-character string or an integer code and return a `bool`. They test
against ASCII ranges only. `to_upper` and `to_lower` convert ASCII letters
and leave any other character unchanged. They return a `str` when given a
`str` and an `int` when given an `int`. A string longer than one character
raises `ValueError`.

### `ftkit.search`

These functions take `str` or `bytes` and stop looking at the first NUL
character:

- `strchr` and `strrchr` return the index of a character, or `None`.
  Searching for NUL returns the length of the string.
- `strcmp` and `strncmp` return the difference between the first pair of
  character codes that differ, or `0` when the strings are equal.
- `strnstr` finds a needle that lies wholly within the first `length`
  characters. An empty needle is found at index `0`.

`memchr` and `memcmp` work on raw bytes, limited to the first `n` of them.
They raise `ValueError` if `n` is negative or longer than the buffer.

### `ftkit.transform`

- `substr(s, start, length)` returns a slice of `s`. A `start` past the end
  gives `""`.
- `strjoin(s1, s2)` returns the two strings concatenated.
- `strtrim(s, charset)` removes characters in `charset` from both ends.
- `split(s, sep)` splits on a single character and drops empty pieces.
- `strlcpy(src, size)` and `strlcat(dst, src, size)` model copies and
  appends into a buffer of a given size. Each returns a tuple of
  `(resulting_text, length_it_tried_to_make)`.
- `strmapi(s, func)` builds a new string from `func(index, char)`.
- `striteri(seq, func)` calls `func(index, item)` on each item of a mutable
  sequence. A return value other than `None` replaces the item in place.

### `ftkit.numbers`

`atoi(text)` works like this:

1. It skips leading whitespace.
2. It reads one optional sign.
3. It reads digits until the first character that is not a digit.

The result wraps around like a 32-bit signed integer. Text with no digits
gives `0`.

`itoa(n)` returns the decimal text of `n`. It raises `OverflowError` for
values outside the 32-bit signed range.

### `ftkit.printf`

`format_printf(fmt, *args)` returns the formatted text.
`printf(fmt, *args, stream=None)` writes that text and returns the number of
characters written. By default it writes to standard output.

The supported conversions are `%c %s %d %i %u %x %X %p %%`:

- Integer conversions wrap their argument to 32 bits.
- `%p` wraps its argument to 64 bits and prints it as `0x…` in hexadecimal.
- `%s` with `None` prints `(null)`.

Some inputs are errors or are ignored:

- A conversion character that is not supported is dropped and uses no
  argument.
- A `%` at the very end of `fmt` raises `ValueError`.
- Running out of arguments raises `TypeError`.

`put_char`, `put_str`, `put_endl` and `put_nbr` write a character, a string,
a string followed by a newline, or a 32-bit integer. They write to
`stream`, which defaults to standard output.

### `ftkit.nextline`

`LineReader(source, buffer_size=10)` reads lines from a file descriptor or
from any object that has a `read(size)` method. Such an object may give
either text or bytes. Each line keeps its trailing newline. `readline()`
returns `None` when no data is left, and iterating over the reader yields
lines until then. The reader stays open after the end of the data, so a
later call still sees data that arrives afterwards.

`get_next_line(fd)` reads bytes from a file descriptor. It keeps one reader
per descriptor, and the descriptor must be in the range `0..1023`. A
descriptor's leftover data is discarded once that descriptor is exhausted.

## Example

```python
from ftkit.transform import split
from ftkit.numbers import atoi, itoa
from ftkit.printf import format_printf

split("hola    que tal", " ")        # ['hola', 'que', 'tal']
atoi("   -42abc")                    # -42
itoa(-2147483648)                    # '-2147483648'
format_printf("%d is %x", 255, 255)  # '255 is ff'
```

## What it does not do

- ftkit is a library only. It has no command-line program and no
  interactive shell.
- `printf` supports no field widths, precision or flags.

## Tests

    pip install -e .[test]
    pytest