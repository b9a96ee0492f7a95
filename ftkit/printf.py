"""Minimal formatted output and small writers for text streams.

Supported conversions are ``%c``, ``%s``, ``%d``, ``%i``, ``%u``, ``%x``,
``%X``, ``%p`` and ``%%``. Integer conversions treat their argument as a
32-bit value (``%p`` as a 64-bit address), wrapping around as the machine
types would. An unknown conversion character is dropped without output
and without consuming an argument.
"""

from __future__ import annotations

import operator
import sys
from typing import Any, Callable, Dict, Iterator, Optional, TextIO, Union

from ftkit.numbers import itoa

_UINT32 = 0xFFFFFFFF
_UINT64 = 0xFFFFFFFFFFFFFFFF


def _char(value: Union[str, int]) -> str:
    """Return the one-character string for ``value``."""
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {len(value)} characters")
        return value
    return chr(operator.index(value) & 0xFF)


def _signed32(value: int) -> int:
    return ((operator.index(value) + 2**31) & _UINT32) - 2**31


def _unsigned32(value: int) -> int:
    return operator.index(value) & _UINT32


def _string(value: Optional[str]) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s expects a str or None, got {type(value).__name__}")
    return value


def _pointer(value: Optional[int]) -> str:
    address = 0 if value is None else operator.index(value) & _UINT64
    return f"0x{address:x}"


_CONVERSIONS: Dict[str, Callable[[Any], str]] = {
    "c": _char,
    "s": _string,
    "d": lambda v: str(_signed32(v)),
    "i": lambda v: str(_signed32(v)),
    "u": lambda v: str(_unsigned32(v)),
    "x": lambda v: f"{_unsigned32(v):x}",
    "X": lambda v: f"{_unsigned32(v):X}",
    "p": _pointer,
}


def _pieces(fmt: str, args: tuple) -> Iterator[str]:
    remaining = iter(args)
    chars = iter(fmt)
    for char in chars:
        if char != "%":
            yield char
            continue
        spec = next(chars, None)
        if spec is None:
            raise ValueError("format string ends with an incomplete conversion")
        if spec == "%":
            yield "%"
            continue
        convert = _CONVERSIONS.get(spec)
        if convert is None:
            continue
        try:
            arg = next(remaining)
        except StopIteration:
            raise TypeError(f"not enough arguments for conversion %{spec}") from None
        yield convert(arg)


def format_printf(fmt: str, *args: Any) -> str:
    """Return the text that :func:`printf` would write for ``fmt`` and ``args``."""
    return "".join(_pieces(fmt, args))


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def printf(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write formatted text to ``stream`` (standard output by default).

    Returns the number of characters written.
    """
    text = format_printf(fmt, *args)
    _target(stream).write(text)
    return len(text)


def put_char(c: Union[str, int], stream: Optional[TextIO] = None) -> None:
    """Write a single character."""
    _target(stream).write(_char(c))


def put_str(s: str, stream: Optional[TextIO] = None) -> None:
    """Write ``s`` as it is."""
    _target(stream).write(s)


def put_endl(s: str, stream: Optional[TextIO] = None) -> None:
    """Write ``s`` followed by a newline."""
    _target(stream).write(s + "\n")


def put_nbr(n: int, stream: Optional[TextIO] = None) -> None:
    """Write the decimal text of a 32-bit signed integer."""
    _target(stream).write(itoa(n))