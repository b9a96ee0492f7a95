"""Searching and comparing NUL-terminated strings and raw byte buffers.

String functions take ``str`` or ``bytes`` and, like C strings, consider
only what comes before the first NUL character. Positions are returned as
indices, and ``None`` stands for "not found".
"""

from __future__ import annotations

import operator
from itertools import islice, zip_longest
from typing import Iterable, List, Optional, Union

Text = Union[str, bytes]


def _codes(s: Text) -> List[int]:
    """Return the character codes of ``s`` up to its first NUL."""
    if isinstance(s, str):
        codes = [ord(ch) for ch in s]
    elif isinstance(s, (bytes, bytearray)):
        codes = list(s)
    else:
        raise TypeError(f"expected str or bytes, got {type(s).__name__}")
    try:
        return codes[: codes.index(0)]
    except ValueError:
        return codes


def _target(s: Text, c: Union[str, int]) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)} characters")
        return ord(c)
    code = operator.index(c)
    return code & 0xFF if isinstance(s, (bytes, bytearray)) else code


def _compare(a: Iterable[int], b: Iterable[int]) -> int:
    for x, y in zip_longest(a, b, fillvalue=0):
        if x != y:
            return x - y
    return 0


def strchr(s: Text, c: Union[str, int]) -> Optional[int]:
    """Index of the first ``c`` in ``s``; searching for NUL gives the length."""
    codes = _codes(s)
    target = _target(s, c)
    if target == 0:
        return len(codes)
    try:
        return codes.index(target)
    except ValueError:
        return None


def strrchr(s: Text, c: Union[str, int]) -> Optional[int]:
    """Index of the last ``c`` in ``s``; searching for NUL gives the length."""
    codes = _codes(s)
    target = _target(s, c)
    if target == 0:
        return len(codes)
    for index in reversed(range(len(codes))):
        if codes[index] == target:
            return index
    return None


def strcmp(s1: Text, s2: Text) -> int:
    """Difference of the first differing character codes, or 0 if equal."""
    return _compare(_codes(s1), _codes(s2))


def strncmp(s1: Text, s2: Text, n: int) -> int:
    """Like :func:`strcmp`, looking at no more than ``n`` characters."""
    if n < 0:
        raise ValueError("n must not be negative")
    pairs = islice(zip_longest(_codes(s1), _codes(s2), fillvalue=0), n)
    for x, y in pairs:
        if x != y:
            return x - y
    return 0


def strnstr(haystack: Text, needle: Text, length: int) -> Optional[int]:
    """Index of ``needle`` found entirely within the first ``length`` characters.

    An empty needle is found at index 0.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    hay = _codes(haystack)
    pattern = _codes(needle)
    if not pattern:
        return 0
    window = hay[:length]
    size = len(pattern)
    for start in range(len(window) - size + 1):
        if window[start : start + size] == pattern:
            return start
    return None


def _prefix(data: bytes, n: int, name: str) -> bytes:
    if n < 0:
        raise ValueError("n must not be negative")
    view = bytes(data)
    if n > len(view):
        raise ValueError(f"n ({n}) exceeds the length of {name} ({len(view)})")
    return view[:n]


def memchr(data: bytes, value: int, n: int) -> Optional[int]:
    """Index of the first byte equal to ``value`` (taken modulo 256) in ``data[:n]``."""
    index = _prefix(data, n, "data").find(operator.index(value) & 0xFF)
    return None if index < 0 else index


def memcmp(a: bytes, b: bytes, n: int) -> int:
    """Difference of the first differing bytes within ``n`` bytes, or 0."""
    left = _prefix(a, n, "a")
    right = _prefix(b, n, "b")
    for x, y in zip(left, right):
        if x != y:
            return x - y
    return 0