"""Building new strings from existing ones: slicing, joining, trimming,
splitting, bounded copies and per-character mapping."""

from __future__ import annotations

from typing import Callable, List, MutableSequence, Optional, Tuple, TypeVar

T = TypeVar("T")


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` beginning at ``start``.

    A ``start`` past the end of ``s`` gives an empty string.
    """
    if start < 0:
        raise ValueError("start must not be negative")
    if length < 0:
        raise ValueError("length must not be negative")
    if start > len(s):
        return ""
    return s[start : start + length]


def strjoin(s1: str, s2: str) -> str:
    """Return a new string holding ``s1`` followed by ``s2``."""
    return s1 + s2


def strtrim(s: str, charset: str) -> str:
    """Remove every character found in ``charset`` from both ends of ``s``."""
    return s.strip(charset) if charset else s


def split(s: str, sep: str) -> List[str]:
    """Split ``s`` on the single character ``sep``, dropping empty pieces."""
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [word for word in s.split(sep) if word]


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` slots, one kept for the terminator.

    Returns the text the buffer ends up holding and the full length of
    ``src``; a returned length of ``size`` or more means truncation.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` slots.

    Returns the resulting text and the length the full concatenation would
    have had. When ``size`` is zero or smaller than ``dst``, ``dst`` is
    left as it is and the length reported is ``size + len(src)``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    used = len(dst)
    if size == 0 or size < used:
        return dst, size + len(src)
    room = max(0, size - used - 1)
    return dst + src[:room], used + len(src)


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for each character of ``s``."""
    return "".join(func(index, char) for index, char in enumerate(s))


def striteri(s: MutableSequence[T], func: Callable[[int, T], Optional[T]]) -> None:
    """Call ``func(index, item)`` for each item of ``s``, changing ``s`` in place.

    A value returned by ``func`` replaces the item; ``None`` leaves it alone.
    """
    for index, item in enumerate(s):
        replacement = func(index, item)
        if replacement is not None:
            s[index] = replacement