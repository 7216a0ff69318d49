"""String searching, comparison, copying and splitting helpers.

Positions are returned as indices, or None where nothing is found. Searching
for the NUL character finds the end of the string, as the C library does.
"""

from __future__ import annotations

from itertools import zip_longest
from typing import Callable, List, MutableSequence, Optional, Tuple, Union

CharLike = Union[str, int]

_NUL = "\0"


def _char(c: CharLike) -> str:
    """Return c as a one-character string; c may be a character or a code."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int) and not isinstance(c, bool):
        if c < 0:
            raise ValueError(f"character code must not be negative, got {c}")
        return chr(c)
    raise TypeError(f"expected str or int, got {type(c).__name__}")


def _non_negative(value: int, what: str) -> int:
    if value < 0:
        raise ValueError(f"{what} must not be negative, got {value}")
    return value


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the first occurrence of c in s, len(s) for NUL, else None."""
    ch = _char(c)
    if ch == _NUL:
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the last occurrence of c in s, len(s) for NUL, else None."""
    ch = _char(c)
    if ch == _NUL:
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strcmp(s1: str, s2: str) -> int:
    """Difference of the first differing character codes, or 0 when equal.

    The end of the shorter string counts as a character of code 0.
    """
    for a, b in zip_longest(s1, s2, fillvalue=_NUL):
        if a != b:
            return ord(a) - ord(b)
    return 0


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most the first n characters, as strcmp does."""
    _non_negative(n, "length")
    return strcmp(s1[:n], s2[:n])


def strnstr(haystack: str, needle: str, stop: int) -> Optional[int]:
    """Index of the first needle lying wholly within haystack[:stop], else None.

    An empty needle is found at index 0.
    """
    _non_negative(stop, "stop")
    if not needle:
        return 0
    index = haystack.find(needle, 0, stop)
    return None if index < 0 else index


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy src into a buffer of size characters, terminator included.

    Returns the copied text, at most size - 1 characters long, and the length
    of src, which tells the caller whether the copy was truncated.
    """
    _non_negative(size, "size")
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append src to dst within a buffer of size characters, terminator included.

    Returns the resulting text and the length the full result would have had.
    When size does not exceed len(dst), dst is left alone and the returned
    length is size + len(src).
    """
    _non_negative(size, "size")
    if size <= len(dst):
        return dst, size + len(src)
    return (dst + src)[: size - 1], len(dst) + len(src)


def substr(s: str, start: int, length: int) -> str:
    """At most length characters of s from start; empty when start is past the end."""
    _non_negative(start, "start")
    _non_negative(length, "length")
    if start > len(s):
        return ""
    return s[start : start + length]


def strtrim(s: str, charset: str) -> str:
    """Strip characters found in charset from both ends of s."""
    return s.strip(charset)


def split(s: str, sep: CharLike) -> List[str]:
    """Words of s separated by runs of sep; empty words are dropped."""
    return [word for word in s.split(_char(sep)) if word]


def striteri(
    s: MutableSequence[str], func: Callable[[int, str], Optional[str]]
) -> MutableSequence[str]:
    """Call func(index, char) on each character of a mutable character sequence.

    A value returned by func replaces the character in place; None keeps it.
    The same sequence is returned.
    """
    if isinstance(s, str):
        raise TypeError("striteri needs a mutable sequence of characters, not str")
    for index, ch in enumerate(s):
        replacement = func(index, ch)
        if replacement is not None:
            s[index] = _char(replacement)
    return s


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """New string built from func(index, char) for each character of s."""
    return "".join(_char(func(index, ch)) for index, ch in enumerate(s))