"""Formatted output: a small printf with the %c %s %d %i %u %p %x %X %% conversions.

Integer conversions wrap their argument the way the matching C argument type
does: %d and %i to a signed 32-bit int, %u %x %X to an unsigned 32-bit int,
and %p to an unsigned 64-bit pointer.
"""

from __future__ import annotations

import sys
from typing import Any, Callable, Dict, Iterator, Optional, TextIO

_INT_BITS = 32
_POINTER_BITS = 64
_UINT_MASK = (1 << _INT_BITS) - 1
_POINTER_MASK = (1 << _POINTER_BITS) - 1
_INT_SIGN = 1 << (_INT_BITS - 1)

_NULL_TEXT = "(null)"
_NIL_POINTER = "(nil)"

_MISSING = object()


def _as_int(value: Any) -> int:
    if not isinstance(value, int):
        raise TypeError(f"expected an integer argument, got {type(value).__name__}")
    return int(value)


def hex_string(n: int, upper: bool = False) -> str:
    """Hexadecimal digits of n taken as an unsigned 32-bit value."""
    digits = format(_as_int(n) & _UINT_MASK, "x")
    return digits.upper() if upper else digits


def pointer_string(pointer: Optional[int]) -> str:
    """'0x' followed by lower-case hex digits, or '(nil)' for a null pointer."""
    value = 0 if pointer is None else _as_int(pointer) & _POINTER_MASK
    if value == 0:
        return _NIL_POINTER
    return "0x" + format(value, "x")


def number_string(n: int) -> str:
    """Decimal text of n taken as a signed 32-bit value."""
    value = ((_as_int(n) + _INT_SIGN) & _UINT_MASK) - _INT_SIGN
    return str(value)


def unsigned_string(n: int) -> str:
    """Decimal text of n taken as an unsigned 32-bit value."""
    return str(_as_int(n) & _UINT_MASK)


def _char_text(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(_as_int(value) & 0xFF)


def _string_text(value: Any) -> str:
    if value is None:
        return _NULL_TEXT
    if not isinstance(value, str):
        raise TypeError(f"%s expects a str, got {type(value).__name__}")
    return value


_CONVERSIONS: Dict[str, Callable[[Any], str]] = {
    "c": _char_text,
    "s": _string_text,
    "d": number_string,
    "i": number_string,
    "u": unsigned_string,
    "p": pointer_string,
    "x": lambda value: hex_string(value, False),
    "X": lambda value: hex_string(value, True),
}


def _convert(spec: str, values: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    handler = _CONVERSIONS.get(spec)
    if handler is None:
        # Unknown conversions produce nothing and consume no argument.
        return ""
    value = next(values, _MISSING)
    if value is _MISSING:
        raise TypeError(f"not enough arguments for %{spec}")
    return handler(value)


def sprintf(fmt: str, *args: Any) -> str:
    """Return fmt with its conversions replaced by the formatted arguments."""
    if fmt is None:
        raise TypeError("format must not be None")
    values = iter(args)
    chars = iter(fmt)
    pieces = []
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        pieces.append(_convert(spec, values))
    return "".join(pieces)


def printf(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the formatted text to stream (standard output by default).

    Returns the number of characters written.
    """
    text = sprintf(fmt, *args)
    target = sys.stdout if stream is None else stream
    target.write(text)
    return len(text)


def putendl(s: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write s followed by a newline; write nothing when s is None."""
    if s is None:
        return
    target = sys.stdout if stream is None else stream
    target.write(s + "\n")