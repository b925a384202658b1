"""Minimal printf-style formatting with the conversions the game uses."""

from __future__ import annotations

import sys
from typing import Any, TextIO

_INT_BITS = 32
_POINTER_BITS = 64


def _to_signed32(value: int) -> int:
    span = 1 << _INT_BITS
    half = 1 << (_INT_BITS - 1)
    return ((value + half) % span) - half


def _to_unsigned32(value: int) -> int:
    return value % (1 << _INT_BITS)


def format_int(value: int) -> str:
    """Format a value as a signed 32-bit decimal integer (``%d`` / ``%i``)."""
    return str(_to_signed32(int(value)))


def format_unsigned(value: int) -> str:
    """Format a value as an unsigned 32-bit decimal integer (``%u``).

    Zero is written as ``0``; any other value carries one leading zero.
    """
    number = _to_unsigned32(int(value))
    if number == 0:
        return "0"
    return "0" + str(number)


def format_hex(value: int, upper: bool = False) -> str:
    """Format a value as unsigned 32-bit hexadecimal (``%x`` or ``%X``)."""
    digits = format(_to_unsigned32(int(value)), "x")
    return digits.upper() if upper else digits


def format_pointer(address: int | None) -> str:
    """Format an address as ``0x`` followed by lower-case hex, or ``(nil)``."""
    if not address:
        return "(nil)"
    return "0x" + format(int(address) % (1 << _POINTER_BITS), "x")


def format_string(value: str | None) -> str:
    """Return the string itself, or ``(null)`` for ``None``."""
    return "(null)" if value is None else str(value)


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError("%c requires a single character")
        return value
    return chr(int(value) % 256)


_CONVERSIONS = {
    "d": format_int,
    "i": format_int,
    "c": _format_char,
    "s": format_string,
    "p": format_pointer,
    "x": lambda v: format_hex(v, False),
    "X": lambda v: format_hex(v, True),
    "u": format_unsigned,
}


def render(fmt: str, *args: Any) -> str:
    """Expand ``fmt`` with ``args`` and return the resulting text.

    Supported conversions are ``d i c s p x X u``; any other character after
    ``%`` is written as itself, and a ``%`` at the very end is kept literally.
    """
    remaining = iter(args)
    parts: list[str] = []
    chars = iter(fmt)
    for char in chars:
        if char != "%":
            parts.append(char)
            continue
        spec = next(chars, None)
        if spec is None:
            parts.append("%")
            break
        converter = _CONVERSIONS.get(spec)
        if converter is None:
            parts.append(spec)
            continue
        try:
            argument = next(remaining)
        except StopIteration:
            raise TypeError(f"not enough arguments for format string {fmt!r}") from None
        parts.append(converter(argument))
    return "".join(parts)


def printf(fmt: str, *args: Any, stream: TextIO | None = None) -> int:
    """Write the expanded format to ``stream`` (stdout by default).

    Returns the number of characters written.
    """
    text = render(fmt, *args)
    target = sys.stdout if stream is None else stream
    target.write(text)
    return len(text)