"""A small ``printf`` supporting the conversions c, s, p, d, i, u, x, X and %.

Numbers are treated as the C types the conversions expect: ``%d``/``%i`` as
32-bit signed, ``%u``/``%x``/``%X`` as 32-bit unsigned and ``%p`` as a
64-bit address.
"""

from __future__ import annotations

import sys
from typing import TextIO

_HEX_LOWER = "0123456789abcdef"
_HEX_UPPER = "0123456789ABCDEF"
_UINT_MASK = (1 << 32) - 1
_ADDRESS_MASK = (1 << 64) - 1


class FormatError(ValueError):
    """Raised for an unknown conversion or a missing argument.

    ``partial`` holds the text rendered before the faulty conversion.
    """

    def __init__(self, message: str, partial: str = "") -> None:
        super().__init__(message)
        self.partial = partial


def _to_int32(number: int) -> int:
    number &= _UINT_MASK
    return number - (1 << 32) if number >= 1 << 31 else number


def hex_digits(number: int, upper: bool = False) -> str:
    """Hexadecimal digits of ``number`` taken as a 32-bit unsigned value."""
    digits = _HEX_UPPER if upper else _HEX_LOWER
    value = number & _UINT_MASK
    out = []
    while True:
        out.append(digits[value % 16])
        value //= 16
        if not value:
            break
    return "".join(reversed(out))


def pointer_text(address: int | None) -> str:
    """Address as ``0x`` followed by lower-case hex, or ``(nil)`` for zero."""
    if not address:
        return "(nil)"
    return "0x" + format(address & _ADDRESS_MASK, "x")


def unsigned_text(number: int) -> str:
    """Decimal text of ``number`` taken as a 32-bit unsigned value."""
    return str(number & _UINT_MASK)


def _char_text(value: int | str) -> str:
    if isinstance(value, str):
        return value[:1] if value else "\0"
    return chr(value & 0xFF)


def _convert(conv: str, value: object) -> str:
    if conv == "c":
        return _char_text(value)  # type: ignore[arg-type]
    if conv == "s":
        return "(null)" if value is None else str(value)
    if conv == "p":
        return pointer_text(value)  # type: ignore[arg-type]
    if conv in "di":
        return str(_to_int32(value))  # type: ignore[arg-type]
    if conv == "u":
        return unsigned_text(value)  # type: ignore[arg-type]
    return hex_digits(value, upper=conv == "X")  # type: ignore[arg-type]


def render(fmt: str, *args: object) -> str:
    """Render ``fmt`` with ``args`` and return the resulting text."""
    pieces: list[str] = []
    remaining = iter(args)
    i = 0
    while i < len(fmt):
        ch = fmt[i]
        if ch != "%":
            pieces.append(ch)
            i += 1
            continue
        conv = fmt[i + 1] if i + 1 < len(fmt) else ""
        if conv == "%":
            pieces.append("%")
        elif conv and conv in "cspdiuxX":
            try:
                value = next(remaining)
            except StopIteration:
                raise FormatError(
                    f"missing argument for %{conv}", "".join(pieces)
                ) from None
            pieces.append(_convert(conv, value))
        else:
            shown = f"%{conv}" if conv else "trailing %"
            raise FormatError(f"unsupported conversion {shown}", "".join(pieces))
        i += 2
    return "".join(pieces)


def printf(fmt: str, *args: object, stream: TextIO | None = None) -> int:
    """Write ``fmt`` rendered with ``args`` to ``stream``; return characters written.

    On a bad conversion the text before it is still written, then
    :class:`FormatError` is raised.
    """
    out = sys.stdout if stream is None else stream
    try:
        text = render(fmt, *args)
    except FormatError as exc:
        out.write(exc.partial)
        raise
    out.write(text)
    return len(text)


def put_endl(text: str | None, stream: TextIO | None = None) -> None:
    """Write ``text`` followed by a newline to ``stream``."""
    out = sys.stdout if stream is None else stream
    out.write((text or "") + "\n")