"""Character classification, case conversion and integer/text conversion.

Classification and case functions take a character code (an ``int``) or a
one-character string and work on the ASCII range only, like their C
counterparts. Integer conversions follow 32-bit ``int`` wrap-around.
"""

from __future__ import annotations

_INT_BITS = 32
_ULONG_BITS = 64
_WHITESPACE = "\t\n\v\f\r "


def _as_code(code: int | str) -> int:
    """Character code of ``code``, accepting an int or a one-character string."""
    if isinstance(code, str):
        if len(code) != 1:
            raise ValueError(f"expected a single character, got {code!r}")
        return ord(code)
    return code


def _wrap(value: int, bits: int = _INT_BITS) -> int:
    """Reduce ``value`` to a signed integer of ``bits`` bits."""
    value &= (1 << bits) - 1
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def is_alpha(code: int | str) -> bool:
    """True for ASCII letters."""
    c = _as_code(code)
    return ord("A") <= c <= ord("Z") or ord("a") <= c <= ord("z")


def is_digit(code: int | str) -> bool:
    """True for the ASCII digits 0-9."""
    c = _as_code(code)
    return ord("0") <= c <= ord("9")


def is_alnum(code: int | str) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(code) or is_digit(code)


def is_ascii(code: int | str) -> bool:
    """True for codes 0 through 127."""
    return 0 <= _as_code(code) <= 127


def is_print(code: int | str) -> bool:
    """True for printable ASCII, space through tilde."""
    return 32 <= _as_code(code) <= 126


def to_lower(code: int | str) -> int:
    """Lower-case code for an ASCII upper-case letter; other codes unchanged."""
    c = _as_code(code)
    if ord("A") <= c <= ord("Z"):
        return c + 32
    return c


def to_upper(code: int | str) -> int:
    """Upper-case code for an ASCII lower-case letter; other codes unchanged."""
    c = _as_code(code)
    if ord("a") <= c <= ord("z"):
        return c - 32
    return c


def atoi(text: str) -> int:
    """Parse a leading decimal integer from ``text``.

    Leading whitespace is skipped, one optional sign is read, then digits up
    to the first non-digit. Text without digits yields 0. Values outside the
    32-bit range wrap around.
    """
    i = 0
    length = len(text)
    while i < length and text[i] in _WHITESPACE:
        i += 1
    sign = 1
    if i < length and text[i] in "+-":
        if text[i] == "-":
            sign = -1
        i += 1
    result = 0
    while i < length and "0" <= text[i] <= "9":
        result = (result * 10 + ord(text[i]) - ord("0")) & ((1 << _ULONG_BITS) - 1)
        i += 1
    return _wrap(_wrap(result) * sign)


def itoa(number: int) -> str:
    """Decimal text of ``number`` taken as a 32-bit signed integer."""
    return str(_wrap(number))