"""String helpers with C-library style semantics, expressed on Python strings.

Positions are returned as indices (or ``None`` when nothing is found), and
functions that would fill a destination buffer return the new text instead.
The end of a string behaves like a terminating NUL character where a
comparison runs past it.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence

_NUL = "\0"


def _code(text: str, index: int) -> int:
    """Character code at ``index``, or 0 outside the string."""
    if 0 <= index < len(text):
        return ord(text[index])
    return 0


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the single character ``sep``, dropping empty words."""
    return [word for word in text.split(sep) if word]


def strchr(text: str, char: str) -> int | None:
    """Index of the first ``char`` in ``text``.

    Searching for the NUL character yields the length of ``text``.
    """
    if char == _NUL:
        return len(text)
    index = text.find(char)
    return index if index >= 0 else None


def strrchr(text: str, char: str) -> int | None:
    """Index of the last ``char`` in ``text``.

    Searching for the NUL character yields the length of ``text``.
    """
    if char == _NUL:
        return len(text)
    index = text.rfind(char)
    return index if index >= 0 else None


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters including the terminator.

    Returns the copied text, truncated to ``size - 1`` characters, and the
    full length of ``src``. A size of zero copies nothing.
    """
    if size <= 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting text and the length the full concatenation would
    have had. When ``size`` does not exceed the length of ``dst`` nothing is
    appended and the result is ``len(src) + size``.
    """
    dst_len = len(dst)
    src_len = len(src)
    if size <= dst_len:
        return dst, src_len + size
    room = size - 1 - dst_len
    return dst + src[:room], dst_len + src_len


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` leading characters; returns their code difference."""
    if n == 0:
        return 0
    i = 0
    while (
        _code(first, i)
        and _code(second, i)
        and _code(first, i) == _code(second, i)
        and i < n - 1
    ):
        i += 1
    return _code(first, i) - _code(second, i)


def strrncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` trailing characters, from the end backwards.

    Positions before the start of a string count as NUL. Returns the code
    difference of the characters where the comparison stopped.
    """
    if n == 0:
        return 0
    i = 0
    pos_first = len(first) - 1
    pos_second = len(second) - 1
    while _code(first, pos_first) == _code(second, pos_second) and i < n - 1:
        i += 1
        pos_first -= 1
        pos_second -= 1
    return _code(first, pos_first) - _code(second, pos_second)


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Index of ``needle`` within the first ``length`` characters of ``haystack``."""
    if not needle:
        return 0
    index = haystack.find(needle, 0, max(length, 0))
    return index if index >= 0 else None


def strtrim(text: str, charset: str) -> str:
    """Strip characters found in ``charset`` from both ends of ``text``."""
    if not charset:
        return text
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``text`` starting at ``start``."""
    if start > len(text) or length <= 0:
        return ""
    return text[start : start + length]


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """New string made of ``func(index, char)`` for every character."""
    return "".join(func(index, char) for index, char in enumerate(text))


def striteri(
    chars: MutableSequence[str], func: Callable[[int, str], str]
) -> None:
    """Replace every element of ``chars`` in place with ``func(index, char)``."""
    for index, char in enumerate(chars):
        chars[index] = func(index, char)