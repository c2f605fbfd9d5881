import io

import pytest

from so_long.printer import (
    FormatError,
    hex_digits,
    pointer_text,
    printf,
    put_endl,
    render,
    unsigned_text,
)


@pytest.mark.parametrize("number", [0, 1, 15, 16, 255, 4096, 2147483647])
def test_hex_digits_match_format(number):
    assert hex_digits(number) == format(number, "x")
    assert hex_digits(number, upper=True) == format(number, "X")
    assert int(hex_digits(number), 16) == number


def test_hex_digits_wrap_negative_to_unsigned():
    text = hex_digits(-1)
    assert len(text) == 8
    assert set(text) == {"f"}


@pytest.mark.parametrize("n", [1, 2, 100, 2147483648])
def test_unsigned_text_wraps_negative(n):
    assert int(unsigned_text(-n)) + n == 2**32


def test_pointer_text_null_and_value():
    assert pointer_text(0) == "(nil)"
    assert pointer_text(None) == "(nil)"
    text = pointer_text(48879)
    assert text.startswith("0x")
    assert int(text, 16) == 48879


def test_render_string_and_null():
    assert render("hi %s!", "there") == "hi there!"
    assert render("%s", None) == "(null)"


def test_render_char_from_code_and_string():
    assert render("%c%c", 65, "z") == chr(65) + "z"


def test_render_signed_integers():
    assert render("%d|%i", -2147483648, 2147483647) == "-2147483648|2147483647"


def test_render_wraps_signed_overflow():
    assert render("%d", 2147483648) == "-2147483648"


def test_render_hex_and_percent():
    assert render("%x %X %%", 3054, 3054) == f"{3054:x} {3054:X} %"


def test_render_pointer_null():
    assert render("%p", 0) == "(nil)"


@pytest.mark.parametrize("fmt", ["%q", "abc%", "%f"])
def test_render_bad_conversion(fmt):
    with pytest.raises(FormatError):
        render(fmt, 1)


def test_render_missing_argument():
    with pytest.raises(FormatError) as info:
        render("Movements: %d")
    assert info.value.partial == "Movements: "


def test_printf_writes_and_counts():
    out = io.StringIO()
    count = printf("Movements: %d\n", 12, stream=out)
    assert out.getvalue() == "Movements: 12\n"
    assert count == len(out.getvalue())


def test_printf_writes_partial_before_error():
    out = io.StringIO()
    with pytest.raises(FormatError):
        printf("ok %z", stream=out)
    assert out.getvalue() == "ok "


def test_put_endl_appends_newline():
    out = io.StringIO()
    put_endl("line", stream=out)
    put_endl(None, stream=out)
    assert out.getvalue() == "line\n\n"