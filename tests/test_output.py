import io

import pytest

from solong.output import (
    format,
    format_digit,
    format_pointer,
    printf,
    put_char,
    put_endl,
    put_nbr,
    put_str,
)


@pytest.mark.parametrize("n", [0, 1, 9, 10, 255, 4096, 123456789])
@pytest.mark.parametrize("base", [2, 8, 10, 16])
def test_format_digit_round_trip(n, base):
    assert int(format_digit(n, base, False), base) == n


def test_format_digit_case():
    lower = format_digit(48879, 16, False)
    upper = format_digit(48879, 16, True)
    assert lower == lower.lower()
    assert upper == lower.upper()


def test_format_digit_negative_uses_upper_case():
    assert format_digit(-255, 16, False) == "-FF"


def test_format_digit_zero():
    assert format_digit(0, 16, True) == "0"


@pytest.mark.parametrize("base", [1, 17])
def test_format_digit_bad_base(base):
    with pytest.raises(ValueError):
        format_digit(5, base, False)


def test_format_pointer_prefix_and_value():
    text = format_pointer(3735928559)
    assert text.startswith("0x")
    assert int(text, 16) == 3735928559
    assert text == text.lower()


def test_format_pointer_null():
    assert format_pointer(None) == "0x0"


def test_format_plain_text_passes_through():
    assert format("hello world") == "hello world"


def test_format_string_and_null():
    assert format("[%s]", "map") == "[map]"
    assert format("%s", None) == "(null)"


def test_format_char():
    assert format("%c%c", "o", ord("k")) == "ok"


@pytest.mark.parametrize("spec", ["d", "i"])
def test_format_signed(spec):
    assert int(format("%" + spec, -42)) == -42


def test_format_signed_wraps_to_32_bits():
    assert int(format("%d", 2**31)) == -(2**31)


def test_format_unsigned_of_negative():
    assert int(format("%u", -1)) == 2**32 - 1


def test_format_hex():
    assert int(format("%x", 48879), 16) == 48879
    assert format("%X", 48879) == format("%x", 48879).upper()


def test_format_percent_and_unknown():
    assert format("100%%") == "100%"
    assert format("a%qb") == "ab"


def test_format_trailing_percent_is_dropped():
    assert format("end%") == "end"


def test_format_missing_argument():
    with pytest.raises(TypeError):
        format("%d")


def test_format_wrong_type():
    with pytest.raises(TypeError):
        format("%d", "text")


def test_printf_writes_and_counts():
    out = io.StringIO()
    count = printf("moves: %d\n", 7, stream=out)
    assert out.getvalue() == format("moves: %d\n", 7)
    assert count == len(out.getvalue())


def test_put_char_and_str():
    out = io.StringIO()
    put_char("x", out)
    put_str("yz", out)
    put_str(None, out)
    assert out.getvalue() == "xyz"


def test_put_char_rejects_long_text():
    with pytest.raises(TypeError):
        put_char("ab", io.StringIO())


def test_put_endl():
    out = io.StringIO()
    put_endl("line", out)
    put_endl(None, out)
    assert out.getvalue() == "line\n"


@pytest.mark.parametrize("n", [0, 7, -2147483648, 2147483647])
def test_put_nbr_round_trip(n):
    out = io.StringIO()
    put_nbr(n, out)
    assert int(out.getvalue()) == n