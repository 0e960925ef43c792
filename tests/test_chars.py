import io
import string

import pytest

from gemheist import chars


@pytest.mark.parametrize("c", list(string.ascii_letters))
def test_letters_are_alpha_and_alnum(c):
    assert chars.is_alpha(c)
    assert chars.is_alnum(c)
    assert not chars.is_digit(c)


@pytest.mark.parametrize("c", list(string.digits))
def test_digits(c):
    assert chars.is_digit(c)
    assert chars.is_alnum(c)
    assert not chars.is_alpha(c)


@pytest.mark.parametrize("c", ["@", "[", "`", "{", " ", "/", ":"])
def test_boundary_punctuation_is_not_alnum(c):
    assert not chars.is_alnum(c)


def test_integer_codes_accepted():
    assert chars.is_alpha(ord("L"))
    assert chars.is_digit(ord("0"))
    assert not chars.is_digit(ord("0") - 1)


def test_is_ascii_bounds():
    assert chars.is_ascii(0)
    assert chars.is_ascii(0x7F)
    assert not chars.is_ascii(0x80)
    assert not chars.is_ascii(-1)


def test_is_print_bounds():
    assert chars.is_print(" ")
    assert chars.is_print("~")
    assert not chars.is_print(31)
    assert not chars.is_print(127)


def test_is_only():
    assert chars.is_only("10PCE", "10PCET")
    assert chars.is_only("", "01")
    assert not chars.is_only("10X", "10PCET")


def test_case_conversion_round_trip():
    for lower, upper in zip(string.ascii_lowercase, string.ascii_uppercase):
        assert chars.to_upper(lower) == upper
        assert chars.to_lower(upper) == lower


def test_case_conversion_leaves_others():
    for c in "09 !@[`{":
        assert chars.to_upper(c) == c
        assert chars.to_lower(c) == c


def test_case_conversion_keeps_int_type():
    assert chars.to_upper(ord("g")) == ord("G")
    assert chars.to_lower(ord("G")) == ord("g")


def test_multi_char_string_rejected():
    with pytest.raises(ValueError):
        chars.is_alpha("ab")


def test_atoi_skips_whitespace_and_sign():
    assert chars.atoi(" \t\n\v\f\r-42abc") == -42
    assert chars.atoi("+17") == 17
    assert chars.atoi("abc") == 0
    assert chars.atoi("--5") == 0
    assert chars.atoi("") == 0


@pytest.mark.parametrize("n", [0, 7, -7, 123456, -2147483648, 2147483647])
def test_itoa_atoi_round_trip(n):
    assert chars.atoi(chars.itoa(n)) == n


def test_itoa_min_int():
    assert chars.itoa(-2147483648) == "-2147483648"


@pytest.mark.parametrize("n", [0, 9, 10, -1, -10, 99999, -2147483648])
def test_count_digits_matches_text_length(n):
    assert chars.count_digits(n) == len(chars.itoa(n))


def test_count_digits_unsigned():
    assert chars.count_digits_unsigned(0) == 1
    assert chars.count_digits_unsigned(10) == 2
    with pytest.raises(ValueError):
        chars.count_digits_unsigned(-1)


def test_count_hex_digits():
    assert chars.count_hex_digits(0) == 1
    assert chars.count_hex_digits(0xF) == 1
    assert chars.count_hex_digits(0x10) == 2
    with pytest.raises(ValueError):
        chars.count_hex_digits(-1)


def test_put_functions_write_to_stream():
    out = io.StringIO()
    assert chars.put_char("P", out) == 1
    assert chars.put_str("abc", out) == 3
    assert chars.put_endl("xy", out) == 3
    assert chars.put_nbr(-2147483648, out) == 11
    assert out.getvalue() == "Pabcxy\n-2147483648"


def test_put_char_from_code():
    out = io.StringIO()
    chars.put_char(ord("%"), out)
    assert out.getvalue() == "%"


def test_put_defaults_to_stdout(capsys):
    chars.put_str("hello")
    chars.put_nbr(5)
    assert capsys.readouterr().out == "hello5"