import string

import pytest

from solong import chars


ASCII_RANGE = range(0, 128)


@pytest.mark.parametrize("code", ASCII_RANGE)
def test_is_alpha_matches_ascii_letters(code):
    assert chars.is_alpha(code) == (chr(code) in string.ascii_letters)


@pytest.mark.parametrize("code", ASCII_RANGE)
def test_is_digit_matches_ascii_digits(code):
    assert chars.is_digit(code) == (chr(code) in string.digits)


@pytest.mark.parametrize("code", ASCII_RANGE)
def test_is_alnum_is_alpha_or_digit(code):
    assert chars.is_alnum(code) == (chars.is_alpha(code) or chars.is_digit(code))


def test_is_ascii_bounds():
    assert chars.is_ascii(0) is True
    assert chars.is_ascii(127) is True
    assert chars.is_ascii(128) is False
    assert chars.is_ascii(-1) is False


def test_is_print_bounds():
    assert chars.is_print(31) is False
    assert chars.is_print(32) is True
    assert chars.is_print(126) is True
    assert chars.is_print(127) is False


def test_classification_accepts_strings():
    assert chars.is_alpha("a") is True
    assert chars.is_digit("7") is True
    assert chars.is_alpha("7") is False


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        chars.is_alpha("ab")


@pytest.mark.parametrize("code", ASCII_RANGE)
def test_to_lower_matches_str_lower_for_ascii(code):
    assert chars.to_lower(chr(code)) == chr(code).lower()


@pytest.mark.parametrize("code", ASCII_RANGE)
def test_to_upper_matches_str_upper_for_ascii(code):
    assert chars.to_upper(chr(code)) == chr(code).upper()


def test_case_conversion_keeps_int_type():
    assert chars.to_lower(ord("F")) == ord("f")
    assert chars.to_upper(ord("f")) == ord("F")


def test_case_conversion_leaves_non_ascii_alone():
    assert chars.to_lower(200) == 200
    assert chars.to_upper(200) == 200


@pytest.mark.parametrize("text", ["0", "42", "-17", "+5", "2147483647", "-2147483648"])
def test_atoi_matches_int_for_plain_numbers(text):
    assert chars.atoi(text) == int(text)


def test_atoi_skips_whitespace_and_stops_at_junk():
    assert chars.atoi("  -123abs") == chars.atoi("-123")
    assert chars.atoi("\t\n\v\f\r 99x") == int("99")


def test_atoi_without_digits_is_zero():
    assert chars.atoi("abc") == 0
    assert chars.atoi("") == 0
    assert chars.atoi("-") == 0


def test_atoi_single_sign_only():
    assert chars.atoi("+-5") == 0
    assert chars.atoi("--5") == 0


def test_atoi_wraps_to_32_bits():
    assert chars.atoi("2147483648") == -2147483648


@pytest.mark.parametrize("n", [0, 1, -1, 9, 10, -10, 12345, -98765, 2147483647])
def test_itoa_matches_str(n):
    assert chars.itoa(n) == str(n)


def test_itoa_minimum():
    assert chars.itoa(-2147483648) == "-2147483648"


@pytest.mark.parametrize("n", [2**31, -(2**31) - 1])
def test_itoa_out_of_range(n):
    with pytest.raises(OverflowError):
        chars.itoa(n)


@pytest.mark.parametrize("n", [0, 7, -7, 100000, -2147483648, 2147483647])
def test_itoa_atoi_round_trip(n):
    assert chars.atoi(chars.itoa(n)) == n