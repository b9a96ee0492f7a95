import string

import pytest

from ftkit.charclass import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    to_lower,
    to_upper,
)

ALL_BYTES = range(256)


@pytest.mark.parametrize("code", ALL_BYTES)
def test_is_alpha_matches_ascii_letters(code):
    assert is_alpha(code) == (chr(code) in string.ascii_letters)


@pytest.mark.parametrize("code", ALL_BYTES)
def test_is_digit_matches_ascii_digits(code):
    assert is_digit(code) == (chr(code) in string.digits)


@pytest.mark.parametrize("code", ALL_BYTES)
def test_is_alnum_is_alpha_or_digit(code):
    assert is_alnum(code) == (is_alpha(code) or is_digit(code))


def test_is_alnum_rejects_brace_from_source_example():
    assert is_alnum("}") is False


@pytest.mark.parametrize("code", [-1, 0, 65, 127, 128, 210])
def test_is_ascii_range(code):
    assert is_ascii(code) == (0 <= code < 128)


@pytest.mark.parametrize("code", range(128))
def test_is_print_matches_printable_ascii(code):
    assert is_print(code) == chr(code).isprintable()


def test_is_print_bounds():
    assert is_print(" ") is True
    assert is_print("~") is True
    assert is_print(127) is False
    assert is_print(128) is False


def test_accepts_strings_and_ints_alike():
    for ch in "aZ5 !\x7f":
        assert is_alpha(ch) == is_alpha(ord(ch))
        assert is_print(ch) == is_print(ord(ch))


@pytest.mark.parametrize("ch", string.ascii_lowercase)
def test_to_upper_letters(ch):
    assert to_upper(ch) == ch.upper()
    assert to_upper(ord(ch)) == ord(ch.upper())


@pytest.mark.parametrize("ch", string.ascii_uppercase)
def test_to_lower_letters(ch):
    assert to_lower(ch) == ch.lower()
    assert to_lower(ord(ch)) == ord(ch.lower())


@pytest.mark.parametrize("ch", string.digits + string.punctuation + " \t\xe9")
def test_case_conversion_leaves_others_alone(ch):
    assert to_upper(ch) == ch
    assert to_lower(ch) == ch


def test_case_conversion_round_trip():
    for ch in string.ascii_letters:
        assert to_lower(to_upper(ch)) == ch.lower()
        assert to_upper(to_lower(ch)) == ch.upper()


def test_source_examples():
    assert to_lower("Z") == "z"
    assert to_upper("a") == "A"


def test_result_keeps_input_kind():
    assert isinstance(to_upper(ord("q")), int)
    assert to_upper(ord("q")) == ord("Q")
    assert to_lower("Q") == "q"


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")
    with pytest.raises(ValueError):
        to_upper("")


def test_non_integer_rejected():
    with pytest.raises(TypeError):
        is_digit(1.5)