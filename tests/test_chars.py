import string

import pytest

from fdfview import chars

ASCII = range(128)


@pytest.mark.parametrize("code", ASCII)
def test_classification_matches_ascii_sets(code):
    ch = chr(code)
    assert chars.is_lower(code) == (ch in string.ascii_lowercase)
    assert chars.is_upper(code) == (ch in string.ascii_uppercase)
    assert chars.is_alpha(code) == (ch in string.ascii_letters)
    assert chars.is_digit(code) == (ch in string.digits)
    assert chars.is_alnum(code) == (ch in string.ascii_letters + string.digits)
    assert chars.is_space(code) == (ch in " \t\n\v\f\r")
    assert chars.is_print(code) == ch.isprintable()


@pytest.mark.parametrize("code", ASCII)
def test_string_and_code_agree(code):
    ch = chr(code)
    assert chars.is_alpha(ch) == chars.is_alpha(code)
    assert chars.is_space(ch) == chars.is_space(code)
    assert chars.is_print(ch) == chars.is_print(code)


def test_is_ascii_bounds():
    assert chars.is_ascii(0)
    assert chars.is_ascii(127)
    assert not chars.is_ascii(128)
    assert not chars.is_ascii(-1)


def test_non_ascii_letters_are_not_letters():
    assert not chars.is_alpha("é")
    assert not chars.is_digit("٣")
    assert not chars.is_space("\u00a0")


@pytest.mark.parametrize("letter", string.ascii_letters)
def test_case_conversion_matches_str_methods(letter):
    assert chars.to_upper(letter) == letter.upper()
    assert chars.to_lower(letter) == letter.lower()


@pytest.mark.parametrize("letter", string.ascii_lowercase)
def test_case_round_trip_on_codes(letter):
    code = ord(letter)
    assert chars.to_lower(chars.to_upper(code)) == code
    assert chars.is_upper(chars.to_upper(code))


@pytest.mark.parametrize("other", ["1", " ", "@", "[", "`", "{", "é"])
def test_case_conversion_leaves_non_letters(other):
    assert chars.to_upper(other) == other
    assert chars.to_lower(other) == other


def test_rejects_multi_character_string():
    with pytest.raises(ValueError):
        chars.is_alpha("ab")


def test_rejects_non_character():
    with pytest.raises(TypeError):
        chars.is_digit(1.5)