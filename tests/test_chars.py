import string

import pytest

from pixelframe.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_blank,
    is_digit,
    is_print,
    is_punct,
    is_space,
)

ASCII_CODES = range(128)


@pytest.mark.parametrize("code", ASCII_CODES)
def test_is_alpha_matches_ascii_letters(code):
    assert is_alpha(code) == (chr(code) in string.ascii_letters)


@pytest.mark.parametrize("code", ASCII_CODES)
def test_is_digit_matches_digits(code):
    assert is_digit(code) == (chr(code) in string.digits)


@pytest.mark.parametrize("code", ASCII_CODES)
def test_is_alnum_is_alpha_or_digit(code):
    assert is_alnum(code) == (is_alpha(code) or is_digit(code))


@pytest.mark.parametrize("code", ASCII_CODES)
def test_is_punct_matches_punctuation(code):
    assert is_punct(code) == (chr(code) in string.punctuation)


@pytest.mark.parametrize("code", ASCII_CODES)
def test_is_space_matches_whitespace(code):
    assert is_space(code) == (chr(code) in string.whitespace)


@pytest.mark.parametrize("code", ASCII_CODES)
def test_is_print_matches_printable(code):
    assert is_print(code) == chr(code).isprintable()


@pytest.mark.parametrize("code", ASCII_CODES)
def test_printable_splits_into_space_alnum_punct(code):
    if is_print(code):
        kinds = [code == ord(" "), is_alnum(code), is_punct(code)]
        assert kinds.count(True) == 1
    else:
        assert not (is_alnum(code) or is_punct(code))


def test_is_ascii_bounds():
    assert is_ascii(0) is True
    assert is_ascii(127) is True
    assert is_ascii(128) is False
    assert is_ascii(-1) is False


def test_is_blank():
    assert is_blank(" ") is True
    assert is_blank("\t") is True
    assert is_blank("\n") is False
    assert is_blank("a") is False


def test_accepts_characters_and_codes_alike():
    assert is_alpha("q") is True
    assert is_digit("7") is True
    assert is_punct("~") is True
    assert is_space("\v") is True
    assert is_alpha(ord("q")) == is_alpha("q")


def test_non_ascii_characters_are_not_classified():
    assert is_alpha("é") is False
    assert is_digit("٣") is False
    assert is_print(200) is False
    assert is_ascii("é") is False


def test_rejects_multi_character_strings():
    with pytest.raises(ValueError):
        is_alpha("ab")
    with pytest.raises(ValueError):
        is_space("")


def test_rejects_other_types():
    with pytest.raises(TypeError):
        is_digit(1.5)
    with pytest.raises(TypeError):
        is_print(None)