import pytest

from morse_code import MORSE_CODE, convert_character, lookup, text_to_morse


def test_letters():
    assert convert_character('A') == '.-'
    assert convert_character('S') == '...'
    assert convert_character('O') == '---'
    assert convert_character('0') == '-----'
    assert convert_character('?') == '..--..'


@pytest.mark.parametrize("char", ['a', 'z', 'å', 'ä', 'ö', 'é', 'ñ', 'ü', 'û', 'š', 'ç', 'ŝ'])
def test_lookup_is_case_insensitive(char):
    assert convert_character(char) is not None
    assert convert_character(char) == convert_character(char.upper())


def test_sharp_s_is_not_expanded():
    assert convert_character('ß') == '...---..'


@pytest.mark.parametrize("char", [' ', '\t', '\n', '\r', '\x00', '\x07', '^', '[', '€', 'Ø'])
def test_unknown_characters(char):
    assert convert_character(char) is None


@pytest.mark.parametrize("value", ['', 'AB', None, 65])
def test_lookup_of_non_characters(value):
    assert lookup(value) is None


def test_patterns_have_no_padding():
    for char, pattern in MORSE_CODE.items():
        assert pattern, char
        assert set(pattern) <= {'.', '-'}, char


def test_keys_are_uppercase():
    for char in MORSE_CODE:
        upper = char.upper()
        assert len(upper) != 1 or upper == char


def test_table_is_read_only():
    with pytest.raises(TypeError):
        MORSE_CODE['A'] = '.'


def test_shared_codes():
    assert convert_character('&') == convert_character('$') == convert_character('§')
    assert convert_character('Ü') == convert_character('Û')


def test_convert_character_is_idempotent():
    assert convert_character('k') == convert_character('k') == '-.-'


def test_text_to_morse():
    assert text_to_morse("SOS help") == "... --- ... / .... . .-.. .--."


def test_text_to_morse_skips_unknown():
    assert text_to_morse("  a^b   ^^^ c ") == ".- -... / -.-."
    assert text_to_morse("") == ""
