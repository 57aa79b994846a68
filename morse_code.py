"""
Morse Code Table
Maps characters to Morse patterns of dots and dashes
"""

from types import MappingProxyType

DOT = '.'
DASH = '-'

# Morse code mapping, keyed by uppercase character
MORSE_CODE = MappingProxyType({
    'A': '.-', 'B': '-...', 'C': '-.-.', 'D': '-..', 'E': '.', 'F': '..-.',
    'G': '--.', 'H': '....', 'I': '..', 'J': '.---', 'K': '-.-', 'L': '.-..',
    'M': '--', 'N': '-.', 'O': '---', 'P': '.--.', 'Q': '--.-', 'R': '.-.',
    'S': '...', 'T': '-', 'U': '..-', 'V': '...-', 'W': '.--', 'X': '-..-',
    'Y': '-.--', 'Z': '--..',
    'Å': '.--.-', 'Ä': '.-.-', 'Ö': '---.', 'É': '..-..', 'Ñ': '--.--',
    'Ü': '..--', 'Û': '..--', 'Š': '----', 'ß': '...---..', 'Ç': '-.-..',
    'Ŝ': '-.-..',
    '0': '-----', '1': '.----', '2': '..---', '3': '...--', '4': '....-',
    '5': '.....', '6': '-....', '7': '--...', '8': '---..', '9': '----.',
    '?': '..--..', '!': '..--.', ',': '--..--', '.': '.-.-.-', '=': '-...-',
    '-': '-....-', '(': '-.--.', ')': '-.--.-', '~': '........', '+': '.-.-.',
    '@': '.--.-.', '/': '-..-.', '%': '.--..', '"': '.-..-.', ';': '-.-.-.',
    ':': '---...', '¿': '..-.-', "'": '.----.', '#': '.-..-', '&': '.-...',
    '$': '.-...', '§': '.-...', '*': '..-..', '¡': '--...-',
})


def _normalize(character):
    # 'ß'.upper() is 'SS'; keep characters whose uppercase form is not a single character
    upper = character.upper()
    return upper if len(upper) == 1 else character


def lookup(character):
    """Return the Morse pattern for a character, or None if it has none"""
    if not isinstance(character, str) or len(character) != 1:
        return None
    return MORSE_CODE.get(_normalize(character))


def convert_character(character):
    """
    Convert a single character to its Morse code.
    Returns a string of dots and dashes, or None if no Morse code is found.
    """
    return lookup(character)


def text_to_morse(text):
    """Convert text to Morse code, letters separated by a space and words by ' / '"""
    words = []
    for word in text.split():
        letters = [lookup(char) for char in word]
        letters = [letter for letter in letters if letter]
        if letters:
            words.append(' '.join(letters))
    return ' / '.join(words)
