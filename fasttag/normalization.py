"""
Word normalization for fasttag.

Tokens come from a plain space split, so punctuation stays glued to the words
("dog,", "(quickly)"). Before a lexicon lookup the surrounding punctuation is
stripped; interior marks (hyphens, apostrophes) are kept.
"""
from typing import Optional


def _is_letter_or_digit(char: str) -> bool:
    # Decimal digits only: "²", "½" and roman numerals are not digits
    return char.isalpha() or char.isdecimal()


def _first_letter_or_digit(word: str) -> Optional[int]:
    for i, char in enumerate(word):
        if _is_letter_or_digit(char):
            return i
    return None


def _last_letter_or_digit(word: str) -> Optional[int]:
    for i in range(len(word) - 1, -1, -1):
        if _is_letter_or_digit(word[i]):
            return i
    return None


def strip_special_characters(word: str) -> str:
    """
    Strip leading and trailing characters that are not letters or digits.

    Any Unicode letter counts, but only decimal digits do: other numeric
    characters such as superscripts and vulgar fractions are stripped.

    Args:
        word: Token as it appeared in the input

    Returns:
        The token without surrounding punctuation. Single characters and
        tokens without any letter or digit are returned unchanged.
    """
    if len(word) < 2:
        return word

    start = _first_letter_or_digit(word)
    if start is None:
        return word
    end = _last_letter_or_digit(word)

    return word[start:end + 1]
