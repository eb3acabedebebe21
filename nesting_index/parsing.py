"""
Word parsing and formatting.

Two input forms are accepted:

    "123321"          compact: every digit is one letter (0-9)
    "10,11,11,10"     delimited: letters of any length separated by
                      punctuation (, - . ! # $ % & ' * + / ...)

A run of delimiters counts as a single separator. Anything other than
digits and punctuation raises MalformedTokenError.
"""

import re

from .constants import DELIMITERS, DIGITS, WIDE_FORMAT_SIZE
from .errors import MalformedTokenError
from .word import Word, WordLike, as_word


_SEPARATOR = re.compile("[" + re.escape(DELIMITERS) + "]+")


def is_delimited(text: str) -> bool:
    return any(ch in DELIMITERS for ch in text)


def parse_word(text: str) -> Word:
    """
    Parse a word from text.

    Args:
        text: Compact digit string or delimiter-separated letters

    Returns:
        Word (letters as given, not relabelled)

    Raises:
        MalformedTokenError: unexpected character or letter out of range
    """
    stripped = text.strip()
    for position, ch in enumerate(stripped):
        if ch not in DIGITS and ch not in DELIMITERS:
            raise MalformedTokenError(stripped, position=position)

    if is_delimited(stripped):
        tokens = [t for t in _SEPARATOR.split(stripped) if t]
    else:
        tokens = list(stripped)

    try:
        return Word(tuple(int(t) for t in tokens))
    except ValueError as exc:
        raise MalformedTokenError(text, reason=str(exc)) from exc


def format_word(word: WordLike) -> str:
    """
    Text form of a word.

    Short words with single-digit letters print compactly ("1221"); words
    of WIDE_FORMAT_SIZE letters or more, or with a letter above 9, print
    comma separated ("1,2,...").
    """
    w = as_word(word)
    if len(w) >= WIDE_FORMAT_SIZE or any(x > 9 for x in w):
        return ",".join(str(x) for x in w)
    return "".join(str(x) for x in w)
