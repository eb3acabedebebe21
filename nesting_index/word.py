"""
Word - Immutable Double Occurrence Word

A word is an ordered sequence of letters (small natural numbers). A double
occurrence word (DOW) uses every distinct letter exactly twice:

    1221    valid (1 and 2 each occur twice)
    1212    valid
    12321   not a DOW (3 occurs once)

Design principles:
- Word instances are immutable (frozen dataclass over a tuple)
- All operations return new instances
- Letters are comparable tokens only; the canonical form renumbers them

Canonical form:
    Letters are relabelled 1, 2, 3, ... in order of their first occurrence.

        relabel(5 9 9 5 7 7) = 1 2 2 1 3 3

    Two words have the same canonical form iff they have the same shape.
"""

from __future__ import annotations
from typing import Dict, Iterable, Iterator, List, Sequence, Tuple, Union
from dataclasses import dataclass
import numpy as np

from .constants import DIFF_DTYPE, LETTER_DTYPE, MAX_LETTER


WordLike = Union["Word", Sequence[int], np.ndarray]


@dataclass(frozen=True)
class Word:
    """
    Immutable sequence of letters.

    Equality and hashing are by content, so words can key dicts and
    deduplicate frontiers directly.

    Example:
        >>> w = Word((1, 2, 2, 1))
        >>> w.is_dow()
        True
        >>> Word((5, 9, 9, 5)).relabel()
        Word(letters=(1, 2, 2, 1))
    """
    letters: Tuple[int, ...] = ()

    def __post_init__(self):
        letters = []
        for x in self.letters:
            letter = int(x)
            if letter != x:
                raise ValueError(f"Letter {x!r} is not an integer")
            if letter < 0 or letter > MAX_LETTER:
                raise ValueError(f"Letter {letter} out of range [0, {MAX_LETTER}]")
            letters.append(letter)
        object.__setattr__(self, 'letters', tuple(letters))

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def of(cls, word: WordLike) -> Word:
        """Coerce a word, sequence of ints or numpy array to a Word."""
        if isinstance(word, Word):
            return word
        if isinstance(word, np.ndarray):
            return cls(tuple(word.tolist()))
        return cls(tuple(word))

    @classmethod
    def empty(cls) -> Word:
        return cls(())

    # -------------------------------------------------------------------------
    # Sequence protocol
    # -------------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self.letters)

    def __iter__(self) -> Iterator[int]:
        return iter(self.letters)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return Word(self.letters[index])
        return self.letters[index]

    def __str__(self) -> str:
        from .parsing import format_word
        return format_word(self)

    @property
    def size(self) -> int:
        return len(self.letters)

    @property
    def is_empty(self) -> bool:
        return not self.letters

    # -------------------------------------------------------------------------
    # numpy views
    # -------------------------------------------------------------------------

    def to_array(self) -> np.ndarray:
        """Letters as a uint16 array."""
        return np.asarray(self.letters, dtype=LETTER_DTYPE)

    def differences(self) -> np.ndarray:
        """
        Consecutive differences d[i] = w[i+1] - w[i].

        Returns an empty array for words shorter than 2.
        """
        if len(self.letters) < 2:
            return np.zeros(0, dtype=DIFF_DTYPE)
        return np.diff(self.to_array().astype(DIFF_DTYPE))

    def letter_counts(self) -> Dict[int, int]:
        """Number of occurrences of every distinct letter."""
        if not self.letters:
            return {}
        values, counts = np.unique(self.to_array(), return_counts=True)
        return {int(v): int(c) for v, c in zip(values, counts)}

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def is_dow(self) -> bool:
        """True iff every distinct letter occurs exactly twice."""
        if len(self.letters) % 2:
            return False
        return all(c == 2 for c in self.letter_counts().values())

    def distinct_letters(self) -> List[int]:
        """Unique letters in order of first occurrence."""
        return list(dict.fromkeys(self.letters))

    # -------------------------------------------------------------------------
    # Transformations (all return new words)
    # -------------------------------------------------------------------------

    def relabel(self) -> Word:
        """Canonical form: letters renumbered 1..k by first occurrence."""
        labels: Dict[int, int] = {}
        for letter in self.letters:
            if letter not in labels:
                labels[letter] = len(labels) + 1
        return Word(tuple(labels[x] for x in self.letters))

    def is_canonical(self) -> bool:
        return self.relabel() == self

    def reverse(self) -> Word:
        return Word(self.letters[::-1])

    def rotate(self, offset: int) -> Word:
        """Cyclic rotation to the left by offset positions."""
        if not self.letters:
            return self
        offset %= len(self.letters)
        return Word(self.letters[offset:] + self.letters[:offset])

    def without_letter(self, letter: int) -> Word:
        """Remove both occurrences of letter, keeping the order of the rest."""
        return Word(tuple(x for x in self.letters if x != letter))

    def without_letters(self, letters: Iterable[int]) -> Word:
        """Remove every occurrence of each given letter, keeping order."""
        drop = frozenset(letters)
        return Word(tuple(x for x in self.letters if x not in drop))


# =============================================================================
# Functional interface
# =============================================================================

def as_word(word: WordLike) -> Word:
    return Word.of(word)


def is_dow(word: WordLike) -> bool:
    """True iff every distinct letter of word occurs exactly twice."""
    return as_word(word).is_dow()


def distinct_letters(word: WordLike) -> List[int]:
    return as_word(word).distinct_letters()


def relabel(word: WordLike) -> Word:
    """Canonical form of word."""
    return as_word(word).relabel()


def equals(word_a: WordLike, word_b: WordLike) -> bool:
    """Same length and element-wise equal. No canonicalization is applied."""
    return as_word(word_a) == as_word(word_b)
