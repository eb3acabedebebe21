"""
Subword Detector - Maximal Return and Repeat Words

Works on the difference sequence d[i] = w[i+1] - w[i] of a canonical word.
In canonical form the letters of a return or repeat word climb by one, so
both patterns are runs of +1 differences:

    return word   1 2 3 3 2 1     d = [ 1,  1,  0, -1, -1]
    loop          1 1             d = [ 0]
    repeat word   1 2 3 1 2 3     d = [ 1,  1, -2,  1,  1]

Two linear scans with a three-state machine (idle, rising, expecting
closure) report the largest matching window per run:

1. Return scan: a rise of c (+1)s, a single 0 (the pivot), then (-1)s.
   The word closes when the fall matches the rise. If the fall is cut short
   (by any other difference, or by the end of the word) the symmetric inner
   part that did match is kept. A 0 that does not follow a rise is a loop.

2. Repeat scan: a rise of c (+1)s, one drop -n with n <= c, then n (+1)s.
   The repeat word is the last n+1 letters of the rise followed by their
   repetition.

The letters of every reported subword are kept as a frozenset so that the
reducer can test membership directly.
"""

from __future__ import annotations
from typing import FrozenSet, List, Optional, Tuple
from dataclasses import dataclass, field
from enum import Enum

from .word import Word, WordLike, as_word


class SubwordKind(Enum):
    """Structural pattern of a maximal subword."""
    LOOP = "loop"
    RETURN = "return"
    REPEAT = "repeat"


class _State(Enum):
    IDLE = 0
    RISING = 1
    EXPECTING = 2   # Expecting closure (fall for returns, rise for repeats)


@dataclass(frozen=True)
class Subword:
    """A contiguous slice of a word matching a return or repeat pattern."""
    kind: SubwordKind
    start: int                      # Index of first letter in the word
    letters: Tuple[int, ...]        # Exact letter content of the slice
    letter_set: FrozenSet[int] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, 'letter_set', frozenset(self.letters))

    @property
    def stop(self) -> int:
        """Index one past the last letter."""
        return self.start + len(self.letters)

    def __len__(self) -> int:
        return len(self.letters)

    def __contains__(self, letter: int) -> bool:
        return letter in self.letter_set


def _slice(word: Word, kind: SubwordKind, first: int, last: int) -> Subword:
    """Subword covering word[first..last] inclusive."""
    letters = word.letters[first:last + 1]
    if kind is SubwordKind.RETURN and len(letters) == 2:
        kind = SubwordKind.LOOP
    return Subword(kind=kind, start=first, letters=letters)


# =============================================================================
# Return words (and loops)
# =============================================================================

def find_return_words(word: WordLike) -> List[Subword]:
    """
    All maximal return words and loops of word, left to right.

    Args:
        word: A word in canonical form

    Returns:
        List of Subword (possibly empty)
    """
    w = as_word(word)
    diffs = w.differences().tolist()
    found: List[Subword] = []

    state = _State.IDLE
    start = 0       # Index of the first +1 of the current rise
    pending = 0     # Rise length, then (-1)s still expected

    for i, d in enumerate(diffs):
        if d == 0:
            if state is _State.RISING:
                state = _State.EXPECTING
            else:
                found.append(_slice(w, SubwordKind.LOOP, i, i + 1))
                state, pending = _State.IDLE, 0
        elif d == 1:
            if state is _State.EXPECTING:
                # Fall cut short by a new rise: keep the symmetric part
                found.append(_slice(w, SubwordKind.RETURN, start + pending, i))
                start, pending = i, 0
            elif state is _State.IDLE:
                start = i
            state = _State.RISING
            pending += 1
        elif d == -1:
            if state is _State.EXPECTING:
                pending -= 1
                if pending == 0:
                    found.append(_slice(w, SubwordKind.RETURN, start, i + 1))
                    state = _State.IDLE
            else:
                state, pending = _State.IDLE, 0
        else:
            if state is _State.EXPECTING:
                found.append(_slice(w, SubwordKind.RETURN, start + pending, i))
            state, pending = _State.IDLE, 0

    if state is _State.EXPECTING:
        # Still open at the end of the word: close at the last letter
        found.append(_slice(w, SubwordKind.RETURN, start + pending, len(w) - 1))

    return found


# =============================================================================
# Repeat words
# =============================================================================

def find_repeat_words(word: WordLike) -> List[Subword]:
    """
    All maximal repeat words of word, left to right.

    Args:
        word: A word in canonical form

    Returns:
        List of Subword (possibly empty)
    """
    w = as_word(word)
    diffs = w.differences().tolist()
    found: List[Subword] = []

    state = _State.IDLE
    start = 0
    pending = 0     # Rise length, then (+1)s still expected after the drop

    for i, d in enumerate(diffs):
        if d == 1:
            if state is _State.IDLE:
                state, start, pending = _State.RISING, i, 1
            elif state is _State.RISING:
                pending += 1
            else:
                pending -= 1
                if pending == 0:
                    found.append(_slice(w, SubwordKind.REPEAT, start, i + 1))
                    state = _State.IDLE
        elif state is _State.RISING and d < 0 and -d <= pending:
            # Drop back n letters: the repeated block is the last n+1 of the rise
            start += pending + d
            pending = -d
            state = _State.EXPECTING
        else:
            state, pending = _State.IDLE, 0

    return found


# =============================================================================
# Combined detector
# =============================================================================

def find_maximal_subwords(word: WordLike) -> Optional[List[Subword]]:
    """
    Maximal return words, loops and repeat words of word.

    Returns:
        List of subwords, or None when the word has none (or is shorter
        than 2). None means "no structure to remove", which makes the
        reducer branch on every letter instead.
    """
    w = as_word(word)
    if len(w) < 2:
        return None
    found = find_return_words(w) + find_repeat_words(w)
    return found or None


def covered_letters(subwords: Optional[List[Subword]]) -> FrozenSet[int]:
    """Union of the letters of all subwords."""
    if not subwords:
        return frozenset()
    return frozenset().union(*(s.letter_set for s in subwords))
