"""
Isomorphism Enumerator - Cyclic Rotations and Reversal

Two DOWs are cyclically equivalent when one is a rotation of the other or of
its reversal, up to relabelling. The class of w is the set of canonical
forms of

    rotate(w, k)            for k in 0 .. len(w)-1
    rotate(reverse(w), k)   for k in 0 .. len(w)-1

deduplicated by content, in discovery order. Its size is between 1 and
2 * len(w).

    isomorphism_class(1 2 2 1) = [1221, 1122]
"""

from __future__ import annotations
from typing import Dict, List, Optional
from dataclasses import dataclass

from .engine import EngineConfig, NestingIndexEngine
from .errors import NonDOWError
from .word import Word, WordLike, as_word


@dataclass(frozen=True)
class IsomorphismMember:
    """A canonical class member with its own nesting index."""
    word: Word
    nesting_index: int


def _sweep(word: Word, seen: Dict[Word, None]) -> None:
    for offset in range(len(word)):
        seen.setdefault(word.rotate(offset).relabel(), None)


def isomorphism_class(word: WordLike) -> List[Word]:
    """
    Canonical forms of every rotation of word and of its reversal.

    Args:
        word: Any word (validity is not checked here)

    Returns:
        Deduplicated list of canonical words; the first is relabel(word)
    """
    w = as_word(word)
    if w.is_empty:
        return [w]
    seen: Dict[Word, None] = {}
    _sweep(w, seen)
    # Reversal breaks canonical labelling, so relabel before rotating
    _sweep(w.reverse().relabel(), seen)
    return list(seen)


def classify_isomorphisms(word: WordLike,
                          config: Optional[EngineConfig] = None) -> List[IsomorphismMember]:
    """
    Every member of the isomorphism class of word with its nesting index.

    Raises:
        NonDOWError: word is not a double occurrence word
    """
    w = as_word(word)
    if not w.is_dow():
        raise NonDOWError(w.letters, w.letter_counts())
    engine = NestingIndexEngine(config)
    return [
        IsomorphismMember(word=member, nesting_index=engine.nesting_index(member))
        for member in isomorphism_class(w)
    ]


def circular_nesting_index(word: WordLike, config: Optional[EngineConfig] = None) -> int:
    """
    Smallest nesting index over the isomorphism class of word.

    Members of one class can report different indices (123231 has members
    of index 1 and 2); this is the index of the class as a whole.
    """
    return min(m.nesting_index for m in classify_isomorphisms(word, config))
