"""
Reducer - One Non-Deterministic Reduction Step

Given a DOW w, one step produces the candidate words of the next level:

    Operation 1: remove every letter of every maximal subword of w
    Operation 2: remove a single letter not covered by a maximal subword

    w = 1 2 2 3 1 3 (loop 22 is its only subword)

    op 1        -> 1 3 1 3      -> 1 2 1 2
    op 2 (1)    -> 2 2 3 3      -> 1 1 2 2
    op 2 (3)    -> 1 2 2 1      -> 1 2 2 1

Every branch is relabelled to canonical form. A step is terminal when the
word has at most TERMINAL_SIZE letters, or when operation 1 already yields
the empty word.
"""

from __future__ import annotations
from typing import List, Optional, Tuple
from dataclasses import dataclass
from enum import Enum

from .constants import TERMINAL_SIZE
from .subwords import Subword, covered_letters, find_maximal_subwords
from .word import Word, WordLike, as_word


class OperationKind(Enum):
    REMOVE_SUBWORDS = "remove maximal subwords"
    REMOVE_LETTER = "remove letter"
    BASE = "base step"


@dataclass(frozen=True)
class Operation:
    """How a branch was derived from its parent."""
    kind: OperationKind
    letter: Optional[int] = None
    subwords: Tuple[Subword, ...] = ()

    def describe(self) -> str:
        if self.kind is OperationKind.REMOVE_LETTER:
            return f"2 (removal of {self.letter})"
        if self.kind is OperationKind.REMOVE_SUBWORDS:
            return "1"
        return "base"


@dataclass(frozen=True)
class Branch:
    """A reduced word together with the operation that produced it."""
    word: Word
    operation: Operation

    @property
    def size(self) -> int:
        """Expected size of the word at the next level."""
        return len(self.word)


@dataclass(frozen=True)
class ReductionStep:
    """
    Outcome of one reduction step.

    Either terminal (some branch is the empty word) or a list of non-empty
    branches.
    """
    terminal: bool
    branches: Tuple[Branch, ...] = ()
    terminal_operation: Optional[Operation] = None

    def __iter__(self):
        return iter(self.branches)

    def __len__(self) -> int:
        return len(self.branches)

    @classmethod
    def collapse(cls, operation: Operation) -> ReductionStep:
        return cls(terminal=True, terminal_operation=operation)


def step(word: WordLike) -> ReductionStep:
    """
    Perform one reduction step on a DOW.

    The caller is responsible for passing a valid DOW; the result is
    undefined otherwise.

    Args:
        word: A double occurrence word in canonical form

    Returns:
        ReductionStep with 1 + (free letters) branches when maximal subwords
        exist, one branch per distinct letter otherwise, or a terminal step.
    """
    w = as_word(word)

    if len(w) <= TERMINAL_SIZE:
        return ReductionStep.collapse(Operation(OperationKind.BASE))

    subwords = find_maximal_subwords(w)
    branches: List[Branch] = []

    if subwords is not None:
        covered = covered_letters(subwords)
        operation = Operation(OperationKind.REMOVE_SUBWORDS, subwords=tuple(subwords))
        reduced = w.without_letters(covered).relabel()
        if reduced.is_empty:
            return ReductionStep.collapse(operation)
        branches.append(Branch(reduced, operation))
        free = [x for x in w.distinct_letters() if x not in covered]
    else:
        free = w.distinct_letters()

    for letter in free:
        branches.append(Branch(
            w.without_letter(letter).relabel(),
            Operation(OperationKind.REMOVE_LETTER, letter=letter),
        ))

    return ReductionStep(terminal=False, branches=tuple(branches))
