"""
Nesting Index Engine - Level-Synchronized Breadth-First Reduction

The nesting index NI(w) of a double occurrence word w is the fewest
reduction steps after which some branch of the reduction tree reaches the
empty word:

    level 1:  {w}                      step every word
    level 2:  {branches of level 1}    deduplicated by content
    ...
    stop at the first level where any word's step is terminal

Only the full level decides termination: a terminal step anywhere in level
k makes NI = k, regardless of the order in which the level is expanded.

Every branch loses at least two letters, so the search stops after at most
len(w) / 2 levels.

Example:
    >>> nesting_index([1, 2, 2, 1])
    1
    >>> nesting_index([1, 2, 1, 3, 2, 3])
    2
"""

from __future__ import annotations
from typing import Dict, List, Optional
from dataclasses import dataclass, field, replace

from .constants import EMPTY_WORD_SYMBOL
from .errors import NonDOWError, ResourceExhaustionError
from .parsing import format_word
from .reduction import Operation, step
from .word import Word, WordLike, as_word


# =============================================================================
# Configuration
# =============================================================================

@dataclass(frozen=True)
class EngineConfig:
    """
    Configuration for the nesting index search.

    max_levels and max_frontier are host-imposed bounds; exceeding either
    raises ResourceExhaustionError for the query.
    """
    max_levels: Optional[int] = None      # Bound on BFS depth
    max_frontier: Optional[int] = None    # Bound on deduplicated level size
    trace: bool = False                   # Record a shortest reduction path
    verbose: bool = False                 # Print one line per level

    def __post_init__(self):
        """Validate configuration."""
        if self.max_levels is not None and self.max_levels < 1:
            raise ValueError(f"max_levels must be >= 1, got {self.max_levels}")
        if self.max_frontier is not None and self.max_frontier < 1:
            raise ValueError(f"max_frontier must be >= 1, got {self.max_frontier}")


# =============================================================================
# Results
# =============================================================================

class _Node:
    """Back-pointer from a frontier word to the word it was reduced from."""
    __slots__ = ("word", "parent", "operation")

    def __init__(self, word: Word, parent: Optional[_Node], operation: Optional[Operation]):
        self.word = word
        self.parent = parent
        self.operation = operation


@dataclass
class NestingResult:
    """
    Nesting index of a word with the data gathered by the search.

    history holds one shortest reduction sequence (canonical start word
    first, empty word omitted) and operations[i] takes history[i] to
    history[i+1], the last one to the empty word. Both are empty unless
    tracing was enabled.
    """
    word: Word
    index: int
    frontier_sizes: List[int] = field(default_factory=list)
    history: List[Word] = field(default_factory=list)
    operations: List[Operation] = field(default_factory=list)

    @property
    def levels(self) -> int:
        return len(self.frontier_sizes)

    def describe(self) -> str:
        """Render the reduction path, e.g. '{1221, ε} obtained by reduction operations: base'."""
        words = [format_word(w) for w in self.history] + [EMPTY_WORD_SYMBOL]
        ops = ", ".join(op.describe() for op in self.operations)
        return "{" + ", ".join(words) + "} obtained by reduction operations: " + ops


# =============================================================================
# Engine
# =============================================================================

class NestingIndexEngine:
    """
    Computes nesting indices.

    The engine holds no state between queries; one instance can serve any
    number of words.

    Example:
        >>> engine = NestingIndexEngine(EngineConfig(trace=True))
        >>> result = engine.reduce([1, 2, 1, 3, 2, 3])
        >>> result.index
        2
    """

    def __init__(self, config: Optional[EngineConfig] = None):
        self.config = config or EngineConfig()

    def nesting_index(self, word: WordLike) -> int:
        """
        Nesting index of word.

        Raises:
            NonDOWError: word is not a double occurrence word
            ResourceExhaustionError: memory or a configured bound ran out
        """
        return self.reduce(word).index

    def reduce(self, word: WordLike) -> NestingResult:
        """Run the search and return the full NestingResult."""
        w = as_word(word)
        if not w.is_dow():
            raise NonDOWError(w.letters, w.letter_counts())
        if w.is_empty:
            return NestingResult(word=w, index=0)
        try:
            return self._search(w)
        except MemoryError as exc:
            raise ResourceExhaustionError(
                f"Out of memory reducing word of size {len(w)}"
            ) from exc

    def _search(self, word: Word) -> NestingResult:
        config = self.config
        start = word.relabel()
        frontier: Dict[Word, Optional[_Node]] = {
            start: _Node(start, None, None) if config.trace else None
        }
        sizes: List[int] = []
        level = 0

        while True:
            level += 1
            if config.max_levels is not None and level > config.max_levels:
                raise ResourceExhaustionError(
                    f"Exceeded max_levels={config.max_levels} for word of size {len(word)}"
                )
            sizes.append(len(frontier))
            if config.verbose:
                print(f"Level {level}: {len(frontier)} word(s)")

            next_frontier: Dict[Word, Optional[_Node]] = {}
            for current, node in frontier.items():
                result = step(current)
                if result.terminal:
                    return self._finish(word, level, sizes, node, result.terminal_operation)
                for branch in result.branches:
                    # First occurrence wins
                    if branch.word not in next_frontier:
                        next_frontier[branch.word] = (
                            _Node(branch.word, node, branch.operation) if config.trace else None
                        )

            if config.max_frontier is not None and len(next_frontier) > config.max_frontier:
                raise ResourceExhaustionError(
                    f"Level {level + 1} holds {len(next_frontier)} words, "
                    f"exceeding max_frontier={config.max_frontier}"
                )
            frontier = next_frontier

    @staticmethod
    def _finish(word: Word, level: int, sizes: List[int],
                node: Optional[_Node], last: Optional[Operation]) -> NestingResult:
        result = NestingResult(word=word, index=level, frontier_sizes=sizes)
        if node is None:
            return result
        history: List[Word] = []
        operations: List[Operation] = [last]
        while node is not None:
            history.append(node.word)
            if node.operation is not None:
                operations.append(node.operation)
            node = node.parent
        history.reverse()
        operations.reverse()
        result.history = history
        result.operations = operations
        return result


# =============================================================================
# Convenience Functions
# =============================================================================

def nesting_index(word: WordLike, config: Optional[EngineConfig] = None) -> int:
    """
    Nesting index of a double occurrence word.

    Args:
        word: Word, sequence of ints or numpy array
        config: Optional EngineConfig

    Returns:
        Integer >= 0 (0 only for the empty word)

    Raises:
        NonDOWError: word is not a double occurrence word
    """
    return NestingIndexEngine(config).nesting_index(word)


def reduction_path(word: WordLike, config: Optional[EngineConfig] = None) -> NestingResult:
    """Nesting index of word together with one shortest reduction path."""
    traced = replace(config or EngineConfig(), trace=True)
    return NestingIndexEngine(traced).reduce(word)
