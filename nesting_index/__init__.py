"""
Nesting Index - Reduction of Double Occurrence Words

Computes the nesting index of a double occurrence word (DOW), a sequence in
which every letter occurs exactly twice. The index counts the levels of a
breadth-first, non-deterministic reduction until some branch reaches the
empty word. See http://arxiv.org/abs/1311.3543 for the formal definition.

Components (leaves first):
- word: Immutable Word, validation and canonical relabelling
- subwords: Maximal return/repeat word detection over differences
- reduction: One reduction step (all branches)
- engine: Level-synchronized BFS computing the nesting index
- isomorphism: Cyclic rotation / reversal classes
- parsing, batch, cli: Text I/O and word-list orchestration
"""

__version__ = "0.1.0"

from .constants import LETTER_DTYPE, MAX_LETTER, TERMINAL_SIZE
from .errors import (
    NestingIndexError,
    NonDOWError,
    MalformedTokenError,
    ResourceExhaustionError,
)
from .word import Word, as_word, is_dow, distinct_letters, relabel, equals
from .subwords import (
    Subword,
    SubwordKind,
    find_return_words,
    find_repeat_words,
    find_maximal_subwords,
)
from .reduction import Branch, Operation, OperationKind, ReductionStep, step
from .engine import (
    EngineConfig,
    NestingIndexEngine,
    NestingResult,
    nesting_index,
    reduction_path,
)
from .isomorphism import (
    IsomorphismMember,
    isomorphism_class,
    classify_isomorphisms,
    circular_nesting_index,
)
from .parsing import parse_word, format_word
from .batch import (
    BatchConfig,
    WordResult,
    evaluate_word,
    evaluate_words,
    tally,
    format_tally,
    read_words,
    write_results,
)

__all__ = [
    # Constants
    "LETTER_DTYPE",
    "MAX_LETTER",
    "TERMINAL_SIZE",

    # Errors
    "NestingIndexError",
    "NonDOWError",
    "MalformedTokenError",
    "ResourceExhaustionError",

    # Word model
    "Word",
    "as_word",
    "is_dow",
    "distinct_letters",
    "relabel",
    "equals",

    # Subword detector
    "Subword",
    "SubwordKind",
    "find_return_words",
    "find_repeat_words",
    "find_maximal_subwords",

    # Reducer
    "Branch",
    "Operation",
    "OperationKind",
    "ReductionStep",
    "step",

    # Engine
    "EngineConfig",
    "NestingIndexEngine",
    "NestingResult",
    "nesting_index",
    "reduction_path",

    # Isomorphism
    "IsomorphismMember",
    "isomorphism_class",
    "classify_isomorphisms",
    "circular_nesting_index",

    # Text I/O and batches
    "parse_word",
    "format_word",
    "BatchConfig",
    "WordResult",
    "evaluate_word",
    "evaluate_words",
    "tally",
    "format_tally",
    "read_words",
    "write_results",
]
