"""
Batch Evaluation of Word Lists

Orchestration over the engine for many words at once:

    texts = read_words("words.txt")            # whitespace-delimited words
    results = evaluate_words(texts)            # one WordResult per word
    write_results(results, "indices.txt")      # "1221: 1" lines
    print(format_tally(tally(results)))        # "NI = 1: 42" lines

Errors are recorded per word (not DOW, malformed, resource exhaustion) and
never stop the batch. Words are independent, so evaluate_words can fan out
over a thread or process pool; results keep the input order.
"""

from __future__ import annotations
from typing import Dict, Iterable, Iterator, List, Optional
from dataclasses import dataclass, field
from collections import Counter
from concurrent.futures import ProcessPoolExecutor, ThreadPoolExecutor
from functools import partial
import os

from .constants import NOT_DOW_LABEL
from .engine import EngineConfig, NestingIndexEngine
from .errors import MalformedTokenError, NonDOWError, ResourceExhaustionError
from .parsing import format_word, parse_word
from .word import Word


# =============================================================================
# Configuration and results
# =============================================================================

@dataclass(frozen=True)
class BatchConfig:
    """
    Configuration for batch evaluation.

    use_processes selects a ProcessPoolExecutor (the search is CPU-bound);
    the default pool is a ThreadPoolExecutor.
    """
    engine: EngineConfig = field(default_factory=EngineConfig)
    parallel: bool = False
    max_workers: Optional[int] = None     # None = CPU count
    use_processes: bool = False

    def __post_init__(self):
        if self.max_workers is not None and self.max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {self.max_workers}")


@dataclass(frozen=True)
class WordResult:
    """Outcome of evaluating one input word."""
    text: str
    word: Optional[Word] = None
    index: Optional[int] = None
    error: Optional[str] = None       # "not DOW", "malformed" or "resource"
    message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def format(self) -> str:
        """'word: NI', 'word: not DOW' or 'word: error: ...'."""
        label = format_word(self.word) if self.word is not None else self.text
        if self.ok:
            return f"{label}: {self.index}"
        if self.error == NOT_DOW_LABEL:
            return f"{label}: {NOT_DOW_LABEL}"
        return f"{label}: error: {self.message}"


# =============================================================================
# Evaluation
# =============================================================================

def evaluate_word(text: str, config: Optional[EngineConfig] = None) -> WordResult:
    """
    Parse text and compute its nesting index.

    Per-query errors are captured in the returned WordResult.
    """
    try:
        word = parse_word(text)
    except MalformedTokenError as exc:
        return WordResult(text=text, error="malformed", message=exc.reason)

    try:
        index = NestingIndexEngine(config).nesting_index(word)
    except NonDOWError as exc:
        return WordResult(text=text, word=word, error=NOT_DOW_LABEL, message=str(exc))
    except ResourceExhaustionError as exc:
        return WordResult(text=text, word=word, error="resource", message=str(exc))

    return WordResult(text=text, word=word, index=index)


def evaluate_words(texts: Iterable[str],
                   config: Optional[BatchConfig] = None) -> List[WordResult]:
    """
    Evaluate many words, sequentially or in parallel.

    Args:
        texts: Word strings
        config: BatchConfig (parallelism and engine settings)

    Returns:
        One WordResult per input, in input order
    """
    config = config or BatchConfig()
    texts = list(texts)
    worker = partial(evaluate_word, config=config.engine)

    if not config.parallel or len(texts) < 2:
        return [worker(t) for t in texts]

    max_workers = config.max_workers or os.cpu_count()
    executor_class = ProcessPoolExecutor if config.use_processes else ThreadPoolExecutor
    with executor_class(max_workers=max_workers) as executor:
        return list(executor.map(worker, texts))


# =============================================================================
# Frequency tally
# =============================================================================

def tally(results: Iterable[WordResult]) -> Dict[int, int]:
    """Number of words per nesting index, sorted by index."""
    counts = Counter(r.index for r in results if r.ok)
    return dict(sorted(counts.items()))


def format_tally(counts: Dict[int, int]) -> str:
    return "\n".join(f"NI = {k}: {n}" for k, n in sorted(counts.items()))


# =============================================================================
# Word-list files
# =============================================================================

def read_words(path: str) -> Iterator[str]:
    """Yield the whitespace-delimited words of a text file."""
    with open(path) as f:
        for line in f:
            yield from line.split()


def format_results(results: Iterable[WordResult]) -> str:
    return "\n".join(r.format() for r in results)


def write_results(results: Iterable[WordResult], path: str) -> None:
    """Write one 'word: NI' line per result."""
    with open(path, "w") as f:
        for r in results:
            f.write(r.format() + "\n")
