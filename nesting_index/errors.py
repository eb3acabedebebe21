"""
Error taxonomy for nesting index queries.

All errors are per-query: a batch run records them on the offending word
and moves on to the next one.
"""

from typing import Dict, Optional, Sequence


class NestingIndexError(Exception):
    """Base class for all nesting index errors."""


class NonDOWError(NestingIndexError, ValueError):
    """A letter occurs a number of times other than exactly twice."""

    def __init__(self, letters: Sequence[int], counts: Optional[Dict[int, int]] = None):
        self.letters = tuple(letters)
        self.counts = dict(counts or {})
        bad = {k: v for k, v in self.counts.items() if v != 2}
        detail = f" (letter counts: {bad})" if bad else ""
        super().__init__(f"Not a double occurrence word: {list(self.letters)}{detail}")


class MalformedTokenError(NestingIndexError, ValueError):
    """Input text holds characters that are neither digits nor delimiters."""

    def __init__(self, text: str, position: Optional[int] = None, reason: Optional[str] = None):
        self.text = text
        self.position = position
        if reason is None:
            if position is not None and 0 <= position < len(text):
                reason = f"unexpected character {text[position]!r} at position {position}"
            else:
                reason = "unrecognized input"
        self.reason = reason
        super().__init__(f"Argument for word was not recognized: {text!r}: {reason}")


class ResourceExhaustionError(NestingIndexError, RuntimeError):
    """Reduction ran out of memory or exceeded a configured bound."""
