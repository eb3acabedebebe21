# nesting_index/constants.py
"""
Nesting Index Constants

This module defines constants used throughout the nesting index package:

LETTERS: Word representation
- LETTER_DTYPE: numpy dtype of a letter (16-bit unsigned)
- MAX_LETTER: Largest letter value a word may carry

REDUCTION: Search behaviour
- TERMINAL_SIZE: Words of this size or smaller reduce to empty in one step

TEXT: Input/output conventions
- DELIMITERS: Characters separating multi-digit letters
- WIDE_FORMAT_SIZE: Word length from which output is comma separated
"""
import string

import numpy as np


# =============================================================================
# LETTERS: Word Representation
# =============================================================================

LETTER_DTYPE = np.uint16                          # One letter per uint16
MAX_LETTER = int(np.iinfo(LETTER_DTYPE).max)      # 65535

# Differences of consecutive letters need a signed type wide enough
# to hold -MAX_LETTER .. MAX_LETTER
DIFF_DTYPE = np.int32


# =============================================================================
# REDUCTION: Search Behaviour
# =============================================================================

# Every DOW with at most 4 letters reduces to the empty word in one step
TERMINAL_SIZE = 4


# =============================================================================
# TEXT: Input/Output Conventions
# =============================================================================

DELIMITERS = string.punctuation
DIGITS = string.digits

# Words this long are printed as "1,2,3,..." instead of "123..."
WIDE_FORMAT_SIZE = 20

NOT_DOW_LABEL = "not DOW"
EMPTY_WORD_SYMBOL = "ε"
