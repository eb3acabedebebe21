"""
Tests for the Word model
"""

import pytest
import numpy as np

from nesting_index import Word, distinct_letters, equals, is_dow, relabel
from nesting_index.constants import LETTER_DTYPE, MAX_LETTER


class TestWordConstruction:
    def test_letters_are_tuple_of_ints(self):
        w = Word([1, 2, 2, 1])
        assert w.letters == (1, 2, 2, 1)
        assert len(w) == 4

    def test_from_numpy(self):
        w = Word.of(np.array([3, 3], dtype=np.uint16))
        assert w == Word((3, 3))
        assert all(isinstance(x, int) for x in w)

    def test_of_returns_same_word(self):
        w = Word((1, 1))
        assert Word.of(w) is w

    def test_empty(self):
        assert Word.empty().is_empty
        assert len(Word()) == 0

    def test_letter_out_of_range(self):
        with pytest.raises(ValueError):
            Word((MAX_LETTER + 1, MAX_LETTER + 1))
        with pytest.raises(ValueError):
            Word((-1, -1))

    def test_non_integer_letter_rejected(self):
        with pytest.raises(ValueError):
            Word((1.5, 1.5))

    def test_integral_values_accepted(self):
        assert Word((2.0, 2.0)) == Word((2, 2))

    def test_hashable_by_content(self):
        assert len({Word((1, 2, 1, 2)), Word([1, 2, 1, 2])}) == 1

    def test_str(self):
        assert str(Word((1, 2, 2, 1))) == "1221"


class TestArrays:
    def test_to_array_dtype(self):
        arr = Word((1, 2, 2, 1)).to_array()
        assert arr.dtype == LETTER_DTYPE
        assert arr.tolist() == [1, 2, 2, 1]

    def test_differences(self):
        assert Word((1, 2, 3, 3, 2, 1)).differences().tolist() == [1, 1, 0, -1, -1]

    def test_differences_signed(self):
        assert Word((3, 1)).differences().tolist() == [-2]

    def test_differences_short_word(self):
        assert Word((1,)).differences().size == 0
        assert Word().differences().size == 0

    def test_letter_counts(self):
        assert Word((1, 2, 3, 3, 2, 1, 1)).letter_counts() == {1: 3, 2: 2, 3: 2}


class TestDoubleOccurrence:
    def test_valid_words(self):
        assert is_dow([1, 2, 2, 1])
        assert is_dow([1, 2, 1, 2])
        assert is_dow([7, 7])

    def test_empty_word_is_dow(self):
        assert is_dow([])

    def test_odd_multiplicity(self):
        assert not is_dow([1, 2, 3, 3, 2, 1, 1, 2, 3])
        assert not is_dow([1, 2, 1])

    def test_letter_four_times(self):
        assert not is_dow([1, 1, 1, 1])


class TestLetters:
    def test_distinct_letters_first_occurrence_order(self):
        assert distinct_letters([3, 1, 3, 1]) == [3, 1]
        assert distinct_letters([1, 2, 2, 3, 1, 3]) == [1, 2, 3]


class TestRelabel:
    def test_relabel_first_occurrence(self):
        assert relabel([5, 9, 9, 5, 7, 7]) == Word((1, 2, 2, 1, 3, 3))
        assert relabel([2, 1, 1, 2]) == Word((1, 2, 2, 1))

    def test_relabel_idempotent(self):
        for letters in ([5, 9, 9, 5, 7, 7], [3, 1, 2, 1, 3, 2], [4, 4]):
            once = relabel(letters)
            assert relabel(once) == once
            assert once.is_canonical()

    def test_relabel_empty(self):
        assert relabel([]) == Word()


class TestTransformations:
    def test_equals_is_exact(self):
        assert equals([1, 2], (1, 2))
        assert not equals([1, 2, 1, 2], [2, 1, 2, 1])
        assert not equals([1, 1], [1, 1, 2, 2])

    def test_rotate(self):
        w = Word((1, 2, 2, 1))
        assert w.rotate(1) == Word((2, 2, 1, 1))
        assert w.rotate(4) == w
        assert w.rotate(-1) == Word((1, 1, 2, 2))

    def test_reverse(self):
        assert Word((1, 2, 1, 3, 2, 3)).reverse() == Word((3, 2, 3, 1, 2, 1))

    def test_without_letter_keeps_order(self):
        w = Word((1, 2, 3, 1, 3, 2))
        assert w.without_letter(3) == Word((1, 2, 1, 2))
        assert w == Word((1, 2, 3, 1, 3, 2))

    def test_without_letters(self):
        assert Word((1, 2, 3, 1, 3, 2)).without_letters({1, 3}) == Word((2, 2))


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
