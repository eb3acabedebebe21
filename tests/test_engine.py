"""
Tests for the nesting index search
"""

import pytest

from nesting_index import (
    EngineConfig,
    NestingIndexEngine,
    NonDOWError,
    OperationKind,
    ResourceExhaustionError,
    Word,
    nesting_index,
    reduction_path,
)


class TestNestingIndex:
    def test_empty_word(self):
        assert nesting_index([]) == 0

    @pytest.mark.parametrize("word", [
        (1, 1),
        (1, 1, 2, 2),
        (1, 2, 2, 1),
        (1, 2, 1, 2),
        (1, 2, 3, 3, 2, 1),
        (1, 2, 3, 1, 2, 3),
        (1, 1, 2, 2, 3, 3),
        (1, 2, 2, 1, 3, 3),
        (1, 1, 2, 3, 3, 2),
        (1, 2, 1, 2, 3, 3),
    ])
    def test_index_one(self, word):
        assert nesting_index(word) == 1

    @pytest.mark.parametrize("word", [
        (1, 2, 1, 3, 2, 3),
        (1, 2, 3, 1, 3, 2),
        (1, 2, 3, 2, 1, 3),
        (1, 2, 3, 3, 2, 4, 4, 1),
        (1, 2, 1, 3, 2, 4, 3, 4),
    ])
    def test_index_two(self, word):
        assert nesting_index(word) == 2

    def test_non_canonical_input(self):
        assert nesting_index([5, 9, 5, 7, 9, 7]) == 2
        assert nesting_index([3, 3, 1, 1]) == 1

    def test_accepts_word_instance(self):
        assert nesting_index(Word((1, 2, 2, 1))) == 1

    @pytest.mark.parametrize("word", [
        (1, 2, 1, 3, 2, 3),
        (1, 2, 3, 3, 2, 4, 4, 1),
        (1, 2, 1, 3, 2, 4, 3, 4),
    ])
    def test_bounded_by_half_length(self, word):
        assert 1 <= nesting_index(word) <= len(word) // 2

    def test_engine_is_reusable(self):
        engine = NestingIndexEngine()
        assert engine.nesting_index([1, 2, 1, 3, 2, 3]) == 2
        assert engine.nesting_index([1, 2, 2, 1]) == 1


class TestValidation:
    @pytest.mark.parametrize("word", [
        (1, 2, 3, 3, 2, 1, 1, 2, 3),
        (1, 2, 1),
        (1, 1, 1, 1),
    ])
    def test_non_dow_rejected(self, word):
        with pytest.raises(NonDOWError) as info:
            nesting_index(word)
        assert info.value.letters == word

    def test_non_dow_is_value_error(self):
        with pytest.raises(ValueError):
            nesting_index([1, 2])


class TestSearchData:
    def test_frontier_sizes(self):
        result = NestingIndexEngine().reduce([1, 2, 1, 3, 2, 3])
        assert result.index == 2
        # Branches 1212 and 1212 collapse into one frontier entry
        assert result.frontier_sizes == [1, 2]
        assert result.levels == 2
        assert result.history == []

    def test_reduction_path(self):
        result = reduction_path([1, 2, 1, 3, 2, 3])
        assert result.history == [Word((1, 2, 1, 3, 2, 3)), Word((1, 2, 1, 2))]
        assert [op.kind for op in result.operations] == [
            OperationKind.REMOVE_LETTER,
            OperationKind.BASE,
        ]
        assert result.describe() == (
            "{121323, 1212, ε} obtained by reduction operations: 2 (removal of 1), base"
        )

    def test_reduction_path_single_step(self):
        result = reduction_path([1, 2, 3, 3, 2, 1])
        assert result.history == [Word((1, 2, 3, 3, 2, 1))]
        assert result.describe() == "{123321, ε} obtained by reduction operations: 1"

    def test_path_starts_from_canonical_word(self):
        result = reduction_path([2, 1, 1, 2])
        assert result.history == [Word((1, 2, 2, 1))]
        assert result.word == Word((2, 1, 1, 2))

    def test_path_length_matches_index(self):
        result = reduction_path([1, 2, 3, 3, 2, 4, 4, 1])
        assert len(result.history) == result.index
        assert len(result.operations) == result.index

    def test_verbose_prints_levels(self, capsys):
        nesting_index([1, 2, 1, 3, 2, 3], EngineConfig(verbose=True))
        out = capsys.readouterr().out
        assert "Level 1: 1 word(s)" in out
        assert "Level 2: 2 word(s)" in out


class TestBounds:
    def test_config_validation(self):
        with pytest.raises(ValueError):
            EngineConfig(max_levels=0)
        with pytest.raises(ValueError):
            EngineConfig(max_frontier=0)

    def test_max_levels(self):
        config = EngineConfig(max_levels=1)
        assert nesting_index([1, 2, 2, 1], config) == 1
        with pytest.raises(ResourceExhaustionError):
            nesting_index([1, 2, 1, 3, 2, 3], config)

    def test_max_frontier(self):
        with pytest.raises(ResourceExhaustionError):
            nesting_index([1, 2, 1, 3, 2, 3], EngineConfig(max_frontier=1))

    def test_memory_error_becomes_resource_exhaustion(self, monkeypatch):
        def exhausted(word):
            raise MemoryError

        monkeypatch.setattr("nesting_index.engine.step", exhausted)
        with pytest.raises(ResourceExhaustionError):
            nesting_index([1, 2, 1, 3, 2, 3])


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
