"""
Tests for mix() / mix_sequence(): flat weighted mixtures.
"""

import pytest

from pysurvalgebra.core.exceptions import DimensionError, InvalidArgumentError
from pysurvalgebra.expressions import Pooled, mix, mix_sequence, pool, pool_sequence


class TestMixStructure:

    def test_flat_node(self, d1, d2, d3):
        result = mix(d1, 0.2, d2, 0.3, d3, 0.5)
        assert isinstance(result, Pooled)
        assert result.members == (d1, d2, d3)
        assert result.weights == (0.2, 0.3, 0.5)

    def test_weights_need_not_sum_to_one(self, d1, d2):
        result = mix(d1, 2, d2, 5)
        assert result.weights == (2.0, 5.0)

    def test_zero_weight_allowed(self, d1, d2):
        assert mix(d1, 0, d2, 1).weights == (0.0, 1.0)

    def test_replicated_weight_reduced(self, d1, d2):
        assert mix_sequence([d1, d2], [[0.25, 0.25], 0.75]).weights == (0.25, 0.75)

    def test_interleaved_matches_sequence(self, d1, d2):
        assert mix(d1, 0.4, d2, 0.6) == mix_sequence([d1, d2], [0.4, 0.6])

    def test_nested_mixtures_not_flattened(self, d1, d2, d3):
        inner = mix(d1, 0.5, d2, 0.5)
        outer = mix(inner, 0.5, d3, 0.5)
        assert outer.members == (inner, d3)


class TestMixValidation:

    def test_weight_count_mismatch(self, d1, d2, d3):
        with pytest.raises(DimensionError, match="dists=3, weights=2"):
            mix(d1, 0.3, d2, 0.5, d3)

    def test_negative_weight(self, d1, d2):
        with pytest.raises(InvalidArgumentError, match=r"weights\[0\].*non-negative"):
            mix(d1, -0.1, d2, 1.1)

    def test_single_distribution(self, d1):
        with pytest.raises(DimensionError, match="at least 2"):
            mix(d1, 1.0)

    def test_weight_with_distinct_values(self, d1, d2):
        with pytest.raises(InvalidArgumentError, match="single distinct value"):
            mix_sequence([d1, d2], [[0.2, 0.3], 0.5])

    def test_infinite_weight(self, d1, d2):
        with pytest.raises(InvalidArgumentError, match="non-finite"):
            mix(d1, float("inf"), d2, 1)


class TestDeprecatedPool:

    def test_pool_warns_and_delegates(self, d1, d2):
        with pytest.warns(DeprecationWarning, match="use 'mix\\(\\)' instead"):
            result = pool(d1, 0.5, d2, 0.5)
        assert result == mix(d1, 0.5, d2, 0.5)

    def test_pool_sequence_warns(self, d1, d2):
        with pytest.warns(DeprecationWarning, match="mix_sequence"):
            pool_sequence([d1, d2], [1, 1])
