"""
Tests for join() / join_sequence(): left-nested projection chains.
"""

import numpy as np
import pytest

from pysurvalgebra.core.exceptions import (
    DimensionError,
    InvalidArgumentError,
    UnsortedSequenceError,
)
from pysurvalgebra.expressions import (
    Base,
    Projection,
    join,
    join_sequence,
    project,
    project_sequence,
)


class TestJoinStructure:

    def test_two_distributions(self, d1, d2):
        result = join(d1, 20, d2)
        assert result == Projection(early=d1, late=d2, at=20.0)

    def test_three_distributions_left_nested(self, d1, d2, d3):
        result = join(d1, 10, d2, 20, d3)

        assert isinstance(result, Projection)
        assert result.late is d3
        assert result.at == 20.0
        assert result.early == Projection(early=d1, late=d2, at=10.0)
        assert result.early.early is d1

    def test_interleaved_matches_sequence(self, d1, d2, d3):
        assert join(d1, 10, d2, 20, d3) == join_sequence([d1, d2, d3], [10, 20])

    def test_cutpoints_stored_as_float(self, d1, d2):
        result = join(d1, np.int64(5), d2)
        assert type(result.at) is float

    def test_replicated_cutpoint_reduced(self, d1, d2):
        assert join(d1, [12, 12, 12], d2).at == 12.0

    def test_zero_cutpoint_allowed(self, d1, d2):
        assert join(d1, 0, d2).at == 0.0

    def test_raw_handles_wrapped(self, handle, d2):
        result = join(handle, 5, d2)
        assert isinstance(result.early, Base)
        assert result.early.handle is handle

    def test_inputs_reused_not_copied(self, d1, d2):
        first = join(d1, 5, d2)
        second = join(first, 10, d1)
        assert second.early is first
        assert first == Projection(early=d1, late=d2, at=5.0)


class TestJoinValidation:

    def test_unsorted_cutpoints(self, d1, d2, d3):
        with pytest.raises(UnsortedSequenceError):
            join(d1, 20, d2, 10, d3)

    def test_unsorted_cutpoints_are_invalid_arguments(self, d1, d2, d3):
        with pytest.raises(InvalidArgumentError, match="strictly increasing") as info:
            join(d1, 20, d2, 10, d3)
        assert info.value.index == 1
        assert info.value.name == "cutpoints"

    def test_negative_cutpoint(self, d1, d2):
        with pytest.raises(InvalidArgumentError, match="non-negative"):
            join(d1, -5, d2)

    def test_single_distribution(self, d1):
        with pytest.raises(DimensionError, match="at least 2"):
            join(d1)

    def test_trailing_cutpoint(self, d1, d2):
        # (d1, 10, d2, 20) has two cutpoints for two distributions
        with pytest.raises(DimensionError, match="expected 1 elements, got 2"):
            join(d1, 10, d2, 20)

    def test_sequence_count_mismatch(self, d1, d2, d3):
        with pytest.raises(DimensionError):
            join_sequence([d1, d2, d3], [10])

    @pytest.mark.parametrize("bad", [np.inf, np.nan])
    def test_non_finite_cutpoint(self, d1, d2, bad):
        with pytest.raises(InvalidArgumentError, match="non-finite"):
            join(d1, bad, d2)

    def test_vector_cutpoint_with_distinct_values(self, d1, d2):
        with pytest.raises(InvalidArgumentError, match="single distinct value"):
            join(d1, [10, 20], d2)

    def test_swapped_arguments(self, d1):
        with pytest.raises(InvalidArgumentError, match="Expected a survival distribution"):
            join(10, d1, 20)

    def test_error_names_offending_cutpoint(self, d1, d2, d3):
        with pytest.raises(InvalidArgumentError, match=r"cutpoints\[1\]"):
            join(d1, 10, d2, -1, d3)


class TestJoinTies:

    def test_ties_rejected_by_default(self, d1, d2, d3):
        with pytest.raises(UnsortedSequenceError, match="strictly increasing"):
            join(d1, 10, d2, 10, d3)

    def test_ties_allowed_on_request(self, d1, d2, d3):
        result = join(d1, 10, d2, 10, d3, allow_ties=True)
        assert result.at == 10.0
        assert result.early.at == 10.0

    def test_allow_ties_still_rejects_decrease(self, d1, d2, d3):
        with pytest.raises(UnsortedSequenceError):
            join_sequence([d1, d2, d3], [10, 5], allow_ties=True)


class TestDeprecatedProject:

    def test_project_warns_and_delegates(self, d1, d2):
        with pytest.warns(DeprecationWarning, match="use 'join\\(\\)' instead"):
            result = project(d1, 10, d2)
        assert result == join(d1, 10, d2)

    def test_project_sequence_warns(self, d1, d2):
        with pytest.warns(DeprecationWarning, match="join_sequence"):
            result = project_sequence([d1, d2], [3])
        assert result.at == 3.0
