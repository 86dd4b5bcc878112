"""Tests for cosine similarity."""

import pytest

from postcraft.core.exceptions import DimensionMismatchError
from postcraft.embedding import cosine_similarity


@pytest.mark.unit
class TestCosineSimilarity:
    def test_identical_vectors(self) -> None:
        """Test that identical vectors score 1."""
        assert cosine_similarity([0.3, 0.4, 0.5], [0.3, 0.4, 0.5]) == pytest.approx(1.0)

    def test_orthogonal_vectors(self) -> None:
        """Test that orthogonal vectors score 0."""
        assert cosine_similarity([1.0, 0.0], [0.0, 1.0]) == pytest.approx(0.0)

    def test_opposite_vectors(self) -> None:
        """Test that opposite vectors score -1."""
        assert cosine_similarity([1.0, 2.0], [-1.0, -2.0]) == pytest.approx(-1.0)

    def test_symmetric(self) -> None:
        """Test that argument order does not matter."""
        a, b = [0.1, 0.7, 0.2], [0.5, 0.1, 0.9]
        assert cosine_similarity(a, b) == pytest.approx(cosine_similarity(b, a))

    def test_scale_invariant(self) -> None:
        """Test that scaling a vector keeps the score."""
        assert cosine_similarity([1.0, 1.0], [10.0, 10.0]) == pytest.approx(1.0)

    def test_zero_vector_scores_zero(self) -> None:
        """Test that a zero vector scores 0."""
        assert cosine_similarity([0.0, 0.0], [1.0, 2.0]) == 0.0

    def test_length_mismatch(self) -> None:
        """Test that vectors of different length are rejected."""
        with pytest.raises(DimensionMismatchError) as exc_info:
            cosine_similarity([1.0, 0.0, 0.0], [1.0, 0.0])

        assert exc_info.value.expected == 3
        assert exc_info.value.actual == 2
