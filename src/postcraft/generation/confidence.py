"""Confidence scoring for generated drafts."""

from postcraft.core.models.post import SimilarPost

SIMILARITY_WEIGHT = 0.7
COUNT_WEIGHT = 0.3
# Match count at which the count factor saturates.
FULL_MATCH_COUNT = 5


def confidence_score(avg_similarity: float, match_count: int) -> float:
    """Blend retrieval quality and quantity into a score in [0, 1].

    ``avg_similarity * 0.7 + min(match_count / 5, 1) * 0.3``. Non-decreasing
    in both arguments.
    """
    if match_count <= 0:
        return 0.0
    count_factor = min(match_count / FULL_MATCH_COUNT, 1.0)
    score = avg_similarity * SIMILARITY_WEIGHT + count_factor * COUNT_WEIGHT
    return min(max(score, 0.0), 1.0)


def compute_confidence(similar_posts: list[SimilarPost]) -> float:
    if not similar_posts:
        return 0.0
    avg = sum(sp.similarity for sp in similar_posts) / len(similar_posts)
    return confidence_score(avg, len(similar_posts))
