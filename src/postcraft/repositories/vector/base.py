"""Input checks shared by vector repository implementations."""

from postcraft.core.exceptions import DimensionMismatchError, ValidationError
from postcraft.core.models.post import Post


def check_vector(vector: list[float], dimensions: int) -> None:
    if len(vector) != dimensions:
        raise DimensionMismatchError(expected=dimensions, actual=len(vector))


def check_batch(posts: list[Post], vectors: list[list[float]], dimensions: int) -> None:
    """Validate a whole batch before anything is written."""
    if len(posts) != len(vectors):
        raise ValidationError(
            "Posts and vectors length mismatch",
            details={"posts": len(posts), "vectors": len(vectors)},
        )
    for vector in vectors:
        check_vector(vector, dimensions)


def check_top_k(top_k: int) -> None:
    if top_k < 1:
        raise ValidationError("top_k must be >= 1", details={"top_k": top_k})


def check_page(limit: int, offset: int) -> None:
    if limit < 1:
        raise ValidationError("limit must be >= 1", details={"limit": limit})
    if offset < 0:
        raise ValidationError("offset must be >= 0", details={"offset": offset})
