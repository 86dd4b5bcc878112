"""Custom exceptions for postcraft."""


class PostcraftError(Exception):
    """Base exception for all postcraft errors."""

    def __init__(self, message: str, details: dict | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(PostcraftError):
    """Raised when there's a configuration problem."""

    pass


class ValidationError(PostcraftError):
    """Raised when caller input is malformed.

    Never retried: batch too large, mismatched array lengths, blank idea.
    """

    pass


class NoHistoryError(PostcraftError):
    """Raised when a user has no stored posts similar enough to the idea.

    A precondition failure, not a transient fault: the caller should
    ingest posts for the user before generating drafts.
    """

    def __init__(self, user_id: str) -> None:
        super().__init__(
            f"No similar posts found for user {user_id}. Ingest posts first.",
            details={"user_id": user_id},
        )
        self.user_id = user_id


class ProviderError(PostcraftError):
    """Raised when an upstream embedding or model call fails."""

    pass


class DimensionMismatchError(ProviderError):
    """Raised when a vector does not have the expected dimension."""

    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(
            f"Vector dimension mismatch: expected {expected}, got {actual}",
            details={"expected": expected, "actual": actual},
        )
        self.expected = expected
        self.actual = actual


class RepositoryError(PostcraftError):
    """Raised when a repository operation fails."""

    pass


class PipelineError(PostcraftError):
    """Raised when a pipeline step fails."""

    pass
