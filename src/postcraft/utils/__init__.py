"""Utility functions for postcraft."""

from postcraft.utils.rate_limit import (
    FixedDelayRateLimiter,
    NoopRateLimiter,
    RateLimiter,
    TokenBucketRateLimiter,
)
from postcraft.utils.text import clean_text, has_emoji, has_hashtag

__all__ = [
    "FixedDelayRateLimiter",
    "NoopRateLimiter",
    "RateLimiter",
    "TokenBucketRateLimiter",
    "clean_text",
    "has_emoji",
    "has_hashtag",
]
