"""Style descriptions fed to the draft prompt."""

from postcraft.core.models.post import SimilarPost
from postcraft.core.models.style import StyleProfile


def _profile_usage(frequency: float) -> str:
    if frequency > 0.3:
        return "frequently"
    if frequency > 0.1:
        return "occasionally"
    return "rarely"


def _example_usage(flagged: int, total: int) -> str:
    if flagged > total * 0.5:
        return "frequently"
    if flagged > 0:
        return "occasionally"
    return "rarely"


def describe_profile(profile: StyleProfile) -> str:
    """Describe a stored style profile as prompt bullet points."""
    return "\n".join(
        [
            f"- {profile.tone} tone",
            f"- Average {profile.avg_length} characters per tweet",
            f"- {profile.sentence_structure} sentence structure",
            f"- {_profile_usage(profile.emoji_frequency)} uses emojis",
            f"- {_profile_usage(profile.hashtag_frequency)} uses hashtags",
        ]
    )


def infer_style(similar_posts: list[SimilarPost]) -> str:
    """Describe the style of the retrieved examples when no profile exists.

    Emoji and hashtag usage is bucketed by the fraction of examples that use
    them: more than half is "frequently", any is "occasionally".
    """
    total = len(similar_posts)
    if total == 0:
        return "- Casual and direct tone"

    avg_length = round(sum(sp.post.length for sp in similar_posts) / total)
    emoji_count = sum(1 for sp in similar_posts if sp.post.has_emoji)
    hashtag_count = sum(1 for sp in similar_posts if sp.post.has_hashtag)

    return "\n".join(
        [
            "- Casual and direct tone",
            f"- Average {avg_length} characters per tweet",
            "- 1-2 sentences per tweet",
            f"- {_example_usage(emoji_count, total)} uses emojis",
            f"- {_example_usage(hashtag_count, total)} uses hashtags",
        ]
    )
