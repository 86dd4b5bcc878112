"""Prompt templates for draft generation."""

from postcraft.core.models.post import SimilarPost

SYSTEM_PROMPT = (
    "You are a professional tweet writer who perfectly mimics user writing styles."
)

DRAFT_PROMPT = """You are an AI that writes tweets in the exact same style as the user.

Below are several example tweets written by this user.
These examples were chosen because their content is similar to the user's new idea.

<EXAMPLES_START>
{examples}
<EXAMPLES_END>

Here is a summary of the user's writing style:
{style}

Now, write **{count} tweet variations** for the following idea, strictly matching the user's personal style:

"{idea}"

Rules:
- Do NOT sound like generic AI.
- Match the user's rhythm, sentence length, tone, vocabulary, and attitude.
- Follow the user's typical use of emojis, line breaks, and pacing.
- Do NOT add explanations. Just output the tweets.
- Return tweets separated by a blank line.
- Each tweet must be under {max_length} characters."""

AVOID_PREVIOUS_BLOCK = """

Note: Avoid these previous attempts:
{previous}

Generate {count} NEW variations that are different from above."""


def build_prompt(
    idea: str,
    similar_posts: list[SimilarPost],
    style: str,
    count: int,
    max_length: int = 280,
) -> str:
    """Build the generation prompt with the retrieved posts as examples."""
    return DRAFT_PROMPT.format(
        examples="\n\n".join(sp.post.text for sp in similar_posts),
        style=style,
        count=count,
        idea=idea,
        max_length=max_length,
    )


def build_regenerate_prompt(base_prompt: str, previous_drafts: list[str], count: int) -> str:
    """Append the list of drafts the model must not repeat."""
    return base_prompt + AVOID_PREVIOUS_BLOCK.format(
        previous="\n".join(previous_drafts),
        count=count,
    )
