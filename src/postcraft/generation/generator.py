"""Style-conditioned draft generator.

Orchestrates a generation request as a linear sequence of calls:
1. Embed the idea
2. Retrieve the user's most similar posts
3. Fetch the style profile, or infer a style from the retrieved posts
4. Build the prompt
5. Ask the chat model for variations and parse them
6. Score confidence
"""

import re
from typing import TYPE_CHECKING

import structlog

from postcraft.core.exceptions import NoHistoryError, ValidationError
from postcraft.core.interfaces.collaborators import ChatModel
from postcraft.core.interfaces.repositories import VectorRepository
from postcraft.core.models.draft import DraftResult
from postcraft.core.models.post import SimilarPost
from postcraft.core.models.style import StyleProfile
from postcraft.embedding.base import EmbeddingProvider
from postcraft.generation.confidence import compute_confidence
from postcraft.generation.config import GenerationConfig
from postcraft.generation.prompts import (
    SYSTEM_PROMPT,
    build_prompt,
    build_regenerate_prompt,
)
from postcraft.generation.style import describe_profile, infer_style

if TYPE_CHECKING:
    from postcraft.services.style_profiles import StyleProfileService

logger = structlog.get_logger(__name__)

_BLANK_LINE_RE = re.compile(r"\n\s*\n")


def parse_drafts(completion: str, max_length: int = 280) -> list[str]:
    """Split a completion on blank lines into trimmed, non-empty drafts.

    Entries longer than ``max_length`` characters are dropped.
    """
    drafts = (part.strip() for part in _BLANK_LINE_RE.split(completion))
    return [d for d in drafts if d and len(d) <= max_length]


class DraftGenerator:
    """Generates on-style drafts for an idea from a user's post history.

    Holds no per-request state; concurrent calls are independent. Nothing is
    retried: any failing call aborts the request.
    """

    def __init__(
        self,
        embedding_provider: EmbeddingProvider,
        vector_repo: VectorRepository,
        profiles: "StyleProfileService",
        chat_model: ChatModel,
        config: GenerationConfig | None = None,
    ) -> None:
        self._embedding = embedding_provider
        self._vector = vector_repo
        self._profiles = profiles
        self._chat = chat_model
        self._config = config or GenerationConfig()

    @property
    def config(self) -> GenerationConfig:
        return self._config

    async def generate(
        self,
        user_id: str,
        idea: str,
        num_variations: int = 3,
        top_k: int = 5,
    ) -> DraftResult:
        """Generate ``num_variations`` drafts for ``idea`` in the user's style.

        Raises:
            ValidationError: If the idea is blank or num_variations < 1.
            NoHistoryError: If no stored post of the user is similar enough.
        """
        if num_variations < 1:
            raise ValidationError(
                "num_variations must be >= 1",
                details={"num_variations": num_variations},
            )
        log = logger.bind(user_id=user_id, top_k=top_k, num_variations=num_variations)
        log.info("draft.generate.started")

        similar_posts, profile, prompt = await self._prepare(
            user_id, idea, top_k, num_variations
        )
        drafts = await self._generate_variations(
            prompt, num_variations, self._config.temperature
        )
        confidence = compute_confidence(similar_posts)

        log.info(
            "draft.generate.done",
            drafts=len(drafts),
            similar_posts=len(similar_posts),
            has_profile=profile is not None,
            confidence=round(confidence, 3),
        )
        return DraftResult(
            drafts=drafts,
            similar_posts=similar_posts,
            style_profile=profile,
            confidence=confidence,
        )

    async def regenerate(
        self,
        user_id: str,
        idea: str,
        previous_drafts: list[str],
    ) -> list[str]:
        """Generate fresh drafts, instructing the model to avoid previous ones.

        Uses a fixed retrieval size and a higher temperature than
        ``generate``; confidence is not recomputed.
        """
        count = self._config.regenerate_variations
        log = logger.bind(user_id=user_id, previous=len(previous_drafts))
        log.info("draft.regenerate.started")

        _, _, base_prompt = await self._prepare(
            user_id, idea, self._config.regenerate_top_k, count
        )
        prompt = build_regenerate_prompt(base_prompt, previous_drafts, count)
        drafts = await self._generate_variations(
            prompt, count, self._config.regenerate_temperature
        )

        log.info("draft.regenerate.done", drafts=len(drafts))
        return drafts

    async def _prepare(
        self,
        user_id: str,
        idea: str,
        top_k: int,
        count: int,
    ) -> tuple[list[SimilarPost], StyleProfile | None, str]:
        """Steps shared by generate and regenerate: embed, retrieve, style, prompt."""
        if not idea or not idea.strip():
            raise ValidationError("idea must not be empty", details={"user_id": user_id})

        idea_vector = await self._embedding.embed(idea)

        similar_posts = await self._vector.find_similar(
            user_id,
            idea_vector,
            top_k=top_k,
            min_score=self._config.min_similarity,
        )
        if not similar_posts:
            raise NoHistoryError(user_id)

        profile = await self._profiles.get(user_id)
        style = describe_profile(profile) if profile is not None else infer_style(similar_posts)

        prompt = build_prompt(
            idea,
            similar_posts,
            style,
            count=count,
            max_length=self._config.max_length,
        )
        return similar_posts, profile, prompt

    async def _generate_variations(
        self,
        prompt: str,
        count: int,
        temperature: float,
    ) -> list[str]:
        completion = await self._chat.complete(
            SYSTEM_PROMPT,
            prompt,
            temperature=temperature,
            max_tokens=self._config.max_tokens,
        )
        drafts = parse_drafts(completion, self._config.max_length)

        # Fewer drafts than requested is accepted as-is, without a retry.
        if len(drafts) < count:
            logger.warning(
                "draft.variations.short",
                requested=count,
                generated=len(drafts),
            )
        return drafts[:count]
