"""SQLAlchemy implementation of the style profile repository.

Works with any async SQLAlchemy URL, e.g. ``postgresql+asyncpg://...`` in
production or ``sqlite+aiosqlite://`` for local runs and tests.
"""

from datetime import datetime

import structlog
from sqlalchemy import DateTime, Float, Integer, String, delete
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from postcraft.core.exceptions import RepositoryError
from postcraft.core.interfaces.repositories import StyleProfileRepository
from postcraft.core.models.style import StyleProfile

logger = structlog.get_logger(__name__)


class Base(DeclarativeBase):
    pass


class StyleProfileRow(Base):
    """One row per user; a recompute overwrites every column."""

    __tablename__ = "user_style_profiles"

    user_id: Mapped[str] = mapped_column(String(255), primary_key=True)
    avg_length: Mapped[int] = mapped_column(Integer, nullable=False)
    emoji_frequency: Mapped[float] = mapped_column(Float, nullable=False)
    hashtag_frequency: Mapped[float] = mapped_column(Float, nullable=False)
    tone: Mapped[str] = mapped_column(String(64), nullable=False)
    sentence_structure: Mapped[str] = mapped_column(String(64), nullable=False)
    posts_analyzed: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    def to_model(self) -> StyleProfile:
        return StyleProfile(
            user_id=self.user_id,
            avg_length=self.avg_length,
            emoji_frequency=self.emoji_frequency,
            hashtag_frequency=self.hashtag_frequency,
            tone=self.tone,
            sentence_structure=self.sentence_structure,
            posts_analyzed=self.posts_analyzed,
            updated_at=self.updated_at,
        )

    @classmethod
    def from_model(cls, profile: StyleProfile) -> "StyleProfileRow":
        return cls(**profile.model_dump())


class SQLStyleProfileRepository(StyleProfileRepository):
    """Style profiles stored in a relational database."""

    def __init__(self, database_url: str, engine: AsyncEngine | None = None) -> None:
        self._database_url = database_url
        self._engine = engine
        self._session_factory: async_sessionmaker[AsyncSession] | None = None

    async def _ensure_connected(self) -> async_sessionmaker[AsyncSession]:
        """Create the engine and the table on first use."""
        if self._session_factory is None:
            if self._engine is None:
                self._engine = create_async_engine(self._database_url)
            async with self._engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
            self._session_factory = async_sessionmaker(self._engine, expire_on_commit=False)
        return self._session_factory

    async def get(self, user_id: str) -> StyleProfile | None:
        try:
            session_factory = await self._ensure_connected()
            async with session_factory() as session:
                row = await session.get(StyleProfileRow, user_id)
        except SQLAlchemyError as e:
            raise RepositoryError(
                f"Failed to load style profile: {e}", details={"user_id": user_id}
            ) from e
        return row.to_model() if row is not None else None

    async def upsert(self, profile: StyleProfile) -> StyleProfile:
        try:
            session_factory = await self._ensure_connected()
            async with session_factory() as session, session.begin():
                await session.merge(StyleProfileRow.from_model(profile))
        except SQLAlchemyError as e:
            raise RepositoryError(
                f"Failed to store style profile: {e}", details={"user_id": profile.user_id}
            ) from e
        logger.info("profile.upsert.done", user_id=profile.user_id)
        return profile

    async def delete(self, user_id: str) -> bool:
        try:
            session_factory = await self._ensure_connected()
            async with session_factory() as session, session.begin():
                result = await session.execute(
                    delete(StyleProfileRow).where(StyleProfileRow.user_id == user_id)
                )
        except SQLAlchemyError as e:
            raise RepositoryError(
                f"Failed to delete style profile: {e}", details={"user_id": user_id}
            ) from e
        return (result.rowcount or 0) > 0

    async def close(self) -> None:
        if self._engine is not None:
            await self._engine.dispose()
            self._engine = None
            self._session_factory = None
