"""
Async database operations for the reminiscence memory system.
Production-grade implementation with async SQLAlchemy, proper error handling, and type safety.
"""

import uuid
from contextlib import asynccontextmanager
from typing import List, Optional, AsyncIterator

from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
    AsyncEngine,
)
from sqlalchemy import select, desc, cast, Select, Text
from sqlalchemy.exc import OperationalError, SQLAlchemyError
from sqlalchemy.orm import selectinload
from tenacity import (
    retry,
    stop_after_attempt,
    wait_exponential,
    retry_if_exception_type,
)

from config.settings import settings
from core import get_logger, DatabaseException, DatabaseConnectionError
from memory.models import Base, LifeLog, Resident
from memory.payload import (
    LIFE_STORY_TYPE,
    LIFE_STORY_LABEL,
    RECORDED_BY,
    encode_payload,
    decode_row,
)
from schemas import (
    LifeStoryCreateSchema,
    LifeStorySchema,
    ResidentSchema,
    ResidentProfileSchema,
)

logger = get_logger(__name__)


def _async_url(db_url: str) -> str:
    """Convert postgresql:// to postgresql+asyncpg://"""
    if db_url.startswith("postgresql://"):
        return db_url.replace("postgresql://", "postgresql+asyncpg://", 1)
    return db_url


class AsyncDatabase:
    """
    Async database interface with production-grade features:
    - Connection pooling and retry logic
    - Type-safe operations with Pydantic
    - Proper error handling and logging
    - Transaction management

    Implements LifeStoryRepository and ResidentDirectory.
    """

    def __init__(self, database_url: Optional[str] = None):
        """Initialize async database engine and session factory."""
        db_url = _async_url(database_url or settings.DATABASE_URL)

        self.engine: AsyncEngine = create_async_engine(
            db_url,
            echo=settings.LOG_LEVEL == "DEBUG",
            pool_size=10,
            max_overflow=20,
            pool_pre_ping=True,  # Verify connections before use
            pool_recycle=3600,  # Recycle connections after 1 hour
        )

        self.async_session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

        logger.info("Async database engine initialized", db_url=db_url.split("@")[-1])

    @asynccontextmanager
    async def get_session(self) -> AsyncIterator[AsyncSession]:
        """
        Context manager for database sessions with automatic cleanup.

        Yields:
            AsyncSession instance
        """
        async with self.async_session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception as e:
                await session.rollback()
                logger.error("Session rolled back", error=str(e))
                raise
            finally:
                await session.close()

    async def create_tables(self) -> None:
        """Create all database tables."""
        try:
            async with self.engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
        except (OSError, OperationalError) as e:
            logger.error("Could not reach database", error=str(e))
            raise DatabaseConnectionError(str(e))
        logger.info("Database tables created")

    async def dispose(self) -> None:
        """Close pooled connections."""
        await self.engine.dispose()
        logger.info("Database engine disposed")

    # ==================== Residents ====================

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=0.5, min=0.5, max=2),
        retry=retry_if_exception_type(SQLAlchemyError),
        reraise=True,
    )
    async def _fetch_resident(self, resident_id: str) -> Optional[Resident]:
        async with self.get_session() as session:
            result = await session.execute(
                select(Resident)
                .options(selectinload(Resident.profile))
                .where(Resident.id == resident_id)
            )
            return result.scalar_one_or_none()

    async def get_resident(self, resident_id: str) -> Optional[ResidentSchema]:
        """
        Get a resident with their questionnaire profile.

        Args:
            resident_id: Resident ID

        Returns:
            ResidentSchema if found, None otherwise

        Raises:
            DatabaseException: If database operation fails
        """
        try:
            resident = await self._fetch_resident(resident_id)
        except SQLAlchemyError as e:
            logger.error("Failed to get resident", resident_id=resident_id, error=str(e))
            raise DatabaseException(f"Failed to get resident: {e}")

        if resident is None:
            return None

        profile = None
        if resident.profile is not None:
            profile = ResidentProfileSchema(
                birthplace=resident.profile.birthplace,
                occupation=resident.profile.occupation,
                previous_occupation=resident.profile.previous_occupation,
                hobbies=[str(h) for h in (resident.profile.hobbies or [])],
            )
        return ResidentSchema(id=resident.id, first_name=resident.first_name, profile=profile)

    # ==================== Life Stories ====================

    async def add_life_story(self, story: LifeStoryCreateSchema) -> LifeStorySchema:
        """
        Insert a LIFE_STORY row.

        Args:
            story: Record to persist (already truncated and tagged)

        Returns:
            LifeStorySchema with the assigned ID

        Raises:
            DatabaseException: If database operation fails
        """
        try:
            async with self.get_session() as session:
                row = LifeLog(
                    id=uuid.uuid4().hex,
                    user_id=story.owner_id,
                    type=LIFE_STORY_TYPE,
                    value=LIFE_STORY_LABEL,
                    payload=encode_payload(story),
                    recorded_by=RECORDED_BY,
                    created_at=story.captured_at,
                )
                session.add(row)
                await session.flush()
                logger.debug("Added life story row", user_id=story.owner_id, row_id=row.id)
                return decode_row(row.id, row.user_id, row.payload, row.created_at)

        except SQLAlchemyError as e:
            logger.error("Failed to add life story", user_id=story.owner_id, error=str(e))
            raise DatabaseException(f"Failed to add life story: {e}")

    @staticmethod
    def life_story_query(owner_id: str, tag: Optional[str] = None, limit: int = 50) -> Select:
        """
        Query for a resident's life stories, newest first.

        The tag filter is a LIKE containment test against the serialized tag
        list, so "topic:work" also matches "topic:workshop".
        """
        query = select(LifeLog).where(
            LifeLog.user_id == owner_id,
            LifeLog.type == LIFE_STORY_TYPE,
        )
        if tag:
            query = query.where(cast(LifeLog.payload["tags"], Text).contains(tag, autoescape=True))
        return query.order_by(desc(LifeLog.created_at)).limit(limit)

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=0.5, min=0.5, max=2),
        retry=retry_if_exception_type(SQLAlchemyError),
        reraise=True,
    )
    async def _fetch_life_stories(self, query: Select) -> List[LifeLog]:
        async with self.get_session() as session:
            result = await session.execute(query)
            return list(result.scalars().all())

    async def get_life_stories(
        self, owner_id: str, tag: Optional[str] = None, limit: int = 50
    ) -> List[LifeStorySchema]:
        """Get a resident's life stories, most recent first."""
        try:
            rows = await self._fetch_life_stories(self.life_story_query(owner_id, tag, limit))
        except SQLAlchemyError as e:
            logger.error("Failed to get life stories", user_id=owner_id, error=str(e))
            raise DatabaseException(f"Failed to get life stories: {e}")

        return [decode_row(r.id, r.user_id, r.payload, r.created_at) for r in rows]
