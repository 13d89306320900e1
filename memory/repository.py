"""
Persistence interfaces the reminiscence engine is constructed with.

AsyncDatabase implements both; tests pass in-memory fakes.
"""

from typing import List, Optional, Protocol

from schemas import LifeStoryCreateSchema, LifeStorySchema, ResidentSchema


class LifeStoryRepository(Protocol):
    """Create/read access to life story records. There is no update or delete."""

    async def add_life_story(self, story: LifeStoryCreateSchema) -> LifeStorySchema:
        """Persist a new record and return it with its assigned ID."""
        ...

    async def get_life_stories(
        self, owner_id: str, tag: Optional[str] = None, limit: int = 50
    ) -> List[LifeStorySchema]:
        """
        Most recent records first. When ``tag`` is given only records whose
        serialized tag list contains it as a substring are returned.
        """
        ...


class ResidentDirectory(Protocol):
    """Read-only lookup of residents and their questionnaire profiles."""

    async def get_resident(self, resident_id: str) -> Optional[ResidentSchema]:
        ...
