"""
Life story capture and retrieval.

LifeStoryStore is the only component that talks to the repository. Failures
never propagate: a save that fails returns None and a listing that fails
returns an empty list, both logged.
"""

import asyncio
import json
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from config.settings import settings
from core import get_logger
from memory.repository import LifeStoryRepository
from reminiscence.detector import detect_story, matching_triggers
from reminiscence.tags import extract_tags
from schemas import (
    LifeStoryCreateSchema,
    LifeStorySchema,
    TagCountSchema,
    TagSummarySchema,
)

logger = get_logger(__name__)


def truncate_agent_response(agent_response: Any, max_length: int) -> str:
    """Empty for falsy values; non-strings are JSON-serialized before truncation."""
    if not agent_response:
        return ""
    if not isinstance(agent_response, str):
        agent_response = json.dumps(agent_response, default=str)
    return agent_response[:max_length]


class LifeStoryStore:
    """
    Save and list life stories for a resident.

    Args:
        repository: Persistence backend (AsyncDatabase in production)
        timeout: Seconds allowed for each repository call
    """

    def __init__(self, repository: LifeStoryRepository, timeout: Optional[float] = None):
        self.repository = repository
        self.timeout = timeout if timeout is not None else settings.STORE_TIMEOUT_SECONDS

    async def save(
        self, owner_id: str, raw_text: str, agent_response: Any = ""
    ) -> Optional[LifeStorySchema]:
        """
        Store the utterance as a life story if it looks like one.

        Args:
            owner_id: Resident ID
            raw_text: What the resident said
            agent_response: The agent's reply; may be any JSON-serializable value

        Returns:
            The created record, or None when no story was detected or the
            write failed or timed out
        """
        if not detect_story(raw_text):
            logger.debug("No life story detected", owner_id=owner_id)
            return None

        tags = extract_tags(raw_text)
        story = LifeStoryCreateSchema(
            owner_id=owner_id,
            raw_text=raw_text[: settings.STORY_TEXT_MAX_LENGTH],
            agent_response=truncate_agent_response(agent_response, settings.AGENT_RESPONSE_MAX_LENGTH),
            tags=tags,
            captured_at=datetime.now(timezone.utc),
        )

        try:
            record = await asyncio.wait_for(self.repository.add_life_story(story), timeout=self.timeout)
        except asyncio.TimeoutError:
            logger.warning("Life story save timed out", owner_id=owner_id, timeout=self.timeout)
            return None
        except Exception as e:
            logger.error("Error storing life story", owner_id=owner_id, error=str(e))
            return None

        logger.info(
            "Life story captured",
            owner_id=owner_id,
            story_id=record.id,
            tags=tags,
            triggers=matching_triggers(raw_text),
        )
        return record

    async def list(
        self, owner_id: str, tag: Optional[str] = None, limit: Optional[int] = None
    ) -> List[LifeStorySchema]:
        """
        A resident's life stories, most recent first.

        The tag filter is substring containment against each record's
        serialized tag list, so "topic:work" also matches "topic:workshop".
        """
        limit = limit or settings.STORY_LIST_LIMIT
        try:
            return await asyncio.wait_for(
                self.repository.get_life_stories(owner_id, tag=tag, limit=limit),
                timeout=self.timeout,
            )
        except asyncio.TimeoutError:
            logger.warning("Life story listing timed out", owner_id=owner_id, timeout=self.timeout)
            return []
        except Exception as e:
            logger.error("Error getting life stories", owner_id=owner_id, error=str(e))
            return []

    async def tag_summary(self, owner_id: str, limit: Optional[int] = None) -> TagSummarySchema:
        """
        Count tags across a resident's recent stories.

        Sorted by descending count; tags with equal counts keep the order in
        which they were first seen (newest story first).
        """
        stories = await self.list(owner_id, limit=limit or settings.TAG_SUMMARY_STORY_LIMIT)

        counts: Dict[str, int] = {}
        for story in stories:
            for tag in story.tags:
                counts[tag] = counts.get(tag, 0) + 1

        ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
        return TagSummarySchema(
            tags=[TagCountSchema(tag=tag, count=count) for tag, count in ranked],
            total_stories=len(stories),
        )
