"""
Reminiscence prompt generation.

Prompts are chosen by a strict fallback, the first tier with a candidate wins:

1. follow_up            - ask more about a recently shared story
2. questionnaire_driven - ask about birthplace, occupation or a hobby
3. seasonal             - a topic suggested by the month or time of day
4. general              - a generic reminiscence question (always available)
"""

import random
from datetime import datetime
from typing import Callable, List, Optional

import pytz

from config.settings import settings
from core import get_logger
from memory.repository import ResidentDirectory
from prompts.reminiscence import (
    FOLLOW_UP_TEMPLATES,
    BIRTHPLACE_TEMPLATE,
    OCCUPATION_TEMPLATE,
    HOBBY_TEMPLATE,
    SEASONAL_TOPICS,
    TIME_OF_DAY_TOPICS,
    SEASONAL_TEMPLATE,
    GENERAL_PROMPTS,
)
from reminiscence.store import LifeStoryStore
from schemas import PromptSchema, ResidentSchema

logger = get_logger(__name__)


def seasonal_topics(month_index: int) -> List[str]:
    """Topics for a month, 0 = January."""
    return list(SEASONAL_TOPICS.get(month_index, ["your favourite memories"]))


def time_of_day_topics(hour: int) -> List[str]:
    """Topics for an hour of the day; none between midnight and 6am."""
    for (start, end), topics in TIME_OF_DAY_TOPICS:
        if start <= hour < end:
            return list(topics)
    return []


def _local_now() -> datetime:
    return datetime.now(pytz.timezone(settings.TIMEZONE))


class PromptGenerator:
    """
    Produces one reminiscence prompt for a resident.

    Args:
        store: Life story store used for follow-ups
        residents: Lookup for names and questionnaire profiles
        rng: Random source; pass a seeded random.Random for reproducible choices
        clock: Returns the current local time
    """

    def __init__(
        self,
        store: LifeStoryStore,
        residents: ResidentDirectory,
        rng: Optional[random.Random] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.store = store
        self.residents = residents
        self.rng = rng or random.Random()
        self.clock = clock or _local_now

    async def generate(self, owner_id: str) -> Optional[PromptSchema]:
        """
        Generate a prompt for a resident.

        Returns:
            PromptSchema, or None only when the resident cannot be resolved
        """
        try:
            resident = await self.residents.get_resident(owner_id)
        except Exception as e:
            logger.error("Error resolving resident for prompt", owner_id=owner_id, error=str(e))
            return None

        if resident is None:
            logger.warning("Resident not found for prompt", owner_id=owner_id)
            return None

        name = resident.display_name
        prompt = (
            await self._follow_up(owner_id, name)
            or self._questionnaire_driven(resident, name)
            or self._seasonal(name)
            or self._general(name)
        )
        logger.debug("Generated reminiscence prompt", owner_id=owner_id, type=prompt.type)
        return prompt

    async def _follow_up(self, owner_id: str, name: str) -> Optional[PromptSchema]:
        stories = await self.store.list(owner_id, limit=settings.FOLLOW_UP_STORY_WINDOW)
        if not stories:
            return None

        story = self.rng.choice(stories)
        topic_tag = next((t for t in story.tags if t.startswith("topic:")), None)
        if topic_tag is None:
            return None

        template = FOLLOW_UP_TEMPLATES.get(topic_tag.split(":", 1)[1])
        if template is None:
            return None
        return PromptSchema(prompt=template.format(name=name), type="follow_up", based_on=story.id)

    def _questionnaire_driven(self, resident: ResidentSchema, name: str) -> Optional[PromptSchema]:
        profile = resident.profile
        if profile is None:
            return None

        candidates = []
        if profile.birthplace:
            candidates.append(BIRTHPLACE_TEMPLATE.format(name=name, birthplace=profile.birthplace))
        job = profile.occupation or profile.previous_occupation
        if job:
            candidates.append(OCCUPATION_TEMPLATE.format(name=name, job=job))
        if profile.hobbies:
            hobby = self.rng.choice(profile.hobbies)
            candidates.append(HOBBY_TEMPLATE.format(name=name, hobby=hobby))

        if not candidates:
            return None
        return PromptSchema(prompt=self.rng.choice(candidates), type="questionnaire_driven")

    def _seasonal(self, name: str) -> Optional[PromptSchema]:
        now = self.clock()
        topics = seasonal_topics(now.month - 1) + time_of_day_topics(now.hour)
        if not topics:
            return None
        topic = self.rng.choice(topics)
        return PromptSchema(prompt=SEASONAL_TEMPLATE.format(name=name, topic=topic), type="seasonal")

    def _general(self, name: str) -> PromptSchema:
        return PromptSchema(prompt=self.rng.choice(GENERAL_PROMPTS).format(name=name), type="general")
