"""
Shared pytest fixtures for reminiscence tests.
"""

import random
import uuid
from datetime import datetime, timedelta, timezone
from typing import Dict, List, Optional

import pytest
import pytz

from memory.payload import tags_match_filter
from reminiscence import ContextBuilder, LifeStoryStore, PromptGenerator
from schemas import (
    LifeStoryCreateSchema,
    LifeStorySchema,
    ResidentProfileSchema,
    ResidentSchema,
)


# --- In-memory collaborators ---

class FakeLifeStoryRepository:
    """LifeStoryRepository kept in a list, with the same tag filter as the database."""

    def __init__(self):
        self.records: List[LifeStorySchema] = []
        self.add_calls = 0

    async def add_life_story(self, story: LifeStoryCreateSchema) -> LifeStorySchema:
        self.add_calls += 1
        record = LifeStorySchema(id=uuid.uuid4().hex, **story.model_dump())
        self.records.append(record)
        return record

    async def get_life_stories(
        self, owner_id: str, tag: Optional[str] = None, limit: int = 50
    ) -> List[LifeStorySchema]:
        owned = [
            r for r in self.records
            if r.owner_id == owner_id and tags_match_filter(r.tags, tag)
        ]
        owned.sort(key=lambda r: r.captured_at, reverse=True)
        return owned[:limit]

    def seed(self, owner_id: str, raw_text: str, tags: List[str], minutes_ago: int = 0) -> LifeStorySchema:
        """Insert a record directly, bypassing detection."""
        record = LifeStorySchema(
            id=uuid.uuid4().hex,
            owner_id=owner_id,
            raw_text=raw_text,
            tags=tags,
            captured_at=datetime(2026, 1, 1, tzinfo=timezone.utc) - timedelta(minutes=minutes_ago),
        )
        self.records.append(record)
        return record


class FakeResidentDirectory:
    """ResidentDirectory backed by a dict."""

    def __init__(self):
        self.residents: Dict[str, ResidentSchema] = {}

    async def get_resident(self, resident_id: str) -> Optional[ResidentSchema]:
        return self.residents.get(resident_id)

    def add(self, resident_id: str, first_name: Optional[str] = None, **profile) -> ResidentSchema:
        resident = ResidentSchema(
            id=resident_id,
            first_name=first_name,
            profile=ResidentProfileSchema(**profile) if profile else None,
        )
        self.residents[resident_id] = resident
        return resident


@pytest.fixture
def repository():
    return FakeLifeStoryRepository()


@pytest.fixture
def residents():
    directory = FakeResidentDirectory()
    directory.add("res-1", "Margaret")
    return directory


@pytest.fixture
def store(repository):
    return LifeStoryStore(repository, timeout=1.0)


@pytest.fixture
def context_builder(store):
    return ContextBuilder(store)


# --- Time fixtures ---

@pytest.fixture
def fixed_now():
    """A fixed local datetime for deterministic seasonal tests."""
    tz = pytz.timezone("Europe/London")
    return tz.localize(datetime(2026, 2, 5, 14, 30, 0))  # Thursday 2:30 PM


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def generator(store, residents, rng, fixed_now):
    return PromptGenerator(store, residents, rng=rng, clock=lambda: fixed_now)


# --- Test data ---

@pytest.fixture
def sample_story():
    return "I remember my husband used to take me dancing at the Palais in 1962"


@pytest.fixture
def sample_small_talk():
    return "What's for lunch today?"
