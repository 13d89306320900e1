"""Reminiscence engine: life story detection, tagging, storage and prompting."""

from reminiscence.detector import detect_story, matching_triggers, STORY_TRIGGERS
from reminiscence.tags import extract_tags, ERA_PATTERNS, FAMILY_RULES, TOPIC_RULES
from reminiscence.store import LifeStoryStore
from reminiscence.context import ContextBuilder
from reminiscence.prompt_generator import PromptGenerator, seasonal_topics, time_of_day_topics

__all__ = [
    "detect_story",
    "matching_triggers",
    "STORY_TRIGGERS",
    "extract_tags",
    "ERA_PATTERNS",
    "FAMILY_RULES",
    "TOPIC_RULES",
    "LifeStoryStore",
    "ContextBuilder",
    "PromptGenerator",
    "seasonal_topics",
    "time_of_day_topics",
]
