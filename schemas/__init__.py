"""
Pydantic schemas for type-safe data transfer.
"""

from schemas.life_story import (
    LifeStoryCreateSchema,
    LifeStorySchema,
    StoryOutSchema,
    StoryListSchema,
    StorySubmitSchema,
    StorySubmitResultSchema,
    TagCountSchema,
    TagSummarySchema,
)
from schemas.resident import ResidentSchema, ResidentProfileSchema
from schemas.prompt import PromptSchema, PromptType

__all__ = [
    "LifeStoryCreateSchema",
    "LifeStorySchema",
    "StoryOutSchema",
    "StoryListSchema",
    "StorySubmitSchema",
    "StorySubmitResultSchema",
    "TagCountSchema",
    "TagSummarySchema",
    "ResidentSchema",
    "ResidentProfileSchema",
    "PromptSchema",
    "PromptType",
]
