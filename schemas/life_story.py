"""Life story schemas."""

from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, Field, ConfigDict


class LifeStoryBaseSchema(BaseModel):
    """Base life story schema."""

    owner_id: str = Field(..., min_length=1, description="Resident the story belongs to")
    raw_text: str = Field(..., description="What the resident said (truncated)")
    agent_response: str = Field(default="", description="The agent's reply at capture time (truncated)")
    tags: List[str] = Field(
        default_factory=list,
        description="Topic tags in detection order (e.g. 'era:1962', 'family:spouse', 'topic:work')",
    )


class LifeStoryCreateSchema(LifeStoryBaseSchema):
    """Schema for creating a life story."""

    captured_at: datetime = Field(..., description="When the story was captured")


class LifeStorySchema(LifeStoryBaseSchema):
    """Complete, immutable life story record."""

    id: str = Field(..., description="Life story ID")
    captured_at: datetime = Field(..., description="When the story was captured")

    model_config = ConfigDict(frozen=True)


class StoryOutSchema(BaseModel):
    """Life story as returned to API consumers."""

    id: str
    story: str
    warda_response: str = Field(default="", alias="wardaResponse")
    tags: List[str] = Field(default_factory=list)
    captured_at: datetime = Field(..., alias="capturedAt")

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_record(cls, record: LifeStorySchema) -> "StoryOutSchema":
        return cls(
            id=record.id,
            story=record.raw_text,
            warda_response=record.agent_response,
            tags=list(record.tags),
            captured_at=record.captured_at,
        )


class StoryListSchema(BaseModel):
    """A page of life stories."""

    stories: List[StoryOutSchema] = Field(default_factory=list)
    total: int = Field(..., ge=0, description="Number of stories in this response")


class StorySubmitSchema(BaseModel):
    """An utterance submitted for life story capture."""

    user_id: Optional[str] = Field(default=None, validation_alias="userId", description="Resident ID")
    story: Optional[str] = Field(default=None, description="What the resident said")
    warda_response: Any = Field(
        default="",
        validation_alias="wardaResponse",
        description="The agent's reply; non-string values are serialized before storage",
    )

    model_config = ConfigDict(populate_by_name=True)


class StorySubmitResultSchema(BaseModel):
    """Outcome of a life story submission."""

    stored: bool
    id: Optional[str] = None
    reason: Optional[str] = None


class TagCountSchema(BaseModel):
    """How many stories carry a tag."""

    tag: str
    count: int = Field(..., ge=1)


class TagSummarySchema(BaseModel):
    """Tag frequencies across a resident's recent stories."""

    tags: List[TagCountSchema] = Field(default_factory=list)
    total_stories: int = Field(..., ge=0, alias="totalStories")

    model_config = ConfigDict(populate_by_name=True)
