"""Resident schemas (read-only view of resident-profile data)."""

from typing import List, Optional

from pydantic import BaseModel, Field, ConfigDict


class ResidentProfileSchema(BaseModel):
    """Questionnaire answers used to personalise reminiscence prompts."""

    birthplace: Optional[str] = Field(None, description="Where the resident grew up")
    occupation: Optional[str] = Field(None, description="Current or most recent occupation")
    previous_occupation: Optional[str] = Field(None, description="Earlier occupation")
    hobbies: List[str] = Field(default_factory=list, description="Hobbies, in questionnaire order")

    model_config = ConfigDict(from_attributes=True)


class ResidentSchema(BaseModel):
    """A resident as seen by the reminiscence engine."""

    id: str = Field(..., description="Resident ID")
    first_name: Optional[str] = Field(None, max_length=255, description="Name used to address the resident")
    profile: Optional[ResidentProfileSchema] = Field(None, description="Questionnaire profile, if completed")

    model_config = ConfigDict(from_attributes=True)

    @property
    def display_name(self) -> str:
        """Name to address the resident by, 'dear' when unknown."""
        return self.first_name or "dear"
