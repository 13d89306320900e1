"""Reminiscence prompt schemas."""

from typing import Literal, Optional

from pydantic import BaseModel, Field, ConfigDict

PromptType = Literal["follow_up", "questionnaire_driven", "seasonal", "general"]


class PromptSchema(BaseModel):
    """A generated reminiscence prompt."""

    prompt: str = Field(..., min_length=1, description="Question to put to the resident")
    type: PromptType = Field(..., description="Which tier produced the prompt")
    based_on: Optional[str] = Field(
        None,
        alias="basedOn",
        description="ID of the life story a follow-up prompt refers to",
    )

    model_config = ConfigDict(populate_by_name=True)
