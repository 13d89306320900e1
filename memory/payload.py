"""
Encoding and decoding of life story rows.

This is the only place that knows the storage shape of a life story; the
detector, tagger and prompt generator work with schemas only.
"""

import json
from datetime import datetime
from typing import Any, Dict, Iterable, Optional

from schemas import LifeStoryCreateSchema, LifeStorySchema

LIFE_STORY_TYPE = "LIFE_STORY"
LIFE_STORY_LABEL = "story_captured"
RECORDED_BY = "warda-ai"


def encode_payload(story: LifeStoryCreateSchema) -> Dict[str, Any]:
    """Build the JSON payload stored on a LIFE_STORY row."""
    return {
        "residentSaid": story.raw_text,
        "wardaResponse": story.agent_response,
        "tags": list(story.tags),
        "capturedAt": story.captured_at.isoformat(),
    }


def decode_row(
    row_id: str,
    user_id: str,
    payload: Optional[Dict[str, Any]],
    created_at: datetime,
) -> LifeStorySchema:
    """Turn a stored LIFE_STORY row back into a record."""
    payload = payload or {}
    captured_at = payload.get("capturedAt")
    return LifeStorySchema(
        id=row_id,
        owner_id=user_id,
        raw_text=payload.get("residentSaid") or "",
        agent_response=payload.get("wardaResponse") or "",
        tags=payload.get("tags") or [],
        captured_at=datetime.fromisoformat(captured_at) if captured_at else created_at,
    )


def serialize_tags(tags: Iterable[str]) -> str:
    """Serialized form of a tag list, as matched by the tag filter."""
    return json.dumps(list(tags))


def tags_match_filter(tags: Iterable[str], tag: Optional[str]) -> bool:
    """
    In-memory form of the tag filter in ``AsyncDatabase.life_story_query``,
    for repositories that do not go through SQL.

    This is substring containment over the serialized tag list, not an exact
    tag match: "topic:work" also matches a record tagged "topic:workshop".
    """
    if not tag:
        return True
    return tag in serialize_tags(tags)
