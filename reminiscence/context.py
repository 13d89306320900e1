"""Life story context block for grounding the conversational agent."""

from typing import Optional

from config.settings import settings
from reminiscence.store import LifeStoryStore

CONTEXT_HEADER = "\n\nPrevious life stories shared by this resident:\n"
CONTEXT_FOOTER = "\nYou can reference these stories naturally in conversation to show you remember and care.\n"


class ContextBuilder:
    """Formats a resident's most recent life stories as prompt context."""

    def __init__(self, store: LifeStoryStore):
        self.store = store

    async def build(self, owner_id: str, max_entries: Optional[int] = None) -> str:
        """
        Text block listing up to ``max_entries`` recent stories with their tags.

        Returns an empty string when the resident has no stories (or they
        could not be read).
        """
        stories = await self.store.list(owner_id, limit=max_entries or settings.CONTEXT_MAX_ENTRIES)
        if not stories:
            return ""

        lines = [CONTEXT_HEADER]
        for story in stories:
            snippet = story.raw_text[: settings.CONTEXT_SNIPPET_LENGTH] or "Story recorded"
            lines.append(f"- {snippet} [Tags: {', '.join(story.tags)}]\n")
        lines.append(CONTEXT_FOOTER)
        return "".join(lines)
