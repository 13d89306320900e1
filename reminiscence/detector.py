"""
Life story detection.

A precision-first heuristic: an utterance is treated as a life story when it
matches any of the trigger patterns below. There is no language understanding
beyond these patterns.
"""

import re
from typing import List, Optional, Pattern, Tuple

_FAMILY = r"husband|wife|mother|father|dad|mum|brother|sister|son|daughter"

# (name, pattern), checked in order; any match means "story"
STORY_TRIGGERS: Tuple[Tuple[str, Pattern[str]], ...] = (
    (
        "reminiscing",
        re.compile(
            r"\bI\s+(used\s+to|remember|recall|once)"
            r"|\bback\s+in\b"
            r"|\bwhen\s+I\s+was\b"
            r"|\bin\s+my\s+day\b",
            re.IGNORECASE,
        ),
    ),
    (
        "family_habit",
        re.compile(
            rf"\bmy\s+(late\s+)?({_FAMILY})\s+(used\s+to|always|would|loved)",
            re.IGNORECASE,
        ),
    ),
    (
        "era",
        re.compile(
            r"\b(during\s+the\s+war|after\s+the\s+war|in\s+the\s+(\d0s|\d{3}0s))\b",
            re.IGNORECASE,
        ),
    ),
    (
        "life_transition",
        re.compile(
            r"\bwhen\s+I\s+(worked|lived|moved|married|retired|started|grew\s+up)\b",
            re.IGNORECASE,
        ),
    ),
    (
        "first_time",
        re.compile(
            r"\bmy\s+first\s+(job|car|house|baby|dance|kiss|day\s+at)\b",
            re.IGNORECASE,
        ),
    ),
    (
        "nostalgic_place",
        re.compile(
            r"\bthe\s+old\s+(days|times|house|school|neighbourhood|street)\b",
            re.IGNORECASE,
        ),
    ),
    (
        "origin",
        re.compile(
            r"\b(I\s+grew\s+up\s+in|we\s+lived\s+in|born\s+in|raised\s+in)\b",
            re.IGNORECASE,
        ),
    ),
)


def detect_story(text: Optional[str]) -> bool:
    """Return True if the text looks like the speaker is sharing a memory."""
    if not text:
        return False
    return any(pattern.search(text) for _, pattern in STORY_TRIGGERS)


def matching_triggers(text: Optional[str]) -> List[str]:
    """Names of every trigger family the text matches, in table order."""
    if not text:
        return []
    return [name for name, pattern in STORY_TRIGGERS if pattern.search(text)]
