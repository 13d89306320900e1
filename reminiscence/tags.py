"""
Topic tag extraction for life stories.

Tags come in three families, emitted in this order:

* ``era:<token>``       - an explicit year or a named decade
* ``family:<relation>`` - spouse, mother, father, children, sibling, grandchildren
* ``topic:<category>``  - work, education, military, marriage, travel, food,
                          garden, faith, music, sport

Each category is emitted at most once. Different categories may share a word
("teacher" yields both topic:work and topic:education).
"""

import re
from typing import List, Optional, Pattern, Tuple


def _words(*words: str) -> Pattern[str]:
    alternation = "|".join(w.replace(" ", r"\s+") for w in words)
    return re.compile(rf"\b({alternation})\b", re.IGNORECASE)


# Tried in order; the first match supplies the era token
ERA_PATTERNS: Tuple[Pattern[str], ...] = (
    re.compile(r"\b(19\d{2}|20\d{2})s?\b", re.IGNORECASE),
    re.compile(r"\b(the\s+)?(forties|fifties|sixties|seventies|eighties|nineties)\b", re.IGNORECASE),
)

FAMILY_RULES: Tuple[Tuple[str, Pattern[str]], ...] = (
    ("family:spouse", _words("husband", "wife", "spouse", "partner")),
    ("family:mother", _words("mother", "mum", "mam", "mammy", "ma")),
    ("family:father", _words("father", "dad", "daddy", "da", "papa")),
    ("family:children", _words("son", "daughter", "child", "children", "kids", "wee ones", "bairns")),
    ("family:sibling", _words("brother", "sister", "sibling")),
    ("family:grandchildren", _words("grandchild", "grandchildren", "grandkids", "grandson", "granddaughter")),
)

TOPIC_RULES: Tuple[Tuple[str, Pattern[str]], ...] = (
    ("topic:work", _words("work", "job", "career", "office", "factory", "shop", "nurse", "teacher", "builder")),
    ("topic:education", _words("school", "university", "college", "class", "teacher", "exam")),
    ("topic:military", _words("war", "army", "navy", "airforce", "military", "service")),
    ("topic:marriage", _words("wedding", "married", "marriage", "honeymoon", "engagement")),
    ("topic:travel", _words("holiday", "vacation", "trip", "travel", "abroad", "seaside", "camping")),
    ("topic:food", _words("cook", "bake", "recipe", "kitchen", "dinner", "meal", "food")),
    ("topic:garden", _words("garden", "flowers", "plants", "allotment", "growing")),
    ("topic:faith", _words("church", "chapel", "mosque", "temple", "faith", "pray", "minister", "priest", "imam")),
    ("topic:music", _words("music", "dancing", "sing", "songs", "band", "concert", "piano")),
    ("topic:sport", _words("football", "cricket", "rugby", "tennis", "swimming", "sport", "team")),
)


def extract_era(text: str) -> Optional[str]:
    """Era tag for the text, e.g. 'era:1962' or 'era:the sixties'."""
    lower = text.lower()
    for pattern in ERA_PATTERNS:
        match = pattern.search(lower)
        if match:
            return "era:" + match.group(0).strip()
    return None


def extract_tags(text: Optional[str]) -> List[str]:
    """
    Ordered topic tags for a piece of text.

    Pure and idempotent: the same input always yields the same list.
    """
    if not text:
        return []

    tags: List[str] = []
    era = extract_era(text)
    if era:
        tags.append(era)
    for tag, pattern in FAMILY_RULES + TOPIC_RULES:
        if pattern.search(text):
            tags.append(tag)
    return tags
