"""
Prompts module - fixed phrasing used to talk to residents.

Import prompts directly:
    from prompts import FOLLOW_UP_TEMPLATES, GENERAL_PROMPTS

Or import from specific modules:
    from prompts.reminiscence import SEASONAL_TOPICS
"""

from prompts.reminiscence import (
    FOLLOW_UP_TEMPLATES,
    BIRTHPLACE_TEMPLATE,
    OCCUPATION_TEMPLATE,
    HOBBY_TEMPLATE,
    SEASONAL_TOPICS,
    TIME_OF_DAY_TOPICS,
    SEASONAL_TEMPLATE,
    GENERAL_PROMPTS,
)

__all__ = [
    "FOLLOW_UP_TEMPLATES",
    "BIRTHPLACE_TEMPLATE",
    "OCCUPATION_TEMPLATE",
    "HOBBY_TEMPLATE",
    "SEASONAL_TOPICS",
    "TIME_OF_DAY_TOPICS",
    "SEASONAL_TEMPLATE",
    "GENERAL_PROMPTS",
]
