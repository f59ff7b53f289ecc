# =============================================================================
# agents/fallbacks.py - Canned Content
# =============================================================================
# Used whenever an LLM provider is unconfigured, down, or returns something
# unusable. The plugin must always get something to show.
# =============================================================================

from __future__ import annotations

import random
from datetime import date

from core.models.feedback import FeedbackItem

FALLBACK_FEEDBACK = [
    ("Great design! Consider testing on different screen sizes.", "responsive"),
    ("Nice work! Ensure sufficient contrast for accessibility.", "accessibility"),
    ("Clean layout! Make sure spacing is consistent.", "spacing"),
    ("Good visual design! Consider the user experience on mobile.", "layout"),
    ("Lovely start! A clear type scale would make the hierarchy pop.", "typography"),
]

UNAVAILABLE_FEEDBACK = "Unable to generate feedback at this time"

FALLBACK_SPEECHES = [
    "Your layers are so tidy, I almost feel bad about knocking things off the canvas.",
    "I licked the grid. It's 8px. Purr-fect.",
    "Have you named that frame yet, or is it still 'Frame 427'?",
    "Stretch break! Even cats don't stare at pixels this long.",
    "That color palette is the cat's pajamas.",
    "I'd give this spacing a paw's up.",
    "Auto layout is my second favorite thing. First is naps.",
    "Whisker-straight alignment. I'm impressed.",
    "Remember: contrast is good for humans and cats alike.",
    "If it fits, I sits. Does your text fit its box?",
    "Ctrl+Z is like having nine lives.",
    "Good design is like a sunbeam: you just want to lie in it.",
]


def simple_feedback(rng: random.Random | None = None) -> list[FeedbackItem]:
    """One canned tip with its own category and a 0.7-0.9 confidence."""
    rng = rng or random
    feedback, category = rng.choice(FALLBACK_FEEDBACK)
    return [
        FeedbackItem(
            feedback=feedback,
            category=category,
            confidence=0.7 + rng.random() * 0.2,
        )
    ]


def unavailable_feedback() -> FeedbackItem:
    """Placeholder for a frame whose processing failed outright."""
    return FeedbackItem(feedback=UNAVAILABLE_FEEDBACK, category="general", confidence=0.0)


def fallback_speeches(count: int, rng: random.Random | None = None) -> list[str]:
    """`count` distinct canned lines (fewer if the list is shorter)."""
    rng = rng or random
    return rng.sample(FALLBACK_SPEECHES, k=min(count, len(FALLBACK_SPEECHES)))


def fallback_daily_speech(day: date) -> str:
    """The canned speech for a given day; stable for the whole day."""
    return FALLBACK_SPEECHES[day.toordinal() % len(FALLBACK_SPEECHES)]
