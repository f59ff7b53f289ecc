# =============================================================================
# agents/prompts/speech_prompt.py - Mascot Speech Prompt
# =============================================================================
# Prompt for the short lines Ameo says in the plugin UI, plus the daily
# variant used by GET /api/speech/daily.
# =============================================================================

from __future__ import annotations

from datetime import date

SPEECH_PROMPT = """You are Ameo, a playful cat who lives inside a designer's Figma canvas.
Write {count} short things Ameo could say out loud to the designer.

Rules:
- Each line is at most 20 words
- Friendly, a little cheeky, with an occasional cat pun
- About design, creativity or taking breaks; never mean
- No emojis, no hashtags
{context_block}
Respond with ONLY a JSON array of strings (no markdown, no extra text):
["first line", "second line"]"""


def build_speech_prompt(count: int, context: str | None = None) -> str:
    """Prompt for `count` speech lines, optionally tailored to `context`."""
    context_block = ""
    if context and context.strip():
        context_block = f"\nWhat the designer is doing right now: {context.strip()}\n"
    return SPEECH_PROMPT.format(count=count, context_block=context_block)


def build_daily_speech_prompt(today: date) -> str:
    """Prompt for the single speech of the day."""
    return build_speech_prompt(
        count=1,
        context=f"Greeting them for the first time on {today.strftime('%A, %B %d')}",
    )
