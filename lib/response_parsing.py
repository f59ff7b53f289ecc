# =============================================================================
# lib/response_parsing.py - Free-Form Model Text Parsing
# =============================================================================
# Models are asked for JSON but often wrap it in prose or code fences, or
# ignore the instruction and answer with a numbered list. These helpers pull
# usable structure out of whatever came back.
#
# All functions are pure and never raise on malformed input.
# =============================================================================

from __future__ import annotations

import json
import re
from typing import Any

_FENCE_RE = re.compile(r"^```[a-zA-Z_]*\s*\n?(.*?)\n?```\s*$", re.DOTALL)
_ARRAY_RE = re.compile(r"\[[\s\S]*\]")
_OBJECT_RE = re.compile(r"\{[\s\S]*\}")
_FENCE_OPEN_RE = re.compile(r"^```[a-zA-Z_]*\s*")
_JSON_START_RE = re.compile(r'\[\s*\{|\{\s*"')

_LIST_ITEM_RE = re.compile(r"^\s*(?:\d+\s*[.)]|[-*•])\s+(.*\S)\s*$")

_HEADING_RE = re.compile(r"^\s{0,3}#{1,6}\s*", re.MULTILINE)
_BLOCKQUOTE_RE = re.compile(r"^\s{0,3}>\s?", re.MULTILINE)
_IMAGE_RE = re.compile(r"!\[([^\]]*)\]\([^)]*\)")
_LINK_RE = re.compile(r"\[([^\]]+)\]\([^)]*\)")
_BOLD_RE = re.compile(r"(\*\*|__)(.+?)\1")
_ITALIC_RE = re.compile(r"(?<![\w*])([*_])(?!\s)(.+?)(?<!\s)\1(?![\w*])")
_STRIKE_RE = re.compile(r"~~(.+?)~~")
_INLINE_CODE_RE = re.compile(r"`([^`]*)`")
_LIST_MARKER_RE = re.compile(r"^\s*(?:[-*+•]|\d+[.)])\s+", re.MULTILINE)
_WHITESPACE_RE = re.compile(r"\s+")


def strip_code_fences(text: str) -> str:
    """
    Remove a Markdown code fence wrapped around the whole text.

    Example:
        strip_code_fences('```json\\n[1, 2]\\n```')  # '[1, 2]'
    """
    stripped = text.strip()
    match = _FENCE_RE.match(stripped)
    if match:
        return match.group(1).strip()
    return stripped


def extract_json_array(text: str) -> list[Any] | None:
    """
    Find the outermost [...] span in text and parse it as a JSON list.

    Returns None when there is no span or it isn't valid JSON.
    """
    match = _ARRAY_RE.search(strip_code_fences(text))
    if not match:
        return None
    try:
        parsed = json.loads(match.group(0))
    except json.JSONDecodeError:
        return None
    return parsed if isinstance(parsed, list) else None


def extract_json_object(text: str) -> dict[str, Any] | None:
    """
    Find the outermost {...} span in text and parse it as a JSON object.

    Returns None when there is no span or it isn't valid JSON.
    """
    match = _OBJECT_RE.search(strip_code_fences(text))
    if not match:
        return None
    try:
        parsed = json.loads(match.group(0))
    except json.JSONDecodeError:
        return None
    return parsed if isinstance(parsed, dict) else None


def opens_with_json(text: str) -> bool:
    """
    True if the reply starts like a JSON array or object.

    Also catches replies cut off before the closing bracket or fence,
    e.g. '```json\\n["first", "sec'.
    """
    stripped = _FENCE_OPEN_RE.sub("", strip_code_fences(text))
    return stripped.startswith(("[", "{"))


def has_json_span(text: str) -> bool:
    """
    True if text opens like JSON, or embeds an array of objects or an object
    with a quoted key somewhere after some prose.

    Bracketed prose such as "[Inter]" or a Markdown link does not count.
    """
    return opens_with_json(text) or bool(_JSON_START_RE.search(text))


def parse_numbered_list(text: str) -> list[str]:
    """
    Split a numbered or bulleted list into its items.

    Handles "1." / "1)" / "-" / "*" / "•" markers. A non-blank line without a
    marker continues the previous item; text before the first marker is
    treated as preamble and dropped.

    Example:
        parse_numbered_list("Here you go:\\n1. First\\n2) Second\\n   more")
        # ['First', 'Second more']
    """
    items: list[str] = []
    for line in strip_code_fences(text).splitlines():
        if not line.strip():
            continue
        match = _LIST_ITEM_RE.match(line)
        if match:
            items.append(match.group(1).strip())
        elif items:
            items[-1] = f"{items[-1]} {line.strip()}"
    return items


def strip_markdown(text: str) -> str:
    """
    Reduce Markdown to plain text on a single line.

    Keeps link and image alt text, drops emphasis markers, headings,
    blockquotes, list markers and inline-code backticks.
    """
    result = strip_code_fences(text)
    result = _IMAGE_RE.sub(r"\1", result)
    result = _LINK_RE.sub(r"\1", result)
    result = _HEADING_RE.sub("", result)
    result = _BLOCKQUOTE_RE.sub("", result)
    result = _LIST_MARKER_RE.sub("", result)
    result = _BOLD_RE.sub(r"\2", result)
    result = _STRIKE_RE.sub(r"\1", result)
    result = _ITALIC_RE.sub(r"\2", result)
    result = _INLINE_CODE_RE.sub(r"\1", result)
    return _WHITESPACE_RE.sub(" ", result).strip()
