"""Loose two-label parser for outfit text-generation replies.

Extraction model:
    Two independent regex searches over the raw reply:
        - description: after `Description: ` up to the first `DALL-E Prompt:`
          or end of text.
        - prompt: after the first `DALL-E Prompt: ` to end of text.
    Matching is case-sensitive, first occurrence wins, and `.` spans newlines.

Failure behavior:
    A missing label yields `None` for that field. Nothing is raised, because
    model replies are frequently not perfectly labeled and the caller decides
    what an incomplete draft means.
"""

import re

from outfit_studio.core.state import OutfitDraft
from outfit_studio.prompting.prompt_builder import DALLE_PROMPT_LABEL, DESCRIPTION_LABEL

DESCRIPTION_PATTERN = re.compile(
    re.escape(DESCRIPTION_LABEL) + r" (.*?)(?=" + re.escape(DALLE_PROMPT_LABEL) + r"|\Z)",
    re.DOTALL,
)
DALLE_PROMPT_PATTERN = re.compile(re.escape(DALLE_PROMPT_LABEL) + r" (.*?)\Z", re.DOTALL)

# Unicode whitespace plus the byte-order mark, which `str.strip()` keeps.
EDGE_WHITESPACE_PATTERN = re.compile(r"^[\s\ufeff]+|[\s\ufeff]+$")


def trim(text: str) -> str:
    """Strip leading/trailing whitespace, including stray BOM characters."""
    return EDGE_WHITESPACE_PATTERN.sub("", text)


def _extract(pattern: re.Pattern, content: str) -> str | None:
    match = pattern.search(content)
    if match is None:
        return None
    return trim(match.group(1))


def parse_outfit_reply(content: str) -> OutfitDraft:
    """Split a model reply into description and image prompt.

    Args:
        content: Assistant message text from the chat endpoint.

    Returns:
        `OutfitDraft` with trimmed fields, `None` where a label is absent.
    """
    return OutfitDraft(
        description=_extract(DESCRIPTION_PATTERN, content),
        dalle_prompt=_extract(DALLE_PROMPT_PATTERN, content),
    )
