"""Prompt assembly for the outfit text-generation call.

This module only builds the instruction string. Model invocation and reply
parsing happen in `outfit_studio.llm.client` and `outfit_studio.nlp`.

Design constraints:
    - Deterministic construction for identical inputs.
    - No hidden side effects (no I/O, no global state mutation).

Prompt safety model:
    The user description is interpolated as a raw string. No length or content
    validation is applied.
"""

# Labels requested here are also the patterns `outfit_studio.nlp.reply_parser` matches.
DESCRIPTION_LABEL = "Description:"
DALLE_PROMPT_LABEL = "DALL-E Prompt:"

OUTFIT_PROMPT_TEMPLATE = (
    "\n"
    "    Create a detailed outfit description and a DALL-E prompt based on this "
    "request: \"{user_description}\"\n"
    "    \n"
    "    Provide your response in the following format:\n"
    f"    {DESCRIPTION_LABEL} [detailed outfit description]\n"
    f"    {DALLE_PROMPT_LABEL} [optimized prompt for image generation]\n"
    "  "
)


def build_outfit_prompt(user_description: str) -> str:
    """Build the two-section outfit instruction for the chat model.

    Args:
        user_description: Free text supplied by the user; may be empty.

    Returns:
        Prompt asking for a `Description:` line and a `DALL-E Prompt:` line.
    """
    return OUTFIT_PROMPT_TEMPLATE.format(user_description=user_description)
