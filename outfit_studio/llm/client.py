"""Text-generation transport client for outfit descriptions.

Architectural role:
    Executes the chat-completion request and turns the assistant reply into an
    `OutfitDraft`.

Model invocation flow:
    `engine.OutfitOrchestrator.submit` -> `TextGenerationClient.generate_outfit`
    -> `build_outfit_prompt` -> HTTP POST -> `parse_outfit_reply`.

Retry behavior:
    No retry loop is implemented. Each call is attempted once. The timeout comes
    from `OutfitConfig.request_timeout` (unset by default).

Failure handling model:
    Every transport, status, or envelope failure is logged and re-raised as the
    flat `OutfitGenerationError`. Missing reply labels are not failures.
"""

import logging

import requests

from outfit_studio.core.errors import OutfitGenerationError
from outfit_studio.core.state import OutfitDraft
from outfit_studio.llm.provider_config import OutfitConfig
from outfit_studio.nlp.reply_parser import parse_outfit_reply
from outfit_studio.prompting.prompt_builder import build_outfit_prompt

logger = logging.getLogger(__name__)


def _status_label(err: requests.exceptions.RequestException) -> str:
    """Return `HTTP <status>` when the error carries a response, else `HTTP`."""
    status_code = None
    if getattr(err, "response", None) is not None:
        status_code = getattr(err.response, "status_code", None)
    if status_code:
        return f"HTTP {status_code}"
    return "HTTP"


class TextGenerationClient:
    """Chat-completion client bound to one `OutfitConfig`."""

    def __init__(self, config: OutfitConfig):
        self.config = config

    def build_payload(self, user_description: str) -> dict:
        return {
            "model": self.config.text_model,
            "messages": [
                {"role": "user", "content": build_outfit_prompt(user_description)}
            ],
            "temperature": self.config.temperature,
        }

    def generate_outfit(self, user_description: str) -> OutfitDraft:
        """Request an outfit description and image prompt.

        Args:
            user_description: Raw user text; may be empty, not sanitized.

        Returns:
            Parsed `OutfitDraft`; fields may be `None` on unlabeled replies.

        Raises:
            OutfitGenerationError: Non-2xx status, transport failure, or a reply
                without `choices[0].message.content`.
        """
        try:
            response = requests.post(
                self.config.chat_url,
                headers=self.config.auth_headers(),
                json=self.build_payload(user_description),
                timeout=self.config.request_timeout,
            )
            response.raise_for_status()
            data = response.json()
            content = data["choices"][0]["message"]["content"]
            if not isinstance(content, str):
                raise TypeError(f"Unexpected reply content type: {type(content).__name__}")
        except requests.exceptions.RequestException as err:
            logger.exception("Text generation request failed (%s)", _status_label(err))
            raise OutfitGenerationError() from err
        except Exception as err:
            logger.exception("Text generation reply could not be read")
            raise OutfitGenerationError() from err

        draft = parse_outfit_reply(content)
        if draft.description is None or draft.dalle_prompt is None:
            logger.warning(
                "Text generation reply is missing labels (description=%s, prompt=%s)",
                draft.description is not None,
                draft.dalle_prompt is not None,
            )
        return draft
