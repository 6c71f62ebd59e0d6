"""Submission orchestration for the outfit generation workflow.

Architectural role:
    Owns the sequential two-call workflow used by API/CLI layers to turn one
    user description into a `GeneratedOutfit`, and the `ViewState` those
    layers render.

Control-flow model:
    1. Clear the previous error and enter loading.
    2. Run the text-generation call (blocking client, worker thread).
    3. Run the image-generation call with the parsed prompt.
    4. Store the complete outfit in one assignment and exit loading.
    Any failure stops the remaining steps, stores only the message, and exits
    loading.

State machine:
    `Idle -> Loading -> (Success | Failed) -> Idle`, re-entrant from either
    terminal state.

Concurrency:
    No guard against overlapping submissions on one orchestrator. Two
    concurrent `submit()` calls run independent workflows that race on the
    shared state; the first to settle clears `is_loading`.

Error handling strategy:
    Every exception is logged and reduced to its message. Nothing propagates
    to the adapter layer.
"""

import asyncio
import logging
from typing import Protocol

from outfit_studio.core.state import (
    GeneratedOutfit,
    OutfitDraft,
    SubmissionOutcome,
    ViewState,
)
from outfit_studio.image.client import ImageGenerationClient
from outfit_studio.llm.client import TextGenerationClient
from outfit_studio.llm.provider_config import OutfitConfig, load_config

logger = logging.getLogger(__name__)


class TextClientProtocol(Protocol):
    """Minimal interface required for the text-generation step."""

    def generate_outfit(self, user_description: str) -> OutfitDraft:
        ...


class ImageClientProtocol(Protocol):
    """Minimal interface required for the image-generation step."""

    def generate(self, prompt: str | None) -> str:
        ...


class OutfitOrchestrator:
    """Runs submissions against injected clients and tracks view state."""

    def __init__(
        self,
        text_client: TextClientProtocol,
        image_client: ImageClientProtocol,
        state: ViewState | None = None,
    ):
        self.text_client = text_client
        self.image_client = image_client
        self.state = state if state is not None else ViewState()

    def set_input(self, text: str) -> None:
        """Replace the current user input (one call per edit)."""
        self.state.user_input = text

    async def submit(self, user_input: str | None = None) -> SubmissionOutcome:
        """Run one text -> parse -> image workflow.

        Args:
            user_input: Description to submit. Defaults to `state.user_input`.

        Returns:
            `SubmissionOutcome` holding either the new outfit or the error
            message of this submission.

        Edge cases:
            - Unlabeled replies pass `None` fields through; the image step
              still runs with whatever prompt was parsed.
            - A prior successful outfit stays in place when this run fails.
        """
        description = self.state.user_input if user_input is None else user_input

        self.state.error = None
        self.state.is_loading = True
        logger.debug("Submission started (chars=%d)", len(description))

        try:
            draft = await asyncio.to_thread(self.text_client.generate_outfit, description)
            image_url = await asyncio.to_thread(self.image_client.generate, draft.dalle_prompt)

            outfit = GeneratedOutfit(
                description=draft.description,
                image_prompt=draft.dalle_prompt,
                image_url=image_url,
            )
            self.state.generated_outfit = outfit
            logger.info("Outfit generated")
            return SubmissionOutcome(outfit=outfit)
        except Exception as err:
            logger.exception("Outfit submission failed")
            message = str(err)
            self.state.error = message
            return SubmissionOutcome(error=message)
        finally:
            self.state.is_loading = False


def create_orchestrator(config: OutfitConfig | None = None) -> OutfitOrchestrator:
    """Build an orchestrator wired to the real HTTP clients."""
    config = config or load_config()
    return OutfitOrchestrator(
        text_client=TextGenerationClient(config),
        image_client=ImageGenerationClient(config),
    )
