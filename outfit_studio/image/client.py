"""Image-generation HTTP client.

Processing flow:
    1. Build the single-image payload from `OutfitConfig`.
    2. Submit JSON payload to the image-generation endpoint.
    3. Return the first image URL from the response envelope.

Size validation:
    - The size is forwarded as configured; no local validation.

Error handling strategy:
    - Non-2xx status, transport errors, and malformed envelopes are logged and
      re-raised as `ImageGenerationError`.

Security considerations:
    - The bearer credential is sent in headers and never logged.
"""

import logging

import requests

from outfit_studio.core.errors import ImageGenerationError
from outfit_studio.llm.provider_config import IMAGE_COUNT, OutfitConfig

logger = logging.getLogger(__name__)


class ImageGenerationClient:
    """Text-to-image client bound to one `OutfitConfig`."""

    def __init__(self, config: OutfitConfig):
        self.config = config

    def build_payload(self, prompt: str | None) -> dict:
        return {
            "model": self.config.image_model,
            "prompt": prompt,
            "n": IMAGE_COUNT,
            "size": self.config.image_size,
        }

    def generate(self, prompt: str | None) -> str:
        """Generate one image and return its URL.

        Args:
            prompt: Image prompt from the text-generation step. `None` is
                forwarded unchanged and rejected by the provider.

        Returns:
            URL of the first generated image.

        Raises:
            ImageGenerationError: Non-2xx status, transport failure, or a
                response without `data[0].url`.
        """
        try:
            response = requests.post(
                self.config.image_url,
                headers=self.config.auth_headers(),
                json=self.build_payload(prompt),
                timeout=self.config.request_timeout,
            )
            response.raise_for_status()
            return response.json()["data"][0]["url"]
        except Exception as err:
            logger.exception("Image generation failed")
            raise ImageGenerationError() from err
