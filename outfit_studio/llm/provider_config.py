"""Provider/runtime configuration for the outfit generation clients.

Architectural role:
    Centralizes endpoint/model selection and credential lookup for
    `outfit_studio.llm.client` and `outfit_studio.image.client`.

Injection model:
    Clients never read the environment themselves. `load_config()` resolves an
    `OutfitConfig` once and the caller passes it into each client constructor,
    so tests can substitute any value without touching process state.

Determinism:
    Deterministic for a fixed process environment and key file contents.

Failure behavior:
    A missing credential is represented as an empty string. No validation is
    performed here; the provider rejects the request and the client surfaces
    its generic failure message.
"""

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv()

# Default OpenAI-compatible endpoints.
CHAT_COMPLETIONS_URL = "https://api.openai.com/v1/chat/completions"
IMAGE_GENERATIONS_URL = "https://api.openai.com/v1/images/generations"

TEXT_MODEL = "gpt-4"
TEXT_TEMPERATURE = 0.7

IMAGE_MODEL = "dall-e-3"
IMAGE_SIZE = "1024x1024"
# Exactly one image is requested per submission.
IMAGE_COUNT = 1

KEY_FILE = "config/openai.key"


def load_key(path):
    """Load API key from environment override or key file.

    Resolution order:
        1. Environment variable inferred from file stem (for example
           `config/openai.key` -> `OPENAI_API_KEY`).
        2. Raw file contents at `path`.

    Args:
        path: Key file path or `None`.

    Returns:
        Key string or `None` when not available.
    """
    if not path:
        return None
    key_name = os.path.splitext(os.path.basename(path))[0].upper() + "_API_KEY"
    env_value = os.getenv(key_name)
    if env_value:
        return env_value
    if not os.path.exists(path):
        return None
    with open(path, "r") as f:
        return f.read().strip()


def _optional_float(name: str) -> float | None:
    value = os.getenv(name, "").strip()
    if not value:
        return None
    return float(value)


@dataclass(frozen=True)
class OutfitConfig:
    """Runtime configuration shared by the text and image clients.

    Relevant environment variables (read by `load_config`):
        - `OPENAI_API_KEY` (or `config/openai.key`)
        - `OUTFIT_CHAT_URL`
        - `OUTFIT_IMAGE_URL`
        - `OUTFIT_TEXT_MODEL`
        - `OUTFIT_TEMPERATURE`
        - `OUTFIT_IMAGE_MODEL`
        - `OUTFIT_IMAGE_SIZE`
        - `OUTFIT_REQUEST_TIMEOUT`

    `request_timeout=None` leaves the transport default in place, which may
    wait indefinitely.
    """

    api_key: str = field(default="", repr=False)
    chat_url: str = CHAT_COMPLETIONS_URL
    image_url: str = IMAGE_GENERATIONS_URL
    text_model: str = TEXT_MODEL
    temperature: float = TEXT_TEMPERATURE
    image_model: str = IMAGE_MODEL
    image_size: str = IMAGE_SIZE
    request_timeout: float | None = None

    def auth_headers(self) -> dict:
        """Return the JSON + bearer header pair sent on every outbound call."""
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.api_key}",
        }

    def public_view(self) -> dict:
        """Return non-secret settings for operator visibility."""
        return {
            "text_model": self.text_model,
            "temperature": self.temperature,
            "image_model": self.image_model,
            "image_size": self.image_size,
            "image_count": IMAGE_COUNT,
        }


def load_config() -> OutfitConfig:
    """Resolve an `OutfitConfig` from the current environment.

    Edge cases:
        - Missing credential -> `api_key=""` (no early failure).
        - Blank `OUTFIT_REQUEST_TIMEOUT` -> no timeout.
        - Non-numeric `OUTFIT_TEMPERATURE`/`OUTFIT_REQUEST_TIMEOUT` raise
          `ValueError` at load time.
    """
    return OutfitConfig(
        api_key=load_key(KEY_FILE) or "",
        chat_url=os.getenv("OUTFIT_CHAT_URL", CHAT_COMPLETIONS_URL),
        image_url=os.getenv("OUTFIT_IMAGE_URL", IMAGE_GENERATIONS_URL),
        text_model=os.getenv("OUTFIT_TEXT_MODEL", TEXT_MODEL),
        temperature=float(os.getenv("OUTFIT_TEMPERATURE", str(TEXT_TEMPERATURE))),
        image_model=os.getenv("OUTFIT_IMAGE_MODEL", IMAGE_MODEL),
        image_size=os.getenv("OUTFIT_IMAGE_SIZE", IMAGE_SIZE),
        request_timeout=_optional_float("OUTFIT_REQUEST_TIMEOUT"),
    )
