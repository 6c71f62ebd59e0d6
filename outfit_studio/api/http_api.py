"""
HTTP API adapter for the outfit generator.

Architectural role:
- Expose the submit-and-render workflow over JSON.
- Enforce adapter-level input validation.
- Delegate the two-call workflow to `outfit_studio.core.engine.OutfitOrchestrator`.

Endpoint responsibilities:
- `POST /v1/outfits`: validate `description`, run one submission, return the
  generated outfit or its error message.
- `GET /v1/outfits/config`: expose non-secret model settings.

API request lifecycle (`POST /v1/outfits`):
1. Parse request JSON and validate it against `OutfitRequest`.
2. Reject a blank `description`.
3. Build a per-request orchestrator (one view-state session per request).
4. Await `submit()` and shape the outcome.

Input validation behavior:
- Invalid JSON, missing or non-string `description` (`OutfitRequest`),
  or blank `description` -> HTTP 400.

Error handling strategy:
- Upstream workflow failures -> HTTP 502 with the generic message only.
- Engine exceptions are reduced to outcomes before reaching this module.

Side effects:
- Loads environment variables at import time via `load_dotenv()`.
- Emits request/response debug logs only when `DEBUG == "true"`.
"""

from dotenv import load_dotenv

load_dotenv()

import logging
import os

from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ValidationError

from outfit_studio.core.engine import OutfitOrchestrator, create_orchestrator
from outfit_studio.llm.provider_config import OutfitConfig, load_config

logger = logging.getLogger(__name__)

app = FastAPI(title="AI Outfit Generator")
# Request/response debug logging is opt-in.
DEBUG = os.getenv("DEBUG") == "true"


def get_config() -> OutfitConfig:
    """Resolve configuration per request so environment changes are picked up."""
    return load_config()


def get_orchestrator(config: OutfitConfig = Depends(get_config)) -> OutfitOrchestrator:
    return create_orchestrator(config)


@app.get("/v1/outfits/config")
def outfit_config(config: OutfitConfig = Depends(get_config)):
    """Return model/size settings without the credential."""
    return config.public_view()


class OutfitRequest(BaseModel):
    """Request schema for `POST /v1/outfits`."""
    description: str


@app.post("/v1/outfits")
async def create_outfit(
    request: Request,
    orchestrator: OutfitOrchestrator = Depends(get_orchestrator),
):
    """
    Generate one outfit from a free-text description.

    Input validation behavior:
    - Body that is not valid JSON -> HTTP 400.
    - Body not matching `OutfitRequest` -> HTTP 400.
    - Blank `description` -> HTTP 400.

    Response formatting:
    - 200: `{"description", "image_prompt", "image_url"}`; text fields may be
      `null` when the model reply was not labeled.
    - 400: `{"error": ...}` for invalid input.
    - 502: `{"error": ...}` when either upstream call failed.
    """
    try:
        body = await request.json()
    except ValueError:
        return JSONResponse(status_code=400, content={"error": "Request body must be valid JSON"})

    try:
        payload = OutfitRequest.model_validate(body)
    except ValidationError:
        return JSONResponse(status_code=400, content={"error": "No description provided"})

    if DEBUG:
        logger.info("Incoming outfit request: %r", payload.description)

    if not payload.description.strip():
        return JSONResponse(status_code=400, content={"error": "Description must not be empty"})

    orchestrator.set_input(payload.description)
    outcome = await orchestrator.submit()

    if not outcome.ok:
        if DEBUG:
            logger.info("Outfit request failed: %s", outcome.error)
        return JSONResponse(status_code=502, content={"error": outcome.error})

    if DEBUG:
        logger.info("Outfit request succeeded: %r", outcome.outfit)

    return outcome.outfit.to_dict()
