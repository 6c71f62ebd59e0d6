"""Flat error taxonomy for the outfit workflow.

Each client boundary converts every transport, status, or envelope failure
into one generically worded error. The specific cause is chained (`raise ...
from err`) and logged by the client, but only the message reaches the user.

Silent parse incompleteness (a missing reply label) is not represented here.
"""

GENERATION_FAILED_MESSAGE = "Failed to generate outfit description"
IMAGE_FAILED_MESSAGE = "Failed to generate image"


class OutfitStudioError(RuntimeError):
    """Base class for user-visible workflow failures."""


class OutfitGenerationError(OutfitStudioError):
    """Text-generation call failed."""

    def __init__(self, message: str = GENERATION_FAILED_MESSAGE):
        super().__init__(message)


class ImageGenerationError(OutfitStudioError):
    """Image-generation call failed."""

    def __init__(self, message: str = IMAGE_FAILED_MESSAGE):
        super().__init__(message)
