"""
Shared fixtures and fake clients for outfit generator tests.
"""

import pytest

from outfit_studio.core.engine import OutfitOrchestrator
from outfit_studio.core.errors import ImageGenerationError, OutfitGenerationError
from outfit_studio.core.state import OutfitDraft
from outfit_studio.llm.provider_config import OutfitConfig

NAVY_REPLY = "Description: navy suit\nDALL-E Prompt: photorealistic navy business suit"
IMAGE_URL = "https://images.example.com/navy-suit.png"


class FakeTextClient:
    """Records calls and returns a fixed draft or raises."""

    def __init__(self, draft=None, error=None, on_call=None):
        self.draft = draft or OutfitDraft("navy suit", "photorealistic navy business suit")
        self.error = error
        self.on_call = on_call
        self.calls = []

    def generate_outfit(self, user_description):
        self.calls.append(user_description)
        if self.on_call is not None:
            self.on_call(user_description)
        if self.error is not None:
            raise self.error
        return self.draft


class FakeImageClient:
    """Records calls and returns a fixed URL or raises."""

    def __init__(self, url=IMAGE_URL, error=None, on_call=None):
        self.url = url
        self.error = error
        self.on_call = on_call
        self.calls = []

    def generate(self, prompt):
        self.calls.append(prompt)
        if self.on_call is not None:
            self.on_call(prompt)
        if self.error is not None:
            raise self.error
        return self.url


@pytest.fixture
def config():
    return OutfitConfig(api_key="test-key")


@pytest.fixture
def text_client():
    return FakeTextClient()


@pytest.fixture
def image_client():
    return FakeImageClient()


@pytest.fixture
def orchestrator(text_client, image_client):
    return OutfitOrchestrator(text_client=text_client, image_client=image_client)


@pytest.fixture
def failing_text_client():
    return FakeTextClient(error=OutfitGenerationError())


@pytest.fixture
def failing_image_client():
    return FakeImageClient(error=ImageGenerationError())
