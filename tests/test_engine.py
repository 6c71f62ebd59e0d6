"""
Tests for the submission orchestrator.
"""

import asyncio
import threading

import pytest

from outfit_studio.core.engine import OutfitOrchestrator, create_orchestrator
from outfit_studio.core.errors import OutfitGenerationError
from outfit_studio.core.state import GeneratedOutfit, OutfitDraft, ViewState
from outfit_studio.image.client import ImageGenerationClient
from outfit_studio.llm.client import TextGenerationClient
from tests.conftest import IMAGE_URL, FakeImageClient, FakeTextClient


def _assert_outfit_atomic(state: ViewState):
    outfit = state.generated_outfit
    assert outfit is None or (
        isinstance(outfit, GeneratedOutfit) and outfit.image_url
    )


class TestOutfitOrchestrator:

    @pytest.mark.asyncio
    async def test_job_interview_scenario(self, orchestrator, text_client, image_client):
        orchestrator.set_input("a professional outfit for a job interview")

        outcome = await orchestrator.submit()

        assert text_client.calls == ["a professional outfit for a job interview"]
        assert image_client.calls == ["photorealistic navy business suit"]
        assert outcome.ok
        assert outcome.error is None
        state = orchestrator.state
        assert state.generated_outfit == GeneratedOutfit(
            description="navy suit",
            image_prompt="photorealistic navy business suit",
            image_url=IMAGE_URL,
        )
        assert state.error is None
        assert state.is_loading is False
        assert state.phase == "success"
        assert state.user_input == "a professional outfit for a job interview"

    @pytest.mark.asyncio
    async def test_explicit_input_overrides_state(self, orchestrator, text_client):
        orchestrator.set_input("ignored")

        await orchestrator.submit("beach wedding guest")

        assert text_client.calls == ["beach wedding guest"]
        assert orchestrator.state.user_input == "ignored"

    @pytest.mark.asyncio
    async def test_text_failure_skips_image_call(self, failing_text_client, image_client):
        orchestrator = OutfitOrchestrator(failing_text_client, image_client)

        outcome = await orchestrator.submit("x")

        assert len(image_client.calls) == 0
        assert not outcome.ok
        assert outcome.outfit is None
        assert outcome.error == "Failed to generate outfit description"
        assert orchestrator.state.error == "Failed to generate outfit description"
        assert orchestrator.state.generated_outfit is None
        assert orchestrator.state.is_loading is False
        assert orchestrator.state.phase == "error"

    @pytest.mark.asyncio
    async def test_image_failure_stores_no_partial_outfit(self, text_client, failing_image_client):
        orchestrator = OutfitOrchestrator(text_client, failing_image_client)

        outcome = await orchestrator.submit("x")

        assert len(failing_image_client.calls) == 1
        assert outcome.error == "Failed to generate image"
        assert orchestrator.state.generated_outfit is None
        assert orchestrator.state.is_loading is False

    @pytest.mark.asyncio
    async def test_unexpected_exception_is_surfaced_as_message(self, image_client):
        text_client = FakeTextClient(error=ValueError("unexpected"))
        orchestrator = OutfitOrchestrator(text_client, image_client)

        outcome = await orchestrator.submit("x")

        assert outcome.error == "unexpected"
        assert orchestrator.state.is_loading is False

    @pytest.mark.asyncio
    async def test_unlabeled_reply_does_not_raise(self, image_client):
        text_client = FakeTextClient(draft=OutfitDraft(description="only text", dalle_prompt=None))
        orchestrator = OutfitOrchestrator(text_client, image_client)

        outcome = await orchestrator.submit("x")

        assert image_client.calls == [None]
        assert outcome.ok
        assert outcome.outfit.description == "only text"
        assert outcome.outfit.image_prompt is None

    @pytest.mark.asyncio
    async def test_loading_flag_spans_whole_workflow(self):
        observed = []
        orchestrator = OutfitOrchestrator(
            FakeTextClient(on_call=lambda _: observed.append(("text", orchestrator.state.is_loading))),
            FakeImageClient(on_call=lambda _: observed.append(("image", orchestrator.state.is_loading))),
        )

        assert orchestrator.state.is_loading is False
        assert orchestrator.state.phase == "idle"
        await orchestrator.submit("x")

        assert observed == [("text", True), ("image", True)]
        assert orchestrator.state.is_loading is False

    @pytest.mark.asyncio
    async def test_outfit_never_observed_partially(self):
        def inspect(_):
            _assert_outfit_atomic(orchestrator.state)

        orchestrator = OutfitOrchestrator(
            FakeTextClient(on_call=inspect),
            FakeImageClient(on_call=inspect),
        )

        await orchestrator.submit("first")
        _assert_outfit_atomic(orchestrator.state)
        await orchestrator.submit("second")
        _assert_outfit_atomic(orchestrator.state)

    @pytest.mark.asyncio
    async def test_error_cleared_on_new_submission(self, image_client):
        text_client = FakeTextClient(error=OutfitGenerationError())
        orchestrator = OutfitOrchestrator(text_client, image_client)
        await orchestrator.submit("x")
        assert orchestrator.state.error is not None

        cleared = []
        text_client.error = None
        text_client.on_call = lambda _: cleared.append(orchestrator.state.error)
        await orchestrator.submit("x")

        assert cleared == [None]
        assert orchestrator.state.error is None
        assert orchestrator.state.generated_outfit is not None

    @pytest.mark.asyncio
    async def test_failure_keeps_previous_outfit(self, text_client, image_client):
        orchestrator = OutfitOrchestrator(text_client, image_client)
        first = await orchestrator.submit("x")

        image_client.error = RuntimeError("Failed to generate image")
        outcome = await orchestrator.submit("y")

        assert outcome.outfit is None
        assert orchestrator.state.error == "Failed to generate image"
        assert orchestrator.state.generated_outfit == first.outfit

    @pytest.mark.asyncio
    async def test_success_replaces_outfit_wholesale(self, text_client, image_client):
        orchestrator = OutfitOrchestrator(text_client, image_client)
        await orchestrator.submit("x")

        text_client.draft = OutfitDraft("linen shirt", "linen shirt on a mannequin")
        image_client.url = "https://images.example.com/linen.png"
        await orchestrator.submit("y")

        assert orchestrator.state.generated_outfit == GeneratedOutfit(
            description="linen shirt",
            image_prompt="linen shirt on a mannequin",
            image_url="https://images.example.com/linen.png",
        )

    @pytest.mark.asyncio
    async def test_rapid_double_submit_runs_two_workflows(self, text_client, image_client):
        orchestrator = OutfitOrchestrator(text_client, image_client)

        first, second = await asyncio.gather(
            orchestrator.submit("one"),
            orchestrator.submit("two"),
        )

        assert sorted(text_client.calls) == ["one", "two"]
        assert len(image_client.calls) == 2
        assert first.ok and second.ok
        assert orchestrator.state.is_loading is False

    @pytest.mark.asyncio
    async def test_first_settled_submission_clears_loading_for_both(self, image_client):
        release = threading.Event()

        def hold_slow(description):
            if description == "slow":
                release.wait(timeout=5)

        text_client = FakeTextClient(on_call=hold_slow)
        orchestrator = OutfitOrchestrator(text_client, image_client)

        slow_task = asyncio.create_task(orchestrator.submit("slow"))
        await asyncio.sleep(0)
        await orchestrator.submit("fast")

        assert not slow_task.done()
        assert orchestrator.state.is_loading is False

        release.set()
        outcome = await slow_task

        assert outcome.ok
        assert orchestrator.state.is_loading is False


def test_create_orchestrator_wires_http_clients(config):
    orchestrator = create_orchestrator(config)

    assert isinstance(orchestrator.text_client, TextGenerationClient)
    assert isinstance(orchestrator.image_client, ImageGenerationClient)
    assert orchestrator.text_client.config is config
    assert orchestrator.image_client.config is config
    assert orchestrator.state == ViewState()
