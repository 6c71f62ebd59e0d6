"""View-state data contracts for `outfit_studio.core.engine`.

Architectural role:
    Defines the transient records exchanged between the clients, the
    orchestrator, and the API/CLI adapters. Nothing here is persisted.

Atomicity:
    `GeneratedOutfit` is frozen and is only ever assigned to
    `ViewState.generated_outfit` as a whole, so an observer sees either `None`
    or a complete record.
"""

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class OutfitDraft:
    """Parsed text-generation reply.

    Either field is `None` when its label was absent from the reply.
    """

    description: str | None = None
    dalle_prompt: str | None = None


@dataclass(frozen=True)
class GeneratedOutfit:
    """Atomic success result of one submission."""

    description: str | None
    image_prompt: str | None
    image_url: str

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class SubmissionOutcome:
    """Result-or-error outcome of one `submit()` call.

    Exactly one of `outfit` and `error` is populated.
    """

    outfit: GeneratedOutfit | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.outfit is not None


@dataclass
class ViewState:
    """Mutable session state driving what an adapter renders.

    Attributes:
        user_input: Latest text entered by the user; never cleared here.
        is_loading: True strictly while a workflow is in flight.
        error: Message of the latest failure, cleared on each new submission.
        generated_outfit: Latest complete success result.
    """

    user_input: str = ""
    is_loading: bool = False
    error: str | None = None
    generated_outfit: GeneratedOutfit | None = None

    @property
    def phase(self) -> str:
        """Render-oriented phase label: loading, error, success or idle."""
        if self.is_loading:
            return "loading"
        if self.error is not None:
            return "error"
        if self.generated_outfit is not None:
            return "success"
        return "idle"
