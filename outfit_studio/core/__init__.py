"""Core orchestration package.

Architectural role:
    Exposes the submission workflow that sits between API/CLI entrypoints and
    the text/image clients.

Composition:
    - `engine`: sequential two-call workflow and view-state transitions.
    - `state`: transient records (`ViewState`, `GeneratedOutfit`, ...).
    - `errors`: flat, user-visible failure types.

Determinism and side effects:
    Package import itself is side-effect free. Network side effects are
    performed by the clients during `OutfitOrchestrator.submit`.
"""
