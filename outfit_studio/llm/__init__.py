"""Text-generation access package.

Architectural role:
    Provides runtime configuration and the chat-completion transport used by
    the core orchestrator to obtain an outfit description and image prompt.

Module split:
    - `provider_config`: environment-driven endpoint, model and credential
      configuration (`OutfitConfig`).
    - `client`: chat-completion HTTP transport and reply handoff to the parser.
"""
