"""Image generation adapter package.

Scope:
    Provides the text-to-image client used by core orchestration after the
    text-generation step has produced a prompt.

Non-goals:
    - No image download, decoding, or storage.
    - No retry or polling; the provider answers synchronously with a URL.
"""
